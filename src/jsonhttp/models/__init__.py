from .errors import InvalidUrlError, JsonHttpError, TransportError
from .request import ResolvedRequest
from .response import ResponseEnvelope

__all__ = [
    "InvalidUrlError",
    "JsonHttpError",
    "ResolvedRequest",
    "ResponseEnvelope",
    "TransportError",
]
