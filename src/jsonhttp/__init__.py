"""Minimal HTTP/HTTPS client with base URL resolution and JSON/form bodies."""

from ._client import HttpClient, normalize_method
from ._config import ClientConfig
from ._utils import ContentKind, RequestSpec, is_form_content, is_json_content
from ._utils.constants import (
    FORM_HEADERS,
    JSON_HEADERS,
    MIME_TYPE_FORM,
    MIME_TYPE_JSON,
    HttpMethod,
)
from .models import (
    InvalidUrlError,
    JsonHttpError,
    ResolvedRequest,
    ResponseEnvelope,
    TransportError,
)

__all__ = [
    "HttpClient",
    "ClientConfig",
    "ContentKind",
    "RequestSpec",
    "ResolvedRequest",
    "ResponseEnvelope",
    "HttpMethod",
    "JSON_HEADERS",
    "FORM_HEADERS",
    "MIME_TYPE_JSON",
    "MIME_TYPE_FORM",
    "InvalidUrlError",
    "JsonHttpError",
    "TransportError",
    "is_json_content",
    "is_form_content",
    "normalize_method",
]
