from httpx import TransportError


class JsonHttpError(Exception):
    """Base class for errors raised by the client itself."""


class InvalidUrlError(JsonHttpError, ValueError):
    """Raised when a request URL cannot be resolved to an absolute http(s) URL."""

    def __init__(self, url: str, reason: str = "invalid URL") -> None:
        self.url = url
        self.reason = reason
        self.message = f"Cannot resolve URL '{url}': {reason}"
        super().__init__(self.message)


__all__ = [
    "JsonHttpError",
    "InvalidUrlError",
    "TransportError",
]
