from enum import Enum

# Headers
HEADER_CONTENT_TYPE = "content-type"
HEADER_ACCEPT = "Accept"

# MIME types
MIME_TYPE_JSON = "application/json"
MIME_TYPE_FORM = "application/x-www-form-urlencoded"

# Protocols
PROTOCOL_HTTP = "http"
PROTOCOL_HTTPS = "https"
SUPPORTED_PROTOCOLS = (PROTOCOL_HTTP, PROTOCOL_HTTPS)

# Environment
ENV_BASE_URL = "JSONHTTP_BASE_URL"


class HttpMethod(str, Enum):
    """HTTP methods supported by the client."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"


# Header presets
JSON_HEADERS: dict[str, str] = {
    HEADER_ACCEPT: MIME_TYPE_JSON,
    "Content-Type": f"{MIME_TYPE_JSON}; charset=UTF-8",
}

FORM_HEADERS: dict[str, str] = {
    "Content-Type": f"{MIME_TYPE_FORM}; charset=UTF-8",
}
