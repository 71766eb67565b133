import json
from enum import Enum
from logging import getLogger
from typing import Any, Mapping, Optional, Union
from urllib.parse import urlencode

from .constants import HEADER_CONTENT_TYPE, MIME_TYPE_FORM, MIME_TYPE_JSON

logger = getLogger("jsonhttp")


class ContentKind(str, Enum):
    """How a request body is serialized, negotiated from ``Content-Type``."""

    JSON = "json"
    FORM = "form"
    RAW = "raw"


def merge_headers(
    defaults: Optional[Mapping[str, str]], overrides: Optional[Mapping[str, str]]
) -> dict[str, str]:
    """Merge default and per-call headers.

    Keys keep their casing. A per-call header replaces any default whose name
    matches case-insensitively.
    """
    overrides = overrides or {}
    overridden = {key.lower() for key in overrides}
    merged = {
        key: value
        for key, value in (defaults or {}).items()
        if key.lower() not in overridden
    }
    merged.update(overrides)
    return merged


def _content_type_contains(headers: Mapping[str, str], mime_type: str) -> bool:
    return any(
        key.lower() == HEADER_CONTENT_TYPE and mime_type in value
        for key, value in headers.items()
    )


def is_json_content(headers: Mapping[str, str]) -> bool:
    return _content_type_contains(headers, MIME_TYPE_JSON)


def is_form_content(headers: Mapping[str, str]) -> bool:
    return _content_type_contains(headers, MIME_TYPE_FORM)


def negotiate_content(headers: Mapping[str, str]) -> ContentKind:
    """Pick the body serialization for the final, merged header set."""
    if is_json_content(headers):
        return ContentKind.JSON
    if is_form_content(headers):
        return ContentKind.FORM
    return ContentKind.RAW


def _dump_json(data: Any) -> str:
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def _encode_form(data: Any) -> Union[str, bytes]:
    if isinstance(data, (str, bytes)):
        return data
    if isinstance(data, Mapping):
        items = [(key, value) for key, value in data.items() if value is not None]
    else:
        items = [(key, value) for key, value in data if value is not None]
    return urlencode(items, doseq=True)


def encode_body(data: Any, kind: ContentKind) -> Optional[Union[str, bytes]]:
    """Serialize an outbound body.

    Args:
        data: The request payload. None means no body is sent.
        kind: Negotiated content kind.

    Returns:
        The serialized body, or None when there is nothing to send.

    JSON bodies are compact, like ``JSON.stringify``. Form bodies expand
    sequences into repeated keys. Raw bodies pass str/bytes through unchanged;
    any other value is still sent as JSON.
    """
    if data is None:
        return None

    if kind is ContentKind.JSON:
        return _dump_json(data)
    if kind is ContentKind.FORM:
        return _encode_form(data)
    if isinstance(data, (str, bytes)):
        return data
    return _dump_json(data)


def decode_body(raw: str, headers: Mapping[str, str]) -> Any:
    """Decode a response body, parsing JSON when the headers declare it.

    A body that fails to parse is returned as the original string.
    """
    if not is_json_content(headers):
        return raw

    try:
        return json.loads(raw)
    except ValueError:
        logger.debug("Response declared JSON but could not be parsed, using text")
        return raw
