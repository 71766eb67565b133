"""URL and query string normalization.

Request URLs may carry an embedded query string, may be relative to the
client's base URL, and may be combined with an explicit ``query`` mapping.
Everything here collapses those inputs into one absolute ``httpx.URL``.
"""

from typing import Any, Mapping, Optional
from urllib.parse import urlencode

from httpx import URL, InvalidURL, QueryParams

from ..models.errors import InvalidUrlError
from .constants import SUPPORTED_PROTOCOLS


def split_query(url: str) -> tuple[str, dict[str, Any]]:
    """Split ``url`` into its path part and its decoded embedded query.

    Repeated keys decode to a list of values. A fragment is discarded.
    """
    url, _, _ = url.partition("#")
    path_part, sep, query_string = url.partition("?")
    if not sep or not query_string:
        return path_part, {}

    params = QueryParams(query_string)
    embedded: dict[str, Any] = {}
    for key in params.keys():
        values = params.get_list(key)
        embedded[key] = values if len(values) > 1 else values[0]
    return path_part, embedded


def merge_query(
    embedded: Mapping[str, Any], query: Optional[Mapping[str, Any]]
) -> dict[str, Any]:
    """Merge embedded and explicit query params; explicit keys win.

    Keys whose value is None are dropped.
    """
    merged = {**embedded, **(query or {})}
    return {key: value for key, value in merged.items() if value is not None}


def _query_value(value: Any) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    return str(value)


def encode_query(query: Mapping[str, Any]) -> str:
    pairs = []
    for key, value in query.items():
        values = value if isinstance(value, (list, tuple)) else [value]
        pairs.extend((key, _query_value(v)) for v in values if v is not None)
    if not pairs:
        return ""
    return "?" + urlencode(pairs)


def join_url(base_url: str, path: str) -> str:
    if path.startswith("/"):
        path = path[1:]
    if base_url.endswith("/"):
        base_url = base_url[:-1]
    return f"{base_url}/{path}"


def _is_absolute(url: str) -> bool:
    # "users:search" parses with a scheme but is a relative path
    try:
        scheme = URL(url).scheme
    except InvalidURL:
        return False
    return scheme in SUPPORTED_PROTOCOLS or "://" in url


def normalize_url(
    url: str,
    query: Optional[Mapping[str, Any]] = None,
    base_url: Optional[str] = None,
) -> URL:
    """Resolve ``url`` into an absolute URL with a single merged query string.

    Args:
        url: Absolute URL, or a path relative to ``base_url``. May contain an
            embedded query string.
        query: Explicit query params. Take precedence over embedded params with
            the same key. None values are dropped.
        base_url: Optional prefix for relative URLs. Ignored when ``url`` is
            already absolute.

    Returns:
        URL: The parsed absolute URL.

    Raises:
        InvalidUrlError: If the URL is relative and no base URL is configured,
            cannot be parsed, or does not use http/https.
    """
    path_part, embedded = split_query(url)
    merged = merge_query(embedded, query)

    if _is_absolute(path_part):
        absolute = path_part
    elif base_url:
        absolute = join_url(base_url, path_part)
    else:
        raise InvalidUrlError(url, "relative URL without a configured base URL")

    full_url = absolute + encode_query(merged)

    try:
        parsed = URL(full_url)
    except InvalidURL as e:
        raise InvalidUrlError(full_url, str(e)) from e

    if parsed.scheme not in SUPPORTED_PROTOCOLS:
        raise InvalidUrlError(full_url, f"unsupported protocol '{parsed.scheme}'")
    if not parsed.host:
        raise InvalidUrlError(full_url, "missing host")

    return parsed
