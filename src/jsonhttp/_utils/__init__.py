from ._content import (
    ContentKind,
    decode_body,
    encode_body,
    is_form_content,
    is_json_content,
    merge_headers,
    negotiate_content,
)
from ._logs import setup_logging
from ._request_spec import RequestSpec
from ._url import normalize_url

__all__ = [
    "ContentKind",
    "decode_body",
    "encode_body",
    "is_form_content",
    "is_json_content",
    "merge_headers",
    "negotiate_content",
    "normalize_url",
    "setup_logging",
    "RequestSpec",
]
