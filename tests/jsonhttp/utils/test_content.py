import pytest

from jsonhttp._utils import (
    ContentKind,
    decode_body,
    encode_body,
    is_form_content,
    is_json_content,
    merge_headers,
    negotiate_content,
)
from jsonhttp._utils.constants import FORM_HEADERS, JSON_HEADERS


class TestMergeHeaders:
    def test_per_call_headers_win(self):
        merged = merge_headers({"Accept": "text/plain", "X-A": "1"}, {"Accept": "*/*"})
        assert merged == {"Accept": "*/*", "X-A": "1"}

    def test_keys_are_stored_as_given(self):
        merged = merge_headers({"X-App": "1"}, {"x-request-id": "abc"})
        assert merged == {"X-App": "1", "x-request-id": "abc"}

    def test_per_call_header_replaces_default_with_other_case(self):
        merged = merge_headers(JSON_HEADERS, {"content-type": "text/plain"})
        assert merged == {"Accept": "application/json", "content-type": "text/plain"}
        assert negotiate_content(merged) is ContentKind.RAW

    def test_missing_mappings(self):
        assert merge_headers(None, None) == {}


class TestContentDetection:
    @pytest.mark.parametrize(
        "key", ["Content-Type", "content-type", "CONTENT-TYPE", "cOnTeNt-TyPe"]
    )
    def test_json_detection_ignores_key_case(self, key: str):
        assert is_json_content({key: "application/json; charset=UTF-8"}) is True

    def test_plain_text_is_not_json(self):
        assert is_json_content({"content-type": "text/plain"}) is False

    def test_no_content_type(self):
        assert is_json_content({"Accept": "application/json"}) is False

    def test_form_detection(self):
        assert is_form_content(FORM_HEADERS) is True
        assert is_form_content(JSON_HEADERS) is False

    def test_negotiate(self):
        assert negotiate_content(JSON_HEADERS) is ContentKind.JSON
        assert negotiate_content(FORM_HEADERS) is ContentKind.FORM
        assert negotiate_content({"Content-Type": "text/plain"}) is ContentKind.RAW
        assert negotiate_content({}) is ContentKind.RAW


class TestEncodeBody:
    def test_no_data(self):
        assert encode_body(None, ContentKind.JSON) is None

    def test_json_is_compact(self):
        assert encode_body({"name": "x"}, ContentKind.JSON) == '{"name":"x"}'

    def test_json_keeps_unicode(self):
        assert encode_body({"name": "zoë"}, ContentKind.JSON) == '{"name":"zoë"}'

    def test_form(self):
        body = encode_body({"a": "1 2", "b": ["x", "y"], "c": None}, ContentKind.FORM)
        assert body == "a=1+2&b=x&b=y"

    def test_form_string_passes_through(self):
        assert encode_body("a=1", ContentKind.FORM) == "a=1"

    def test_form_bytes_pass_through(self):
        assert encode_body(b"a=1&b=2", ContentKind.FORM) == b"a=1&b=2"

    def test_raw_string_and_bytes_pass_through(self):
        assert encode_body("hello", ContentKind.RAW) == "hello"
        assert encode_body(b"\x00\x01", ContentKind.RAW) == b"\x00\x01"

    def test_raw_structured_value_is_sent_as_json(self):
        assert encode_body([1, 2], ContentKind.RAW) == "[1,2]"


class TestDecodeBody:
    def test_json_body(self):
        headers = {"content-type": "application/json"}
        assert decode_body('{"a":1}', headers) == {"a": 1}

    def test_invalid_json_falls_back_to_text(self):
        headers = {"content-type": "application/json"}
        assert decode_body("not json", headers) == "not json"

    def test_empty_json_body_falls_back_to_text(self):
        headers = {"content-type": "application/json"}
        assert decode_body("", headers) == ""

    def test_non_json_body_is_untouched(self):
        assert decode_body('{"a":1}', {"content-type": "text/plain"}) == '{"a":1}'
