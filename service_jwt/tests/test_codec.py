"""
Tests for the base64url codec and JSON segment helpers.
"""

import pytest

from service_jwt.app.tokens.codec import base64url_decode, base64url_encode, decode_json, encode_json
from shared.errors import Base64DecodeError, ClaimsParseError


class TestBase64Url:
    """Test cases for base64url encoding."""

    def test_encode_uses_url_safe_alphabet_without_padding(self):
        """Bytes that map to '+' and '/' come out as '-' and '_'."""
        assert base64url_encode(b"\xfb\xff") == "-_8"

    def test_encode_strips_padding(self):
        assert base64url_encode(b"a") == "YQ"
        assert base64url_encode(b"ab") == "YWI"
        assert base64url_encode(b"abc") == "YWJj"

    def test_decode_restores_missing_padding(self):
        assert base64url_decode("YQ") == b"a"
        assert base64url_decode("-_8") == b"\xfb\xff"

    def test_decode_empty_string(self):
        assert base64url_decode("") == b""

    @pytest.mark.parametrize("value", ["+/8", "Y=Q", "a b", "abc!", "日本"])
    def test_decode_rejects_characters_outside_alphabet(self, value):
        with pytest.raises(Base64DecodeError) as exc_info:
            base64url_decode(value)

        assert exc_info.value.code == "BASE64_DECODE_ERROR"

    def test_decode_rejects_impossible_length(self):
        with pytest.raises(Base64DecodeError):
            base64url_decode("abcde")

    def test_decode_accepts_correct_padding(self):
        assert base64url_decode("YQ==") == b"a"
        assert base64url_decode("YWI=") == b"ab"
        assert base64url_decode("YWJj") == b"abc"

    @pytest.mark.parametrize("value", ["YQ=", "YQ===", "YWI==", "YWJj=", "="])
    def test_decode_rejects_corrupt_padding(self, value):
        with pytest.raises(Base64DecodeError) as exc_info:
            base64url_decode(value)

        assert "padding" in exc_info.value.message


class TestJsonSegments:
    """Test cases for JSON segment helpers."""

    def test_encode_json_is_compact(self):
        segment = encode_json({"alg": "HS256", "typ": "JWT"})

        assert segment == "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"

    def test_non_ascii_claims_survive(self):
        claims = {"name": "Zoë", "city": "東京"}

        assert decode_json(encode_json(claims)) == claims

    def test_decode_json_rejects_non_object(self):
        # "[]"
        with pytest.raises(ClaimsParseError) as exc_info:
            decode_json("W10")

        assert "JSON object" in exc_info.value.message

    def test_decode_json_rejects_invalid_json(self):
        with pytest.raises(ClaimsParseError) as exc_info:
            decode_json(base64url_encode(b"{not json"))

        assert exc_info.value.code == "CLAIMS_PARSE_ERROR"

    def test_decode_json_rejects_invalid_utf8(self):
        with pytest.raises(ClaimsParseError):
            decode_json(base64url_encode(b"\xff\xfe{}"))

    def test_decode_json_rejects_deep_nesting(self):
        with pytest.raises(ClaimsParseError) as exc_info:
            decode_json(base64url_encode(b"[" * 100000 + b"]" * 100000))

        assert "nesting too deep" in exc_info.value.message

    @pytest.mark.parametrize("raw", [b'{"exp":1e400}', b'{"exp":-1e400}', b'{"exp":NaN}', b'{"exp":Infinity}'])
    def test_decode_json_rejects_non_finite_numbers(self, raw):
        with pytest.raises(ClaimsParseError) as exc_info:
            decode_json(base64url_encode(raw))

        assert exc_info.value.code == "CLAIMS_PARSE_ERROR"

    def test_decode_json_keeps_large_finite_numbers(self):
        assert decode_json(base64url_encode(b'{"exp":1e300}')) == {"exp": 1e300}
