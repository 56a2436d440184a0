"""
Base64URL codec and JSON segment helpers.
"""

import base64
import binascii
import json
import math
import re
from typing import Any, Dict

from shared.errors import Base64DecodeError, ClaimsParseError

_BASE64URL_RE = re.compile(r"[A-Za-z0-9_-]*=*")


def base64url_encode(data: bytes) -> str:
    """Encode bytes as unpadded URL-safe base64."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def base64url_decode(data: str) -> bytes:
    """Decode URL-safe base64, padded or not.

    Trailing `=` is accepted only when it is exactly the padding a base64
    encoder would have produced for the data before it.

    Raises:
        Base64DecodeError: on characters outside the URL-safe alphabet,
            misplaced or excess padding, or a length no base64 encoder can
            produce.
    """
    if not _BASE64URL_RE.fullmatch(data):
        raise Base64DecodeError("Invalid base64url data: unexpected character")

    body = data.rstrip("=")
    padding = len(data) - len(body)
    if len(body) % 4 == 1:
        raise Base64DecodeError("Invalid base64url data: corrupt length")
    if padding and padding != -len(body) % 4:
        raise Base64DecodeError("Invalid base64url data: corrupt padding")

    padded = body + "=" * (-len(body) % 4)
    try:
        return base64.urlsafe_b64decode(padded.encode("ascii"))
    except (binascii.Error, ValueError) as exc:
        raise Base64DecodeError(f"Invalid base64url data: {exc}") from exc


def encode_json(obj: Dict[str, Any]) -> str:
    """Serialize a claim bag compactly as UTF-8 JSON, then base64url it."""
    text = json.dumps(obj, separators=(",", ":"), ensure_ascii=False)
    return base64url_encode(text.encode("utf-8"))


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ClaimsParseError(f"Invalid JSON: number out of range: {text}")
    return value


def _reject_constant(name: str):
    raise ClaimsParseError(f"Invalid JSON: non-standard constant {name}")


def decode_json(segment: str) -> Dict[str, Any]:
    """Inverse of `encode_json`. Only JSON objects are accepted.

    NaN, Infinity and numbers that overflow a float are rejected; they have
    no JSON text representation to re-encode to.
    """
    raw = base64url_decode(segment)
    try:
        value = json.loads(
            raw.decode("utf-8"),
            parse_float=_finite_float,
            parse_constant=_reject_constant,
        )
    except UnicodeDecodeError as exc:
        raise ClaimsParseError(f"Invalid UTF-8 in segment: {exc.reason}") from exc
    except json.JSONDecodeError as exc:
        raise ClaimsParseError(f"Invalid JSON: {exc.msg}") from exc
    except ValueError as exc:
        # e.g. integer literals longer than the interpreter's digit limit
        raise ClaimsParseError(f"Invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise ClaimsParseError("Invalid JSON: nesting too deep") from exc

    if not isinstance(value, dict):
        raise ClaimsParseError(f"Expected a JSON object, got {type(value).__name__}")
    return value
