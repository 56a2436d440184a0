"""
Token decoder.

Splits a compact token into its header, payload and signature without
verifying anything. Verification is a separate operation (see verifier).
"""

from typing import List

from shared.errors import (
    Base64DecodeError,
    ClaimsParseError,
    EmptyInputError,
    MalformedTokenError,
    TokenError,
)
from shared.logging import get_logger
from .codec import decode_json
from .models import DecodedToken, DecodeResult, JwtHeader, JwtPayload

logger = get_logger("jwt.decoder")


def split_token(token: str) -> List[str]:
    """Split a token into exactly three segments or raise."""
    parts = token.split(".")
    if len(parts) != 3:
        raise MalformedTokenError(details={"segments": len(parts)})
    return parts


def _decode_segment(segment: str, label: str) -> dict:
    try:
        return decode_json(segment)
    except (Base64DecodeError, ClaimsParseError) as exc:
        # Keep the error kind, name the segment that failed
        raise type(exc)(f"Failed to decode {label}: {exc.message}") from exc


def get_unverified_header(token: str) -> JwtHeader:
    """Return the header of a token without looking at the rest of it.

    Raises:
        MalformedTokenError, Base64DecodeError, ClaimsParseError
    """
    header_segment = split_token(token)[0]
    return JwtHeader(_decode_segment(header_segment, "header"))


def decode_token(token: str) -> DecodeResult:
    """Decode a token into header, payload and raw signature.

    Never raises for bad input; every failure comes back as an invalid
    `DecodeResult` with a code from the error taxonomy.
    """
    if not token or not token.strip():
        error = EmptyInputError()
        return DecodeResult.failure(error.message, error.code)

    try:
        header_segment, payload_segment, signature = split_token(token.strip())
        header = JwtHeader(_decode_segment(header_segment, "header"))
        payload = JwtPayload(_decode_segment(payload_segment, "payload"))
    except TokenError as exc:
        logger.debug("Token decode failed", code=exc.code)
        return DecodeResult.failure(exc.message, exc.code)

    return DecodeResult.success(
        DecodedToken(header=header, payload=payload, signature=signature)
    )
