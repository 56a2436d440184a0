"""
Token engine.

Pure functions over explicit inputs (token, secret, algorithm, reference
time); nothing in this package reads the clock or keeps state between calls.

- codec: base64url and JSON segment helpers
- algorithms: algorithm registry and descriptions
- signing: HMAC signing engine
- decoder: token -> header/payload/signature, no verification
- encoder: header/payload/secret -> signed token
- verifier: signature check against a shared secret
- claims: expiry/not-before/age evaluation against a caller-supplied `now`
- samples: demonstration header, payload and token
"""

from .algorithms import get_algorithm_description, get_supported_algorithms, is_supported_algorithm
from .claims import (
    format_timestamp,
    is_expired,
    is_not_yet_valid,
    summarize_claims,
    time_remaining,
    token_age,
)
from .decoder import decode_token, get_unverified_header
from .encoder import build_header, encode_token
from .models import (
    ClaimSummary,
    DecodedToken,
    DecodeResult,
    JwtHeader,
    JwtPayload,
    VerificationResult,
)
from .samples import default_header, default_payload, generate_sample_token
from .signing import sign
from .verifier import verify_signature

__all__ = [
    "ClaimSummary",
    "DecodedToken",
    "DecodeResult",
    "JwtHeader",
    "JwtPayload",
    "VerificationResult",
    "build_header",
    "decode_token",
    "default_header",
    "default_payload",
    "encode_token",
    "format_timestamp",
    "generate_sample_token",
    "get_algorithm_description",
    "get_supported_algorithms",
    "get_unverified_header",
    "is_expired",
    "is_not_yet_valid",
    "is_supported_algorithm",
    "sign",
    "summarize_claims",
    "time_remaining",
    "token_age",
    "verify_signature",
]
