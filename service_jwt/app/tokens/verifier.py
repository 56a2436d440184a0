"""
Signature verifier.

Checks run in a fixed order and stop at the first failure:

1. token and secret are present
2. the token has three segments
3. the header names an algorithm
4. the recomputed signature equals the token's third segment

The payload segment is signed over but never parsed here. The final
comparison is plain string equality, and a header with alg "none" verifies
against an empty signature; callers that need protection against timing
attacks or algorithm confusion must add their own policy on top.
"""

from shared.errors import (
    EmptyInputError,
    MalformedTokenError,
    MissingAlgorithmError,
    MissingSecretError,
    SignatureMismatchError,
    TokenError,
)
from shared.logging import get_logger
from .codec import decode_json
from .models import JwtHeader, VerificationResult
from .signing import sign, signing_input

logger = get_logger("jwt.verifier")

REQUIRED_MESSAGE = "Token and secret are required"


def _failure(exc: TokenError) -> VerificationResult:
    logger.info("Token verification failed", code=exc.code)
    return VerificationResult.failure(exc.message, exc.code)


def verify_signature(token: str, secret: str) -> VerificationResult:
    """Verify a token's HMAC signature against a shared secret."""
    if not token:
        return _failure(EmptyInputError(REQUIRED_MESSAGE))
    if not secret:
        return _failure(MissingSecretError(REQUIRED_MESSAGE))

    parts = token.split(".")
    if len(parts) != 3:
        return _failure(MalformedTokenError("Invalid token format"))
    header_segment, payload_segment, signature = parts

    try:
        header = JwtHeader(decode_json(header_segment))
        algorithm = header.alg
        if not algorithm:
            raise MissingAlgorithmError()

        expected = sign(signing_input(header_segment, payload_segment), secret, algorithm)
    except TokenError as exc:
        return _failure(exc)

    if expected != signature:
        return _failure(SignatureMismatchError())

    logger.debug("Token signature verified", algorithm=algorithm)
    return VerificationResult.success()
