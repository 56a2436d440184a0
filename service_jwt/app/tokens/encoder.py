"""
Token encoder.
"""

from typing import Any, Mapping

from shared.logging import get_logger
from .codec import encode_json
from .models import JwtHeader
from .signing import sign, signing_input

logger = get_logger("jwt.encoder")

DEFAULT_ALGORITHM = "HS256"
DEFAULT_TYPE = "JWT"


def build_header(header: Mapping[str, Any], algorithm: str) -> JwtHeader:
    """Return a new header with `alg` forced and `typ` defaulted.

    The caller's mapping is left untouched.
    """
    normalized = JwtHeader(header)
    normalized["alg"] = algorithm
    if "typ" not in normalized:
        normalized["typ"] = DEFAULT_TYPE
    return normalized


def encode_token(
    header: Mapping[str, Any],
    payload: Mapping[str, Any],
    secret: str,
    algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """Assemble and sign a compact token.

    Claims are not validated; an `exp` in the past is encoded as given.

    Raises:
        UnsupportedAlgorithmError: if `algorithm` cannot be signed.
    """
    header_segment = encode_json(build_header(header, algorithm))
    payload_segment = encode_json(dict(payload))

    signature = sign(signing_input(header_segment, payload_segment), secret, algorithm)

    logger.debug("Token encoded", algorithm=algorithm)
    return f"{header_segment}.{payload_segment}.{signature}"
