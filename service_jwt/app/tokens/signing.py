"""
Signing engine for the HMAC family.
"""

from typing import Dict

from jwt.algorithms import HMACAlgorithm

from shared.errors import UnsupportedAlgorithmError
from shared.logging import get_logger
from .algorithms import NONE_ALGORITHM
from .codec import base64url_encode

logger = get_logger("jwt.signing")

_HMAC_ALGORITHMS: Dict[str, HMACAlgorithm] = {
    "HS256": HMACAlgorithm(HMACAlgorithm.SHA256),
    "HS384": HMACAlgorithm(HMACAlgorithm.SHA384),
    "HS512": HMACAlgorithm(HMACAlgorithm.SHA512),
}


def signing_input(header_segment: str, payload_segment: str) -> bytes:
    """Build the `{header}.{payload}` message that gets signed."""
    return f"{header_segment}.{payload_segment}".encode("utf-8")


def sign(message: bytes, secret: str, algorithm: str) -> str:
    """Sign `message` and return the base64url signature segment.

    The secret is used as its UTF-8 bytes and handed straight to the HMAC
    primitive, so any string (including PEM-looking text) is a valid key.
    "none" yields an empty signature and offers no protection.

    Raises:
        UnsupportedAlgorithmError: for anything outside HS256/HS384/HS512/none.
    """
    if algorithm == NONE_ALGORITHM:
        return ""

    hmac_algorithm = _HMAC_ALGORITHMS.get(algorithm)
    if hmac_algorithm is None:
        logger.debug("Refusing to sign", algorithm=algorithm)
        raise UnsupportedAlgorithmError(algorithm)

    digest = hmac_algorithm.sign(message, secret.encode("utf-8"))
    return base64url_encode(digest)
