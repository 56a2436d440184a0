"""
Algorithm registry.

Only the HMAC family and "none" can be executed; the asymmetric identifiers
are listed so that headers naming them can still be described.
"""

from typing import Dict, List

NONE_ALGORITHM = "none"

ALGORITHM_DESCRIPTIONS: Dict[str, str] = {
    "HS256": "HMAC with SHA-256",
    "HS384": "HMAC with SHA-384",
    "HS512": "HMAC with SHA-512",
    "RS256": "RSA Signature with SHA-256",
    "RS384": "RSA Signature with SHA-384",
    "RS512": "RSA Signature with SHA-512",
    "ES256": "ECDSA Signature with SHA-256",
    "ES384": "ECDSA Signature with SHA-384",
    "ES512": "ECDSA Signature with SHA-512",
    "PS256": "RSASSA-PSS with SHA-256",
    "PS384": "RSASSA-PSS with SHA-384",
    "PS512": "RSASSA-PSS with SHA-512",
    NONE_ALGORITHM: "No digital signature or MAC",
}

SUPPORTED_ALGORITHMS = ("HS256", "HS384", "HS512", NONE_ALGORITHM)


def get_algorithm_description(alg: str) -> str:
    return ALGORITHM_DESCRIPTIONS.get(alg) or f"Unknown algorithm: {alg}"


def get_supported_algorithms() -> List[str]:
    return list(SUPPORTED_ALGORITHMS)


def is_supported_algorithm(alg: str) -> bool:
    return alg in SUPPORTED_ALGORITHMS
