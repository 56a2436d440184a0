"""
Demonstration header, payload and token for the debugger.
"""

from .codec import encode_json
from .models import JwtHeader, JwtPayload

# Well-formed but not a signature of the sample content under any secret
SAMPLE_SIGNATURE = "SflKxwRJSMeKKF2QT4fwpMeJf36POk6yJV_adQssw5c"
SAMPLE_SECRET = "your-256-bit-secret"


def default_header() -> JwtHeader:
    return JwtHeader(alg="HS256", typ="JWT")


def default_payload(now: int, lifetime: int = 3600) -> JwtPayload:
    return JwtPayload(
        sub="1234567890",
        name="John Doe",
        iat=now,
        exp=now + lifetime,
    )


def generate_sample_token(now: int, lifetime: int = 3600) -> str:
    """Build a decodable token whose signature deliberately does not verify."""
    payload = default_payload(now, lifetime)
    payload["email"] = "john.doe@example.com"
    payload["admin"] = True

    return f"{encode_json(default_header())}.{encode_json(payload)}.{SAMPLE_SIGNATURE}"
