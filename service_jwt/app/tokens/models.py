"""
Value objects produced and consumed by the token engine.

Header and payload are open claim bags: plain ordered dicts with typed
accessors for the registered names, so unrecognized claims survive a
decode/encode round-trip untouched.
"""

import math
from dataclasses import dataclass
from typing import Any, List, Optional, Union


def _str_claim(bag: dict, name: str) -> Optional[str]:
    value = bag.get(name)
    return value if isinstance(value, str) else None


def _int_claim(bag: dict, name: str) -> Optional[int]:
    value = bag.get(name)
    # bool is an int subclass but never a timestamp
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    # JSON allows 1e400 and NaN, which have no integer value
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return int(value)


class JwtHeader(dict):
    """JOSE header."""

    @property
    def alg(self) -> Optional[str]:
        return _str_claim(self, "alg")

    @property
    def typ(self) -> Optional[str]:
        return _str_claim(self, "typ")

    @property
    def kid(self) -> Optional[str]:
        return _str_claim(self, "kid")


class JwtPayload(dict):
    """Claims set. Numeric claims are seconds since the epoch."""

    @property
    def iss(self) -> Optional[str]:
        return _str_claim(self, "iss")

    @property
    def sub(self) -> Optional[str]:
        return _str_claim(self, "sub")

    @property
    def aud(self) -> Optional[Union[str, List[str]]]:
        value = self.get("aud")
        if isinstance(value, str):
            return value
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return value
        return None

    @property
    def exp(self) -> Optional[int]:
        return _int_claim(self, "exp")

    @property
    def nbf(self) -> Optional[int]:
        return _int_claim(self, "nbf")

    @property
    def iat(self) -> Optional[int]:
        return _int_claim(self, "iat")

    @property
    def jti(self) -> Optional[str]:
        return _str_claim(self, "jti")


@dataclass(frozen=True)
class DecodedToken:
    """The three parts of a successfully decoded token."""

    header: JwtHeader
    payload: JwtPayload
    signature: str


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of decoding: either `decoded` or `error`/`code`, never both."""

    valid: bool
    decoded: Optional[DecodedToken] = None
    error: Optional[str] = None
    code: Optional[str] = None

    def __post_init__(self):
        if self.valid != (self.decoded is not None):
            raise ValueError("decoded must be set exactly when the result is valid")
        if self.valid == (self.error is not None):
            raise ValueError("error must be set exactly when the result is invalid")

    @classmethod
    def success(cls, decoded: DecodedToken) -> "DecodeResult":
        return cls(valid=True, decoded=decoded)

    @classmethod
    def failure(cls, error: str, code: str) -> "DecodeResult":
        return cls(valid=False, error=error, code=code)


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of signature verification."""

    valid: bool
    error: Optional[str] = None
    code: Optional[str] = None

    def __post_init__(self):
        if self.valid == (self.error is not None):
            raise ValueError("error must be set exactly when the result is invalid")

    @classmethod
    def success(cls) -> "VerificationResult":
        return cls(valid=True)

    @classmethod
    def failure(cls, error: str, code: str) -> "VerificationResult":
        return cls(valid=False, error=error, code=code)


@dataclass(frozen=True)
class ClaimSummary:
    """Time-related facts about a payload at a given reference time."""

    expired: bool
    not_yet_valid: bool
    time_remaining: str
    token_age: str
    issued_at: str
    not_before: str
    expires_at: str

    def to_dict(self) -> dict:
        return {
            "expired": self.expired,
            "not_yet_valid": self.not_yet_valid,
            "time_remaining": self.time_remaining,
            "token_age": self.token_age,
            "issued_at": self.issued_at,
            "not_before": self.not_before,
            "expires_at": self.expires_at,
        }


def as_payload(value: Any) -> JwtPayload:
    return value if isinstance(value, JwtPayload) else JwtPayload(value)
