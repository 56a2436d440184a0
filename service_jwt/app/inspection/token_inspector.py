"""
Token inspection service for the JWT debugger.
"""

import time
from datetime import timezone
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, Field

from shared.errors import MissingSecretError, UnsupportedAlgorithmError
from shared.logging import get_logger
from shared.metrics import MetricsCollector
from ..tokens import (
    decode_token,
    default_header,
    default_payload,
    encode_token,
    generate_sample_token,
    get_algorithm_description,
    get_supported_algorithms,
    summarize_claims,
    verify_signature,
)
from ..tokens.algorithms import ALGORITHM_DESCRIPTIONS


class TokenDecodeRequest(BaseModel):
    """Request model for token decoding."""
    token: str
    secret: Optional[str] = None


class TokenDecodeResponse(BaseModel):
    """Response model for token decoding."""
    valid: bool
    header: Optional[Dict[str, Any]] = None
    payload: Optional[Dict[str, Any]] = None
    signature: Optional[str] = None
    algorithm_description: Optional[str] = None
    claims: Optional[Dict[str, Any]] = None
    signature_valid: Optional[bool] = None
    error: Optional[str] = None
    code: Optional[str] = None


class TokenEncodeRequest(BaseModel):
    """Request model for token encoding."""
    header: Dict[str, Any] = Field(default_factory=dict)
    payload: Dict[str, Any]
    secret: str = ""
    algorithm: Optional[str] = None


class TokenEncodeResponse(BaseModel):
    """Response model for token encoding."""
    token: str
    algorithm: str


class TokenVerificationRequest(BaseModel):
    """Request model for signature verification."""
    token: str
    secret: str


class TokenVerificationResponse(BaseModel):
    """Response model for signature verification."""
    valid: bool
    error: Optional[str] = None
    code: Optional[str] = None


class AlgorithmInfo(BaseModel):
    """One entry of the algorithm listing."""
    id: str
    description: str
    supported: bool


class SampleTokenResponse(BaseModel):
    """Sample token plus the default encoder inputs."""
    token: str
    header: Dict[str, Any]
    payload: Dict[str, Any]


def strip_bearer(token: str) -> str:
    """Remove an Authorization-style "Bearer " prefix if present."""
    token = token.strip()
    if token.startswith("Bearer "):
        token = token[7:].strip()
    return token


class TokenInspector:
    """Debugger operations on top of the token engine.

    The inspector is the collaborator that reads the clock; the engine only
    ever receives `now` as an argument.
    """

    def __init__(
        self,
        metrics: Optional[MetricsCollector] = None,
        clock: Callable[[], float] = time.time,
        default_algorithm: str = "HS256",
        sample_lifetime: int = 3600,
    ):
        self.metrics = metrics
        self.clock = clock
        self.default_algorithm = default_algorithm
        self.sample_lifetime = sample_lifetime
        self.logger = get_logger("jwt.inspector")

    def now(self) -> int:
        return int(self.clock())

    def _record(self, operation: str, outcome: str):
        if self.metrics is not None:
            self.metrics.record_token_operation(operation, outcome)

    def decode(self, request: TokenDecodeRequest) -> TokenDecodeResponse:
        """Decode a token, evaluate its claims and optionally verify it."""
        token = strip_bearer(request.token)
        result = decode_token(token)

        if not result.valid:
            self._record("decode", result.code)
            self.logger.info("Token decode rejected", code=result.code)
            return TokenDecodeResponse(valid=False, error=result.error, code=result.code)

        decoded = result.decoded
        summary = summarize_claims(decoded.payload, self.now(), timezone.utc)

        signature_valid = None
        if request.secret:
            signature_valid = verify_signature(token, request.secret).valid

        self._record("decode", "ok")
        return TokenDecodeResponse(
            valid=True,
            header=dict(decoded.header),
            payload=dict(decoded.payload),
            signature=decoded.signature,
            algorithm_description=get_algorithm_description(decoded.header.alg or ""),
            claims=summary.to_dict(),
            signature_valid=signature_valid,
        )

    def encode(self, request: TokenEncodeRequest) -> TokenEncodeResponse:
        """Sign a header/payload pair.

        Raises:
            MissingSecretError: when no secret is supplied.
            UnsupportedAlgorithmError: for algorithms the engine cannot sign.
        """
        algorithm = request.algorithm or self.default_algorithm

        if not request.secret:
            self._record("encode", "MISSING_SECRET")
            raise MissingSecretError("Secret is required for encoding")

        try:
            token = encode_token(request.header, request.payload, request.secret, algorithm)
        except UnsupportedAlgorithmError as exc:
            self._record("encode", exc.code)
            raise

        self._record("encode", "ok")
        return TokenEncodeResponse(token=token, algorithm=algorithm)

    def verify(self, request: TokenVerificationRequest) -> TokenVerificationResponse:
        """Verify a token signature."""
        result = verify_signature(strip_bearer(request.token), request.secret)

        self._record("verify", "ok" if result.valid else result.code)
        return TokenVerificationResponse(valid=result.valid, error=result.error, code=result.code)

    def algorithms(self) -> List[AlgorithmInfo]:
        """List every known algorithm, executable ones first."""
        supported = get_supported_algorithms()
        ordered = supported + [alg for alg in ALGORITHM_DESCRIPTIONS if alg not in supported]
        return [
            AlgorithmInfo(
                id=alg,
                description=get_algorithm_description(alg),
                supported=alg in supported,
            )
            for alg in ordered
        ]

    def sample(self) -> SampleTokenResponse:
        """Return the demonstration token and default encoder inputs."""
        now = self.now()
        return SampleTokenResponse(
            token=generate_sample_token(now, self.sample_lifetime),
            header=dict(default_header()),
            payload=dict(default_payload(now, self.sample_lifetime)),
        )
