"""
Shared error handling for the JWT Toolkit.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: Dict[str, Any] = {}


class JwtToolkitException(Exception):
    """Base exception for JWT Toolkit services."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            details=self.details
        )


class TokenError(JwtToolkitException):
    """Base class for every failure raised by the token engine."""


class EmptyInputError(TokenError):
    """Token (or another required input) is empty."""

    def __init__(self, message: str = "Token is empty", details: Optional[Dict[str, Any]] = None):
        super().__init__("EMPTY_INPUT", message, details)


class MalformedTokenError(TokenError):
    """Token does not have three dot-separated segments."""

    def __init__(
        self,
        message: str = "Invalid token format. JWT should have three parts separated by dots.",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__("MALFORMED_FORMAT", message, details)


class Base64DecodeError(TokenError):
    """Segment is not valid base64url."""

    def __init__(self, message: str = "Invalid base64url data", details: Optional[Dict[str, Any]] = None):
        super().__init__("BASE64_DECODE_ERROR", message, details)


class ClaimsParseError(TokenError):
    """Header or payload is not a JSON object."""

    def __init__(self, message: str = "Invalid JSON in token segment", details: Optional[Dict[str, Any]] = None):
        super().__init__("CLAIMS_PARSE_ERROR", message, details)


class UnsupportedAlgorithmError(TokenError):
    """Algorithm cannot be executed by the signing engine."""

    def __init__(self, algorithm: str, details: Optional[Dict[str, Any]] = None):
        self.algorithm = algorithm
        super().__init__("UNSUPPORTED_ALGORITHM", f"Unsupported algorithm: {algorithm}", details)


class MissingAlgorithmError(TokenError):
    """Header carries no `alg`."""

    def __init__(self, message: str = "No algorithm specified in header", details: Optional[Dict[str, Any]] = None):
        super().__init__("MISSING_ALGORITHM", message, details)


class MissingSecretError(TokenError):
    """Secret required but not supplied."""

    def __init__(self, message: str = "Token and secret are required", details: Optional[Dict[str, Any]] = None):
        super().__init__("MISSING_SECRET", message, details)


class SignatureMismatchError(TokenError):
    """Recomputed signature differs from the token's."""

    def __init__(self, message: str = "Signature verification failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("SIGNATURE_MISMATCH", message, details)
