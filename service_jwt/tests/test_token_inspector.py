"""
Unit tests for TokenInspector.
"""

import pytest

from service_jwt.app.inspection.token_inspector import (
    TokenDecodeRequest,
    TokenEncodeRequest,
    TokenInspector,
    TokenVerificationRequest,
    strip_bearer,
)
from service_jwt.app.tokens import encode_token
from shared.errors import MissingSecretError, UnsupportedAlgorithmError
from shared.metrics import MetricsCollector

NOW = 1672531200


class TestTokenInspector:
    """Test cases for TokenInspector."""

    @pytest.fixture
    def metrics(self):
        """Create an isolated metrics collector."""
        return MetricsCollector("jwt-test")

    @pytest.fixture
    def inspector(self, metrics):
        """Create TokenInspector with a frozen clock."""
        return TokenInspector(metrics=metrics, clock=lambda: NOW)

    @pytest.fixture
    def token(self):
        payload = {"sub": "user1", "iat": NOW - 300, "exp": NOW + 7200}
        return encode_token({"alg": "HS256"}, payload, "test-secret-key")

    def test_decode_success(self, inspector, token, metrics):
        """Test decode with claim evaluation."""
        response = inspector.decode(TokenDecodeRequest(token=token))

        # Assertions
        assert response.valid is True
        assert response.header == {"alg": "HS256", "typ": "JWT"}
        assert response.payload["sub"] == "user1"
        assert response.algorithm_description == "HMAC with SHA-256"
        assert response.claims["time_remaining"] == "2 hours"
        assert response.claims["token_age"] == "5 minutes"
        assert response.claims["expired"] is False
        assert response.signature_valid is None
        assert metrics.sample_value("jwt_operations_total", {"operation": "decode", "outcome": "ok"}) == 1.0

    def test_decode_with_secret_verifies(self, inspector, token):
        good = inspector.decode(TokenDecodeRequest(token=token, secret="test-secret-key"))
        bad = inspector.decode(TokenDecodeRequest(token=token, secret="nope"))

        assert good.signature_valid is True
        assert bad.signature_valid is False

    def test_decode_accepts_bearer_prefix(self, inspector, token):
        response = inspector.decode(TokenDecodeRequest(token=f"Bearer {token}"))

        assert response.valid is True

    def test_decode_failure(self, inspector, metrics):
        response = inspector.decode(TokenDecodeRequest(token="invalid.token"))

        assert response.valid is False
        assert response.code == "MALFORMED_FORMAT"
        assert response.header is None
        assert metrics.sample_value(
            "jwt_operations_total", {"operation": "decode", "outcome": "MALFORMED_FORMAT"}
        ) == 1.0

    def test_decode_uses_clock(self, metrics, token):
        later = TokenInspector(metrics=metrics, clock=lambda: NOW + 86400)

        response = later.decode(TokenDecodeRequest(token=token))

        assert response.claims["expired"] is True
        assert response.claims["time_remaining"] == "Expired"

    def test_encode_uses_default_algorithm(self, metrics):
        inspector = TokenInspector(metrics=metrics, clock=lambda: NOW, default_algorithm="HS512")

        response = inspector.encode(TokenEncodeRequest(payload={"sub": "user1"}, secret="s"))

        assert response.algorithm == "HS512"
        assert len(response.token.split(".")) == 3

    def test_encode_requires_secret(self, inspector):
        with pytest.raises(MissingSecretError) as exc_info:
            inspector.encode(TokenEncodeRequest(payload={"sub": "user1"}))

        assert exc_info.value.message == "Secret is required for encoding"

    def test_encode_unsupported_algorithm(self, inspector, metrics):
        request = TokenEncodeRequest(payload={"sub": "user1"}, secret="s", algorithm="RS256")

        with pytest.raises(UnsupportedAlgorithmError):
            inspector.encode(request)

        assert metrics.sample_value(
            "jwt_operations_total", {"operation": "encode", "outcome": "UNSUPPORTED_ALGORITHM"}
        ) == 1.0

    def test_verify(self, inspector, token):
        ok = inspector.verify(TokenVerificationRequest(token=token, secret="test-secret-key"))
        mismatch = inspector.verify(TokenVerificationRequest(token=token, secret="other"))

        assert ok.valid is True
        assert ok.error is None
        assert mismatch.valid is False
        assert mismatch.code == "SIGNATURE_MISMATCH"

    def test_algorithms_listing(self, inspector):
        algorithms = inspector.algorithms()
        ids = [entry.id for entry in algorithms]

        assert ids[:4] == ["HS256", "HS384", "HS512", "none"]
        assert "RS256" in ids
        assert all(entry.supported for entry in algorithms[:4])
        assert not any(entry.supported for entry in algorithms[4:])

    def test_sample(self, inspector):
        sample = inspector.sample()

        assert sample.header == {"alg": "HS256", "typ": "JWT"}
        assert sample.payload["iat"] == NOW
        assert sample.payload["exp"] == NOW + 3600
        assert inspector.decode(TokenDecodeRequest(token=sample.token)).valid is True


@pytest.mark.parametrize("raw,expected", [
    ("abc", "abc"),
    ("Bearer abc", "abc"),
    ("  Bearer   abc  ", "abc"),
    ("bearer abc", "bearer abc"),
])
def test_strip_bearer(raw, expected):
    assert strip_bearer(raw) == expected
