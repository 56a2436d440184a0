"""
Tests for structured logging and request correlation.
"""

import json
import logging
import uuid

import pytest
from fastapi.testclient import TestClient

from service_jwt.app.main import create_app
from service_jwt.app.tokens import encode_token
from shared.logging import (
    add_correlation_context,
    add_service_context,
    clear_context,
    set_request_id,
)


@pytest.fixture(autouse=True)
def reset_context():
    yield
    clear_context()


def _events(caplog):
    events = []
    for record in caplog.records:
        try:
            events.append(json.loads(record.getMessage()))
        except ValueError:
            continue
    return events


class TestCorrelationContext:
    """Test cases for the correlation processor."""

    def test_request_id_is_added(self):
        set_request_id("req-123")

        event = add_correlation_context(None, "info", {"event": "Token decoded"})

        assert event["request_id"] == "req-123"

    def test_no_request_id_after_clear(self):
        set_request_id("req-123")
        clear_context()

        event = add_correlation_context(None, "info", {"event": "Token decoded"})

        assert "request_id" not in event

    def test_generates_request_id_when_none_given(self):
        request_id = set_request_id()

        assert str(uuid.UUID(request_id)) == request_id
        assert add_correlation_context(None, "info", {})["request_id"] == request_id


class TestServiceContext:
    """Test cases for the service processor."""

    def test_service_taken_from_dotted_logger_name(self):
        event = add_service_context(None, "info", {"logger": "jwt.verifier"})

        assert event["service"] == "jwt"

    def test_plain_logger_name_adds_nothing(self):
        assert "service" not in add_service_context(None, "info", {"logger": "jwt"})


class TestRequestLogging:
    """Request IDs flow from the X-Request-ID header into every log event of that request."""

    @pytest.fixture
    def client(self):
        return TestClient(create_app())

    def test_request_id_reaches_log_events(self, client, caplog):
        caplog.set_level(logging.INFO)
        token = encode_token({"alg": "HS256"}, {"sub": "user1"}, "right-secret")

        response = client.post(
            "/jwt/verify",
            json={"token": token, "secret": "wrong-secret"},
            headers={"X-Request-ID": "req-123"},
        )

        assert response.status_code == 200
        events = _events(caplog)
        access = [event for event in events if event.get("event") == "HTTP request"]
        verification = [event for event in events if event.get("event") == "Token verification failed"]
        assert access and access[-1]["request_id"] == "req-123"
        assert verification and verification[-1]["request_id"] == "req-123"
        assert verification[-1]["service"] == "jwt"

    def test_request_id_does_not_leak_between_requests(self, client, caplog):
        caplog.set_level(logging.INFO)

        client.get("/", headers={"X-Request-ID": "first"})
        client.get("/")

        access = [event for event in _events(caplog) if event.get("event") == "HTTP request"]
        assert access[-2]["request_id"] == "first"
        assert access[-1]["request_id"] != "first"
