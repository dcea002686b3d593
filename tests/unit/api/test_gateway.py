"""Tests for the API Gateway.

These tests verify that:
1. GET / answers the liveness check
2. POST /users returns the shared validator's outcome as HTTP
3. Error handling works as expected
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from shared_validators.api.gateway import app
from tests.fixtures.users import (
    INVALID_USER_PAYLOAD,
    NO_AGE_PAYLOAD,
    valid_user_payload,
)


@pytest.fixture
def client():
    """Create a test client for the API."""
    return TestClient(app)


class TestHealthEndpoint:
    """Tests for the / endpoint."""

    def test_root_returns_ok(self, client):
        """Liveness check should report ok."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "message": "API is running 🚀"}


class TestCreateUserEndpoint:
    """Tests for POST /users."""

    def test_valid_user_returns_200(self, client):
        """Valid payloads are echoed back as data."""
        response = client.post("/users", json=valid_user_payload())

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "User validated successfully ✅"
        assert data["data"] == valid_user_payload()

    def test_missing_age_is_not_echoed(self, client):
        """An omitted age stays omitted (no null)."""
        response = client.post("/users", json=NO_AGE_PAYLOAD)

        assert response.status_code == 200
        assert response.json()["data"] == NO_AGE_PAYLOAD

    def test_extra_fields_are_stripped(self, client):
        """Unknown keys never reach the response."""
        response = client.post(
            "/users", json=valid_user_payload(is_admin=True, password="hunter2")
        )

        assert response.status_code == 200
        assert response.json()["data"] == valid_user_payload()

    def test_integral_float_age_is_returned_as_int(self, client):
        response = client.post("/users", json=valid_user_payload(age=40.0))

        assert response.status_code == 200
        assert response.json()["data"]["age"] == 40

    def test_invalid_user_returns_400_with_field_errors(self, client):
        """Failures carry per-field messages."""
        response = client.post("/users", json=INVALID_USER_PAYLOAD)

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "errors": {
                "name": ["Name must be at least 2 characters"],
                "email": ["Invalid email address"],
                "age": ["Age must be a positive number"],
            },
        }

    def test_empty_object_returns_required_errors(self, client):
        response = client.post("/users", json={})

        assert response.status_code == 400
        assert response.json()["errors"] == {
            "name": ["Required"],
            "email": ["Required"],
        }

    def test_empty_body_is_validated_as_empty_object(self, client):
        response = client.post("/users")

        assert response.status_code == 400
        assert response.json()["errors"] == {
            "name": ["Required"],
            "email": ["Required"],
        }

    def test_non_object_body_reports_form_errors(self, client):
        response = client.post("/users", json=["John Doe"])

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "errors": {},
            "form_errors": ["Expected object, received array"],
        }

    def test_request_id_header_is_present(self, client):
        """Response should include X-Request-ID header."""
        response = client.post("/users", json=valid_user_payload())

        assert "X-Request-ID" in response.headers
        assert response.headers["X-Request-ID"].startswith("req_")


class TestErrorHandling:
    """Tests for exception handlers."""

    def test_malformed_json_returns_400(self, client):
        response = client.post(
            "/users",
            content=b'{"name": "John"',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "invalid_json"
        assert data["message"] == "Request body must be valid JSON"
        assert data["request_id"].startswith("req_")

    def test_unexpected_error_returns_sanitized_500(self):
        client = TestClient(app, raise_server_exceptions=False)

        with patch(
            "shared_validators.api.gateway.validate_user",
            side_effect=RuntimeError("boom"),
        ):
            response = client.post("/users", json=valid_user_payload())

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "internal_error"
        assert "boom" not in data["message"]


HOSTILE_BODIES = [
    rb'{"name": "\ud800ab", "email": "a@example.com"}',
    rb'{"name": "John Doe", "email": "\udfff@example.com"}',
    rb'{"name": "John Doe", "email": "john@example.com", "age": 1e308}',
    rb'{"name": "John Doe", "email": "john@example.com", "age": -1e308}',
    b'{"name": "John Doe", "email": "john@example.com", "age": 1' + b"0" * 400 + b"}",
    rb'{"name": "John Doe", "email": "john@example.com", "age": Infinity}',
    rb'{"name": "John Doe", "email": "john@example.com", "age": -Infinity}',
    rb'{"name": "John Doe", "email": "john@example.com", "age": NaN}',
    rb'{"name": ["John"], "email": {"a": 1}, "age": "25"}',
    rb'"just a string"',
    rb'null',
    rb'12',
]


class TestHostileBodies:
    """POST /users answers 200 or 400 for any JSON body."""

    @pytest.mark.parametrize("body", HOSTILE_BODIES)
    def test_never_returns_500(self, client, body):
        response = client.post(
            "/users",
            content=body,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code in (200, 400)
        assert response.json()["success"] is (response.status_code == 200)

    def test_lone_surrogate_name_returns_400(self, client):
        response = client.post(
            "/users",
            content=rb'{"name": "\ud800ab", "email": "a@example.com"}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["errors"] == {
            "name": ["Name must be valid unicode text"],
        }
