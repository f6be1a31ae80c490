"""
Tests for error responses, trace ids and the health route
"""

from fastapi.testclient import TestClient

from app import app
from services.users_service import get_user_store
from utils.error_handling import ErrorHandlingConfig


class TestErrorResponses:

    def test_unhandled_exception_keeps_trace_id(self, mock_store):
        mock_store.get_all.side_effect = RuntimeError("boom")
        app.dependency_overrides[get_user_store] = lambda: mock_store
        try:
            response = TestClient(app, raise_server_exceptions=False).get("/api/users")
        finally:
            app.dependency_overrides.clear()

        body = response.json()
        assert response.status_code == 500
        assert body["message"] == "An unexpected error occurred"
        assert "boom" not in response.text
        assert response.headers["X-Trace-ID"] == body["trace_id"]

    def test_every_response_carries_trace_id(self, client):
        response = client.get("/api/users")

        assert response.status_code == 200
        assert len(response.headers["X-Trace-ID"]) == 8

    def test_error_body_shape(self, client):
        response = client.get("/api/users/invalid")

        body = response.json()
        assert body["error"] == "HTTP 400"
        assert body["message"] == "Invalid user id: invalid"
        assert body["trace_id"] == response.headers["X-Trace-ID"]
        assert "timestamp" in body

    def test_validation_errors_list_fields(self, client):
        response = client.post("/api/users", json={"name": "", "email": "test@example.com"})

        body = response.json()
        assert body["message"] == "Request validation failed"
        assert body["detail"] == [{"field": "name", "message": "must not be blank"}]


class TestSanitizeData:

    def test_sensitive_keys_are_redacted(self):
        data = {"authorization": "Bearer abc", "nested": {"api_key": "x", "name": "Ada"}}

        sanitized = ErrorHandlingConfig.sanitize_data(data)

        assert sanitized["authorization"] == "***REDACTED***"
        assert sanitized["nested"] == {"api_key": "***REDACTED***", "name": "Ada"}

    def test_long_strings_are_truncated(self):
        sanitized = ErrorHandlingConfig.sanitize_data("x" * (ErrorHandlingConfig.MAX_VALUE_LOG_SIZE + 10))

        assert sanitized.endswith("...[TRUNCATED]")


class TestHealthCheck:

    def test_healthy_store(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_unreachable_store(self, client, mock_store):
        mock_store.ping.return_value = False

        response = client.get("/")

        assert response.status_code == 503
