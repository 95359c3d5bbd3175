"""Tests for app-level behavior: health check, error envelope, headers."""

from fastapi.testclient import TestClient

from app.exceptions import ConflictError, NotFoundError, TokenExpiredError


class TestHealthCheck:
    def test_health_check(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["app"] == "roleplay-api"


class TestErrorEnvelope:
    def test_malformed_json(self, client: TestClient):
        response = client.post(
            "/users",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422
        assert response.json()["code"] == "BAD_REQUEST"

    def test_validation_message_names_field(self, client: TestClient):
        response = client.post("/forgot-password", json={"resetPasswordUrl": "url"})
        assert response.status_code == 422
        assert "email" in response.json()["message"]

    def test_unknown_route(self, client: TestClient):
        response = client.get("/nope")
        assert response.status_code == 404
        body = response.json()
        assert body["code"] == "BAD_REQUEST"
        assert body["status"] == 404

    def test_error_to_dict(self):
        assert ConflictError("email already in use").to_dict() == {
            "code": "BAD_REQUEST",
            "status": 409,
            "message": "email already in use",
        }
        assert NotFoundError("token not found").status == 404
        assert TokenExpiredError().to_dict() == {
            "code": "TOKEN_EXPIRED",
            "status": 410,
            "message": "token has expired",
        }


class TestMiddleware:
    def test_security_headers(self, client: TestClient):
        response = client.get("/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"

    def test_request_too_large(self, client: TestClient):
        response = client.post(
            "/users",
            content="x" * (64 * 1024 + 1),
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 413

    def test_non_numeric_content_length(self, client: TestClient):
        response = client.post(
            "/users",
            content="{}",
            headers={"Content-Type": "application/json", "Content-Length": "abc"},
        )
        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "BAD_REQUEST"
        assert body["status"] == 400
