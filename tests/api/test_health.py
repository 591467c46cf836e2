"""Tests for health endpoints."""

from fastapi.testclient import TestClient


class TestHealth:
    """Tests for /health and /api/health."""

    def test_root_health(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_api_health_lists_formats(self, client: TestClient):
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["document_formats"] == ["html", "pdf", "xlsx"]
        assert data["report_formats"] == ["json", "pdf", "xlsx"]
        assert data["uptime_seconds"] >= 0

    def test_request_id_echoed(self, client: TestClient):
        response = client.get("/health", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"
        assert response.headers["X-Response-Time"].endswith("ms")

    def test_unknown_route_uses_error_shape(self, client: TestClient):
        response = client.get("/api/nope")
        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == "NOT_FOUND"
        assert data["path"] == "/api/nope"
        assert data["hint"]
