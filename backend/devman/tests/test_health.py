"""Tests for service endpoints."""


class TestServiceEndpoints:
    """Root, version and health endpoints."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "Device Manager" in response.json()["message"]

    def test_version(self, client):
        from devman.core.config import settings

        response = client.get("/version")
        assert response.json() == {"version": settings.api_version}

    def test_request_id_generated(self, client):
        response = client.get("/health")
        assert len(response.headers["X-Request-ID"]) == 32

    def test_request_id_propagated(self, client):
        response = client.get("/health", headers={"X-Request-ID": "trace-123"})
        assert response.headers["X-Request-ID"] == "trace-123"
