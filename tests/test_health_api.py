"""
Tests for health probes, the API index and the shared error envelope.
"""
from app.api.v1 import health


class TestHealth:
    async def test_health_reports_database(self, client):
        response = await client.get("/api/v1/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["components"]["database"]["status"] == "healthy"
        assert body["environment"] == "test"

    async def test_degraded_when_database_fails(self, client, monkeypatch):
        async def unhealthy():
            return {"status": "unhealthy", "error": "connection refused"}

        monkeypatch.setattr(health, "db_health_check", unhealthy)

        response = await client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json()["status"] == "degraded"

        ready = await client.get("/api/v1/health/ready")
        assert ready.status_code == 503
        assert ready.json()["reason"] == "database_unhealthy"

    async def test_liveness_and_readiness(self, client):
        assert (await client.get("/api/v1/health/live")).text == "OK"
        assert (await client.get("/api/v1/health/ready")).json()["status"] == "ready"


class TestApiSurface:
    async def test_request_id_is_echoed(self, client):
        response = await client.get("/api/v1/health/live", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"
        assert "X-Response-Time" in response.headers

    async def test_unknown_route_uses_error_envelope(self, client):
        response = await client.get("/api/v1/nowhere")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    async def test_api_index_lists_prefixes(self, client):
        response = await client.get("/api/v1/")
        assert response.status_code == 200
        assert "/recipients" in str(response.json())
