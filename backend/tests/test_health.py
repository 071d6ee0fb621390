"""
Health probe and error envelope.
"""

from fastapi.testclient import TestClient

import config
from main import app
from routes import health


class TestHealth:

    def test_health_payload(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "ok"
        assert body["version"] == config.APP_VERSION
        assert body["environment"] == config.ENVIRONMENT
        assert body["uptime"] >= 0
        assert "maxRssKb" in body["memory"]
        assert body["timestamp"]

    def test_health_failure_is_500(self, db, monkeypatch):
        def broken():
            raise RuntimeError("rusage unavailable")

        monkeypatch.setattr(health, "_memory_usage", broken)
        client = TestClient(app, raise_server_exceptions=False)
        resp = client.get("/health")
        assert resp.status_code == 500
        assert resp.json() == {"error": "rusage unavailable"}

    def test_health_not_under_api_prefix(self, client):
        assert client.get("/api/health").status_code == 404


class TestErrorEnvelope:

    def test_corrupt_data_file_is_500(self, client, db):
        db.path.write_text("{broken")
        resp = client.get("/api/sessions/abc")
        assert resp.status_code == 500
        assert "error" in resp.json()

    def test_malformed_body_is_500(self, client):
        resp = client.post(
            "/api/sessions",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 500
        assert resp.json() == {"error": "Invalid request body"}

    def test_unexpected_exception_is_500(self, db, monkeypatch):
        def boom():
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(db, "read", boom)
        client = TestClient(app, raise_server_exceptions=False)
        resp = client.get("/api/sessions/abc")
        assert resp.status_code == 500
        assert resp.json() == {"error": "disk on fire"}


class TestCors:

    def test_allowed_origin_is_echoed(self, client):
        origin = config.CORS_ORIGINS[0]
        resp = client.options(
            "/api/sessions",
            headers={"Origin": origin, "Access-Control-Request-Method": "POST"},
        )
        assert resp.headers.get("access-control-allow-origin") == origin

    def test_unknown_origin_is_refused(self, client):
        resp = client.get("/health", headers={"Origin": "https://evil.example.com"})
        assert "access-control-allow-origin" not in resp.headers
