"""Health endpoints."""

from unittest.mock import AsyncMock


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["uptime"] >= 0
    assert body["timestamp"]


def test_detailed_health_all_healthy(client):
    response = client.get("/health/detailed")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["checks"]["database"] == "healthy"
    assert body["checks"]["redis"] == "healthy"
    assert body["checks"]["rawgApi"] == "healthy"


def test_detailed_health_degraded_when_catalog_down(client, rawg):
    rawg.healthy = False

    response = client.get("/health/detailed")

    assert response.status_code == 503
    assert response.json()["status"] == "degraded"
    assert response.json()["checks"]["rawgApi"] == "unhealthy"
    assert response.json()["checks"]["database"] == "healthy"


def test_detailed_health_degraded_when_redis_down(client, cache, monkeypatch):
    monkeypatch.setattr(cache, "ping", AsyncMock(return_value=False))

    response = client.get("/health/detailed")

    assert response.status_code == 503
    assert response.json()["checks"]["redis"] == "unhealthy"


def test_request_id_header(client):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
    assert client.get("/health").headers["X-Request-ID"]


def test_openapi_documents_error_envelope(client):
    schema = client.get("/openapi.json").json()

    responses = schema["paths"]["/api/collection"]["post"]["responses"]
    assert {"201", "400", "401", "404", "429"} <= set(responses)
    assert "ErrorResponse" in schema["components"]["schemas"]
