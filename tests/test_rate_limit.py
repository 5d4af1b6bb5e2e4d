"""Fixed-window rate limiting."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from gamevault.api.dependencies.resources import get_cache, get_rawg_adapter, get_task_queue
from gamevault.api.main import create_application


@pytest.fixture
def limited_client(settings, cache, rawg, task_queue):
    app = create_application(
        settings.model_copy(update={"RATE_LIMIT_MAX_REQUESTS": 3, "RATE_LIMIT_WINDOW_SECONDS": 60})
    )
    app.dependency_overrides[get_cache] = lambda: cache
    app.dependency_overrides[get_rawg_adapter] = lambda: rawg
    app.dependency_overrides[get_task_queue] = lambda: task_queue
    with TestClient(app) as client:
        yield client


def test_requests_over_the_limit_get_429(limited_client):
    statuses = [limited_client.get("/health").status_code for _ in range(4)]

    assert statuses == [200, 200, 200, 429]


def test_429_carries_retry_after(limited_client):
    for _ in range(3):
        limited_client.get("/health")

    response = limited_client.get("/health")

    assert response.status_code == 429
    assert 0 < int(response.headers["Retry-After"]) <= 60
    assert response.json()["error"]["code"] == "RATE_LIMIT_EXCEEDED"


def test_counters_are_per_route(limited_client):
    for _ in range(3):
        limited_client.get("/health")

    assert limited_client.get("/health").status_code == 429
    assert limited_client.get("/api/games/search", params={"q": "portal"}).status_code == 200


def test_route_template_shares_one_counter(limited_client):
    statuses = [
        limited_client.get(f"/api/games/{rawg_id}").status_code
        for rawg_id in (3498, 3328, 4200, 3498)
    ]

    assert statuses == [200, 200, 200, 429]


def test_disabled_limiter(settings, cache, rawg, task_queue):
    app = create_application(
        settings.model_copy(update={"RATE_LIMIT_ENABLED": False, "RATE_LIMIT_MAX_REQUESTS": 1})
    )
    app.dependency_overrides[get_cache] = lambda: cache
    with TestClient(app) as client:
        assert [client.get("/health").status_code for _ in range(3)] == [200, 200, 200]


def test_check_rate_limit_window(cache):
    async def run():
        results = [await cache.check_rate_limit("ratelimit:test", 2, 30) for _ in range(3)]
        ttl = await cache.client.ttl("ratelimit:test")
        return results, ttl

    results, ttl = asyncio.run(run())

    assert [allowed for allowed, _, _ in results] == [True, True, False]
    assert [count for _, count, _ in results] == [1, 2, 3]
    assert 0 < results[2][2] <= 30
    assert 0 < ttl <= 30
