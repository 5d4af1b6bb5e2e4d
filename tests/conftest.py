"""
Pytest fixtures for GameVault tests

The API runs against a throwaway SQLite file (tables created at startup),
fakeredis for the cache and rate limiter, an in-memory stand-in for the RAWG
catalog and a task queue whose SQS client is a MagicMock.
"""

from typing import Any, Optional
from unittest.mock import MagicMock

import fakeredis
import pytest
from fastapi.testclient import TestClient

from gamevault.api.dependencies.resources import (
    get_cache,
    get_rawg_adapter,
    get_task_queue,
)
from gamevault.api.main import create_application
from gamevault.config.settings import Settings
from gamevault.shared.adapters.redis_adapter import RedisAdapter
from gamevault.shared.core.exceptions import UpstreamUnavailableError
from gamevault.shared.services.task_queue import TaskQueue

TEST_QUEUE_URL = "https://sqs.us-east-1.amazonaws.com/000000000000/gamevault-tasks"


def rawg_game(
    rawg_id: int,
    name: str,
    genres: tuple[str, ...] = (),
    platforms: tuple[str, ...] = ("PC",),
    **extra: Any,
) -> dict[str, Any]:
    """A detail payload shaped like the RAWG API's."""
    payload = {
        "id": rawg_id,
        "name": name,
        "slug": name.lower().replace(" ", "-"),
        "description_raw": f"{name} description",
        "released": "2020-01-15",
        "rating": 4.2,
        "metacritic": 85,
        "background_image": f"https://media.rawg.io/{rawg_id}.jpg",
        "genres": [{"id": i, "name": genre} for i, genre in enumerate(genres)],
        "platforms": [{"platform": {"id": i, "name": p}} for i, p in enumerate(platforms)],
    }
    payload.update(extra)
    return payload


class FakeRawgAdapter:
    """In-memory catalog with call counters."""

    def __init__(self) -> None:
        self.games: dict[int, dict[str, Any]] = {}
        self.search_calls = 0
        self.detail_calls = 0
        self.error: Optional[Exception] = None
        self.healthy = True

    def add(self, payload: dict[str, Any]) -> dict[str, Any]:
        self.games[payload["id"]] = payload
        return payload

    async def search_games(self, query: str, page: int = 1) -> dict[str, Any]:
        self.search_calls += 1
        if self.error:
            raise self.error
        results = [g for g in self.games.values() if query.lower() in g["name"].lower()]
        return {"count": len(results), "next": None, "previous": None, "results": results}

    async def get_game(self, rawg_id: int) -> dict[str, Any]:
        self.detail_calls += 1
        if self.error:
            raise self.error
        if rawg_id not in self.games:
            raise UpstreamUnavailableError("RAWG", "RAWG returned 404", upstream_status=404)
        return self.games[rawg_id]

    async def ping(self) -> bool:
        return self.healthy

    async def close(self) -> None:
        pass


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        APP_ENV="test",
        LOG_LEVEL="WARNING",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'gamevault.db'}",
        DATABASE_AUTO_CREATE=True,
        SECRET_KEY="test-secret-key",
        RATE_LIMIT_MAX_REQUESTS=1000,
        SQS_TASK_QUEUE_URL=TEST_QUEUE_URL,
    )


@pytest.fixture
def fake_redis():
    return fakeredis.FakeAsyncRedis(decode_responses=True)


@pytest.fixture
def cache(fake_redis) -> RedisAdapter:
    return RedisAdapter(client=fake_redis)


@pytest.fixture
def rawg() -> FakeRawgAdapter:
    fake = FakeRawgAdapter()
    fake.add(rawg_game(3498, "Grand Theft Auto V", genres=("Action", "Adventure")))
    fake.add(rawg_game(3328, "The Witcher 3", genres=("Action", "RPG")))
    fake.add(rawg_game(4200, "Portal 2", genres=("Puzzle",)))
    return fake


@pytest.fixture
def sqs() -> MagicMock:
    mock = MagicMock()
    mock.send_task.return_value = "message-1"
    return mock


@pytest.fixture
def task_queue(sqs) -> TaskQueue:
    return TaskQueue(sqs, TEST_QUEUE_URL)


@pytest.fixture
def app(settings, cache, rawg, task_queue):
    application = create_application(settings)
    application.dependency_overrides[get_cache] = lambda: cache
    application.dependency_overrides[get_rawg_adapter] = lambda: rawg
    application.dependency_overrides[get_task_queue] = lambda: task_queue
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def register(client: TestClient, username: str = "player1", password: str = "password123") -> dict:
    response = client.post(
        "/api/auth/register",
        json={
            "email": f"{username}@example.com",
            "username": username,
            "password": password,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user(client) -> dict:
    """Registered user: {"user": {...}, "token": ..., "headers": {...}}."""
    data = register(client)
    data["headers"] = auth_headers(data["token"])
    return data


@pytest.fixture
def other_user(client) -> dict:
    data = register(client, username="player2")
    data["headers"] = auth_headers(data["token"])
    return data


def add_to_collection(client: TestClient, headers: dict, rawg_id: int, **fields: Any) -> dict:
    response = client.post("/api/collection", json={"rawgId": rawg_id, **fields}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()
