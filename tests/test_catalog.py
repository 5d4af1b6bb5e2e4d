"""Catalog caching and payload mapping."""

import asyncio
from datetime import date
from unittest.mock import AsyncMock, MagicMock

import fakeredis
import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from gamevault.shared.adapters.redis_adapter import RedisAdapter
from gamevault.shared.core.exceptions import UpstreamUnavailableError
from gamevault.shared.services.catalog_service import (
    CatalogService,
    game_cache_key,
    search_cache_key,
)
from gamevault.shared.services.game_service import map_rawg_payload
from tests.conftest import FakeRawgAdapter, rawg_game


def test_cache_keys():
    assert search_cache_key("  Zelda ", 1) == "search:zelda:1"
    assert search_cache_key("zelda", 3) == "search:zelda:3"
    assert game_cache_key(3498) == "game:3498"


def test_search_stores_payload_with_ttl(settings):
    rawg = FakeRawgAdapter()
    rawg.add(rawg_game(1, "Hollow Knight"))

    async def run():
        redis = fakeredis.FakeAsyncRedis(decode_responses=True)
        catalog = CatalogService(rawg, RedisAdapter(client=redis), settings)
        payload = await catalog.search("Hollow", 1)
        return payload, await redis.ttl("search:hollow:1")

    payload, ttl = asyncio.run(run())

    assert payload["results"][0]["name"] == "Hollow Knight"
    assert 0 < ttl <= settings.SEARCH_CACHE_TTL_SECONDS


def test_upstream_error_propagates_and_nothing_is_cached(settings):
    rawg = FakeRawgAdapter()
    rawg.error = UpstreamUnavailableError("RAWG", upstream_status=500)

    async def run():
        redis = fakeredis.FakeAsyncRedis(decode_responses=True)
        catalog = CatalogService(rawg, RedisAdapter(client=redis), settings)
        with pytest.raises(UpstreamUnavailableError):
            await catalog.get_game_details(7)
        return await redis.exists(game_cache_key(7))

    assert asyncio.run(run()) == 0


def test_map_rawg_payload():
    fields = map_rawg_payload(rawg_game(3498, "Grand Theft Auto V", genres=("Action",), platforms=("PC", "Xbox")))

    assert fields == {
        "rawg_id": 3498,
        "name": "Grand Theft Auto V",
        "slug": "grand-theft-auto-v",
        "description": "Grand Theft Auto V description",
        "released": date(2020, 1, 15),
        "rating": 4.2,
        "metacritic": 85,
        "image_url": "https://media.rawg.io/3498.jpg",
        "genres": ["Action"],
        "platforms": ["PC", "Xbox"],
    }


def test_map_rawg_payload_with_missing_fields():
    fields = map_rawg_payload({"id": 5, "name": "Bare"})

    assert fields["released"] is None
    assert fields["description"] is None
    assert fields["genres"] == []
    assert fields["platforms"] == []
    assert fields["slug"] == ""


def test_map_rawg_payload_ignores_bad_release_date():
    assert map_rawg_payload({"id": 5, "name": "X", "released": "TBA"})["released"] is None


def broken_redis():
    client = MagicMock()
    down = RedisConnectionError("connection refused")
    for name in ("get", "setex", "set", "delete", "incr", "expire", "ttl"):
        setattr(client, name, AsyncMock(side_effect=down))
    return client


def test_cache_outage_degrades_to_pass_through(settings):
    rawg = FakeRawgAdapter()
    rawg.add(rawg_game(9, "Hades"))
    catalog = CatalogService(rawg, RedisAdapter(client=broken_redis()), settings)

    async def run():
        return [await catalog.get_game_details(9) for _ in range(2)]

    first, second = asyncio.run(run())

    assert first["name"] == second["name"] == "Hades"
    assert rawg.detail_calls == 2


def test_rate_limit_allows_when_redis_is_down():
    cache = RedisAdapter(client=broken_redis())

    allowed, _, _ = asyncio.run(cache.check_rate_limit("ratelimit:x", 1, 60))

    assert allowed is True
