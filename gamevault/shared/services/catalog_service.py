"""
Catalog Service

Cache-aside wrapper around the RAWG catalog.

Cache Keys:
===========
    search:<normalized query>:<page>   TTL SEARCH_CACHE_TTL_SECONDS (1 hour)
    game:<rawg_id>                     TTL GAME_CACHE_TTL_SECONDS (24 hours)

Query normalization is trim + lowercase, so "Zelda " and "zelda" share an
entry. Payloads are stored and returned exactly as the upstream sent them.

Flow:
=====
    ┌────────┐  hit   ┌────────────────┐
    │ Redis  │ ─────► │ return payload │
    └────────┘        └────────────────┘
        │ miss
        ▼
    ┌────────┐  2xx   ┌─────────────┐
    │ RAWG   │ ─────► │ store + TTL │ ──► return payload
    └────────┘        └─────────────┘
        │ non-2xx / transport error
        ▼
    UpstreamUnavailableError (nothing cached)
"""

from typing import Any

from gamevault.config.settings import Settings
from gamevault.shared.adapters.rawg_adapter import RawgAdapter
from gamevault.shared.adapters.redis_adapter import RedisAdapter
from gamevault.shared.core.logging import get_logger

logger = get_logger("gamevault.catalog")


def search_cache_key(query: str, page: int) -> str:
    return f"search:{query.strip().lower()}:{page}"


def game_cache_key(rawg_id: int) -> str:
    return f"game:{rawg_id}"


class CatalogService:
    """Cached catalog lookups."""

    def __init__(
        self,
        rawg: RawgAdapter,
        cache: RedisAdapter,
        settings: Settings,
    ) -> None:
        self.rawg = rawg
        self.cache = cache
        self.settings = settings

    async def search(self, query: str, page: int = 1) -> Any:
        """
        Search the catalog.

        Raises:
            UpstreamUnavailableError: On a cache miss that the upstream cannot serve
        """
        key = search_cache_key(query, page)
        cached = await self.cache.get_json(key)
        if cached is not None:
            logger.debug("Catalog cache hit", key=key)
            return cached

        payload = await self.rawg.search_games(query.strip(), page)
        await self.cache.set_json(key, payload, ttl=self.settings.SEARCH_CACHE_TTL_SECONDS)
        return payload

    async def get_game_details(self, rawg_id: int) -> Any:
        """
        Fetch a game's detail payload.

        Raises:
            UpstreamUnavailableError: On a cache miss that the upstream cannot serve
        """
        key = game_cache_key(rawg_id)
        cached = await self.cache.get_json(key)
        if cached is not None:
            logger.debug("Catalog cache hit", key=key)
            return cached

        payload = await self.rawg.get_game(rawg_id)
        await self.cache.set_json(key, payload, ttl=self.settings.GAME_CACHE_TTL_SECONDS)
        return payload
