"""
Redis adapter - Caching and rate limiting.

Provides:
- Key-value JSON caching with TTL
- Fixed-window rate limiting counters

Every operation swallows RedisError after logging a warning and returns a
neutral value (None / False / "allowed"), so a Redis outage degrades the API
to uncached pass-through instead of failing requests.
"""

import json
import logging
from typing import Any, Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


class RedisAdapter:
    """
    Adapter for async Redis operations.

    Handles:
    - Caching with TTL
    - Rate limiting
    """

    def __init__(
        self,
        url: Optional[str] = None,
        client: Optional[redis.Redis] = None,
    ):
        """
        Initialize Redis adapter.

        Args:
            url: Redis URL (redis://host:port/db)
            client: Pre-built client (tests pass a fakeredis instance)
        """
        self.url = url or "redis://localhost:6379"
        self._client = client

    @property
    def client(self) -> redis.Redis:
        """Lazy-loaded Redis client."""
        if self._client is None:
            self._client = redis.from_url(
                self.url,
                decode_responses=True,
            )
        return self._client

    # ═══════════════════════════════════════════════════════════════════════════
    # CACHE
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, key: str) -> Optional[str]:
        """Get a value from cache, None on miss or error."""
        try:
            return await self.client.get(key)
        except RedisError as e:
            logger.warning("Redis get failed for %s: %s", key, e)
            return None

    async def get_json(self, key: str) -> Optional[Any]:
        """Get a JSON value from cache."""
        value = await self.get(key)
        if value:
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                logger.warning("Discarding undecodable cache entry %s", key)
                return None
        return None

    async def set(
        self,
        key: str,
        value: str,
        ttl: Optional[int] = None,
    ) -> bool:
        """Set a value in cache, with TTL in seconds if given."""
        try:
            if ttl:
                await self.client.setex(key, ttl, value)
            else:
                await self.client.set(key, value)
            return True
        except RedisError as e:
            logger.warning("Redis set failed for %s: %s", key, e)
            return False

    async def set_json(
        self,
        key: str,
        value: Any,
        ttl: Optional[int] = None,
    ) -> bool:
        """Set a JSON value in cache."""
        return await self.set(key, json.dumps(value), ttl)

    async def delete(self, key: str) -> bool:
        """Delete a key; True if it existed."""
        try:
            return bool(await self.client.delete(key))
        except RedisError as e:
            logger.warning("Redis delete failed for %s: %s", key, e)
            return False

    # ═══════════════════════════════════════════════════════════════════════════
    # RATE LIMITING
    # ═══════════════════════════════════════════════════════════════════════════

    async def check_rate_limit(
        self,
        key: str,
        limit: int,
        window_seconds: int,
    ) -> tuple[bool, int, int]:
        """
        Count a hit in a fixed window.

        The first hit of a window sets the expiry; later hits only increment.

        Args:
            key: Rate limit key (e.g., "ratelimit:1.2.3.4:/api/games/search")
            limit: Maximum allowed requests per window
            window_seconds: Window length in seconds

        Returns:
            Tuple of (is_allowed, current_count, seconds_until_reset)
        """
        try:
            current = await self.client.incr(key)
            if current == 1:
                await self.client.expire(key, window_seconds)

            if current <= limit:
                return True, current, window_seconds

            ttl = await self.client.ttl(key)
            if ttl is None or ttl < 0:
                # Expiry lost (e.g. crash between INCR and EXPIRE); restart window
                await self.client.expire(key, window_seconds)
                ttl = window_seconds
            return False, current, ttl

        except RedisError as e:
            logger.warning("Rate limit check failed for %s: %s", key, e)
            return True, 0, window_seconds

    # ═══════════════════════════════════════════════════════════════════════════
    # LIFECYCLE
    # ═══════════════════════════════════════════════════════════════════════════

    async def ping(self) -> bool:
        """Check Redis connectivity."""
        try:
            return bool(await self.client.ping())
        except (RedisError, OSError):
            return False

    async def close(self) -> None:
        """Close the connection pool."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
