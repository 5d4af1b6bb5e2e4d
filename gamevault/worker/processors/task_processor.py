"""
Task processor.

Executes the background tasks produced by the API:

    send_email      {to, subject, body}
                    No mail transport is wired in; delivery is logged.

    refresh_cache   {type: "global_stats"}
                    Recompute the global stats snapshot and overwrite stats:global.

                    {type: "user_stats", user_id}
                    Drop stats:<user_id> so the next read recomputes it.
"""

from typing import Any

from gamevault.config.settings import Settings
from gamevault.shared.adapters.redis_adapter import RedisAdapter
from gamevault.shared.core.logging import get_logger
from gamevault.shared.db.session import Database
from gamevault.shared.models.enums import CacheRefreshType
from gamevault.shared.services.stats_service import StatsService, user_stats_key
from gamevault.worker.processors.base_processor import BaseProcessor

logger = get_logger("gamevault.worker")


class TaskProcessor(BaseProcessor):
    """Processor backed by the shared database and cache."""

    def __init__(self, database: Database, cache: RedisAdapter, settings: Settings):
        self.database = database
        self.cache = cache
        self.settings = settings

    async def handle_send_email(self, payload: dict[str, Any]) -> dict[str, Any]:
        to = payload.get("to")
        subject = payload.get("subject")
        if not to:
            raise ValueError("send_email task without recipient")

        logger.info("Sending email", to=to, subject=subject)
        logger.info("Email sent", to=to)
        return {"success": True}

    async def handle_refresh_cache(self, payload: dict[str, Any]) -> dict[str, Any]:
        refresh_type = payload.get("type")
        logger.info("Refreshing cache", type=refresh_type)

        if refresh_type == CacheRefreshType.GLOBAL_STATS.value:
            async with self.database.session() as session:
                await StatsService(session, self.cache, self.settings).refresh_global_stats()
        elif refresh_type == CacheRefreshType.USER_STATS.value:
            user_id = payload.get("user_id")
            if not user_id:
                raise ValueError("user_stats refresh without user_id")
            await self.cache.delete(user_stats_key(user_id))
        else:
            raise ValueError(f"Unknown cache refresh type: {refresh_type}")

        logger.info("Cache refreshed", type=refresh_type)
        return {"success": True}
