"""
Stats Service

Derived summaries, computed on demand and cached briefly in Redis.

Cache Keys:
===========
    stats:<user_id>   TTL USER_STATS_CACHE_TTL_SECONDS (10 s)
    stats:global      TTL GLOBAL_STATS_CACHE_TTL_SECONDS (10 min)

Nothing invalidates these keys on writes; readers may see a snapshot up to
one TTL old. The worker's refresh_cache task overwrites stats:global and
drops a user's key on demand.

User Stats:
===========
    totalGames      number of collection entries
    totalPlaytime   sum of playtime, entries without playtime count as 0
    statusCount     {BACKLOG, PLAYING, COMPLETED, DROPPED} → count (all present)
    topGenres       five most frequent genres across the user's games; ties
                    keep the order in which genres were first seen, scanning
                    entries oldest first
    totalReviews    number of reviews written
    averageRating   mean rating rounded half-up to one decimal, 0 without reviews
"""

import math
from collections import Counter
from typing import Iterable, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from gamevault.config.settings import Settings
from gamevault.shared.adapters.redis_adapter import RedisAdapter
from gamevault.shared.core.logging import logger
from gamevault.shared.models.enums import GameStatus
from gamevault.shared.models.user_game import UserGame
from gamevault.shared.repositories.game_repository import GameRepository
from gamevault.shared.repositories.review_repository import ReviewRepository
from gamevault.shared.repositories.user_game_repository import UserGameRepository
from gamevault.shared.repositories.user_repository import UserRepository
from gamevault.shared.schemas.game import GameResponse
from gamevault.shared.schemas.stats import (
    GenreCount,
    GlobalStatsResponse,
    PopularGame,
    UserStatsResponse,
)


GLOBAL_STATS_KEY = "stats:global"
TOP_GENRES_LIMIT = 5
POPULAR_GAMES_LIMIT = 10


def user_stats_key(user_id: UUID | str) -> str:
    return f"stats:{user_id}"


def round_half_up(value: float, digits: int = 1) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def aggregate_user_stats(
    entries: Iterable[UserGame],
    review_count: int,
    average_rating: Optional[float],
) -> UserStatsResponse:
    """
    Build a user's summary from their entries (oldest first) and review totals.

    Pure function: no I/O, so it can be tested without a database.
    """
    status_count = {status.value: 0 for status in GameStatus}
    genre_counts: Counter[str] = Counter()
    total_games = 0
    total_playtime = 0.0

    for entry in entries:
        total_games += 1
        total_playtime += entry.playtime or 0
        status_count[GameStatus(entry.status).value] += 1
        # Counter preserves first-insertion order, most_common() is stable
        genre_counts.update(entry.game.genres or [])

    top_genres = [
        GenreCount(genre=genre, count=count)
        for genre, count in genre_counts.most_common(TOP_GENRES_LIMIT)
    ]

    return UserStatsResponse(
        total_games=total_games,
        total_playtime=total_playtime,
        status_count=status_count,
        top_genres=top_genres,
        total_reviews=review_count,
        average_rating=round_half_up(average_rating) if review_count and average_rating is not None else 0,
    )


class StatsService:
    """Cache-aside computation of user and global stats."""

    def __init__(
        self,
        session: AsyncSession,
        cache: RedisAdapter,
        settings: Settings,
    ) -> None:
        self.session = session
        self.cache = cache
        self.settings = settings
        self.entries = UserGameRepository(session)
        self.reviews = ReviewRepository(session)
        self.games = GameRepository(session)
        self.users = UserRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # USER STATS
    # ═══════════════════════════════════════════════════════════════════════════

    async def user_stats(self, user_id: UUID) -> UserStatsResponse:
        """Summary for one user, served from cache when fresh."""
        key = user_stats_key(user_id)
        cached = await self.cache.get_json(key)
        if cached is not None:
            return UserStatsResponse.model_validate(cached)

        entries = await self.entries.list_all_for_user(user_id)
        review_count, average = await self.reviews.rating_summary(user_id)
        stats = aggregate_user_stats(entries, review_count, average)

        await self.cache.set_json(
            key,
            stats.model_dump(mode="json", by_alias=True),
            ttl=self.settings.USER_STATS_CACHE_TTL_SECONDS,
        )
        return stats

    # ═══════════════════════════════════════════════════════════════════════════
    # GLOBAL STATS
    # ═══════════════════════════════════════════════════════════════════════════

    async def global_stats(self) -> GlobalStatsResponse:
        """Site-wide summary, served from cache when fresh."""
        cached = await self.cache.get_json(GLOBAL_STATS_KEY)
        if cached is not None:
            return GlobalStatsResponse.model_validate(cached)
        return await self.refresh_global_stats()

    async def refresh_global_stats(self) -> GlobalStatsResponse:
        """Recompute the global summary and overwrite the cached copy."""
        popular = await self.entries.popular_games(limit=POPULAR_GAMES_LIMIT)
        games = await self.games.get_many([game_id for game_id, _ in popular])

        stats = GlobalStatsResponse(
            total_users=await self.users.count(),
            total_games=await self.games.count(),
            total_reviews=await self.reviews.count(),
            total_collections=await self.entries.count(),
            popular_games=[
                PopularGame(game=GameResponse.model_validate(games[game_id]), user_count=user_count)
                for game_id, user_count in popular
                if game_id in games
            ],
        )

        await self.cache.set_json(
            GLOBAL_STATS_KEY,
            stats.model_dump(mode="json", by_alias=True),
            ttl=self.settings.GLOBAL_STATS_CACHE_TTL_SECONDS,
        )
        logger.info("Global stats refreshed", total_users=stats.total_users)
        return stats
