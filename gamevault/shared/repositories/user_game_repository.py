"""
UserGame Repository

Database operations for collection entries (the `user_games` table).

Common Operations:
==================
- get_for_user_and_rawg_id()  → Duplicate pre-check, joins on rawg_id directly
- get_for_user_and_game()     → Entry lookup for update/remove/review gate
- create_entry()              → Insert inside a SAVEPOINT
- list_for_user()             → Paginated, newest first, optional status filter
- list_all_for_user()         → Oldest first, used by stats aggregation
- popular_games()             → Most collected game ids with user counts
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from gamevault.shared.repositories.base import BaseRepository
from gamevault.shared.models.enums import GameStatus
from gamevault.shared.models.game import Game
from gamevault.shared.models.user_game import UserGame


class UserGameRepository(BaseRepository[UserGame]):
    """Repository for collection entries."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(UserGame, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_for_user_and_rawg_id(self, user_id: UUID, rawg_id: int) -> Optional[UserGame]:
        """
        Find the user's entry for an upstream catalog id.

        SQL Generated:
            SELECT user_games.* FROM user_games
            JOIN games ON games.id = user_games.game_id
            WHERE user_games.user_id = :user_id AND games.rawg_id = :rawg_id
        """
        result = await self.session.execute(
            select(UserGame)
            .join(Game, Game.id == UserGame.game_id)
            .where(UserGame.user_id == user_id, Game.rawg_id == rawg_id)
        )
        return result.scalar_one_or_none()

    async def get_for_user_and_game(self, user_id: UUID, game_id: UUID) -> Optional[UserGame]:
        """Find the user's entry for a local game id."""
        result = await self.session.execute(
            select(UserGame).where(UserGame.user_id == user_id, UserGame.game_id == game_id)
        )
        return result.scalar_one_or_none()

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_entry(
        self,
        user_id: UUID,
        game: Game,
        status: GameStatus,
        playtime: Optional[float],
    ) -> UserGame:
        """
        Insert a collection entry inside a savepoint.

        Raises:
            IntegrityError: If (user_id, game_id) already exists; only the
                savepoint is rolled back
        """
        async with self.session.begin_nested():
            entry = UserGame(
                user_id=user_id,
                game_id=game.id,
                game=game,
                status=status,
                playtime=playtime,
            )
            self.session.add(entry)
            await self.session.flush()
        return entry

    # ═══════════════════════════════════════════════════════════════════════════
    # LIST & AGGREGATE METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_for_user(
        self,
        user_id: UUID,
        *,
        status: Optional[GameStatus] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> tuple[list[UserGame], int]:
        """
        Page through a user's collection, newest first.

        Returns:
            (entries on this page, total entries matching the filter)
        """
        conditions = [UserGame.user_id == user_id]
        if status is not None:
            conditions.append(UserGame.status == status)

        result = await self.session.execute(
            select(UserGame)
            .where(*conditions)
            .order_by(UserGame.added_at.desc(), UserGame.id)
            .offset(offset)
            .limit(limit)
        )
        entries = list(result.scalars().all())

        total_result = await self.session.execute(
            select(func.count()).select_from(UserGame).where(*conditions)
        )
        return entries, total_result.scalar() or 0

    async def list_all_for_user(self, user_id: UUID) -> list[UserGame]:
        """All of a user's entries with games, oldest first."""
        result = await self.session.execute(
            select(UserGame)
            .where(UserGame.user_id == user_id)
            .order_by(UserGame.added_at.asc(), UserGame.id)
        )
        return list(result.scalars().all())

    async def popular_games(self, limit: int = 10) -> list[tuple[UUID, int]]:
        """
        Game ids ordered by how many collections contain them.

        SQL Generated:
            SELECT game_id, COUNT(user_id) AS user_count FROM user_games
            GROUP BY game_id ORDER BY user_count DESC LIMIT 10
        """
        user_count = func.count(UserGame.user_id).label("user_count")
        result = await self.session.execute(
            select(UserGame.game_id, user_count)
            .group_by(UserGame.game_id)
            .order_by(user_count.desc(), UserGame.game_id)
            .limit(limit)
        )
        return [(row.game_id, row.user_count) for row in result.all()]
