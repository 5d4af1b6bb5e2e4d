"""
Game Repository

Persistent store of canonical Game records keyed by upstream rawg_id.

Insert Race:
============
Two requests referencing the same never-seen rawg_id may both miss the
lookup and both try to insert. The insert runs inside a SAVEPOINT; the loser
hits the unique constraint, rolls back only its savepoint and re-reads the
winner's row. The surrounding request transaction stays usable.

    ┌──────────┐   miss    ┌──────────────┐  IntegrityError  ┌──────────────┐
    │ lookup   │ ────────► │ SAVEPOINT    │ ───────────────► │ re-read by   │
    │ rawg_id  │           │ INSERT game  │                  │ rawg_id      │
    └──────────┘           └──────────────┘                  └──────────────┘
"""

from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gamevault.shared.core.logging import logger
from gamevault.shared.repositories.base import BaseRepository
from gamevault.shared.models.game import Game


class GameRepository(BaseRepository[Game]):
    """Repository for Game database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Game, session)

    async def get_by_rawg_id(self, rawg_id: int) -> Optional[Game]:
        """
        Get game by upstream catalog id.

        SQL Generated:
            SELECT * FROM games WHERE rawg_id = 3498
        """
        result = await self.session.execute(select(Game).where(Game.rawg_id == rawg_id))
        return result.scalar_one_or_none()

    async def get_many(self, game_ids: list[Any]) -> dict[Any, Game]:
        """Fetch several games in one query, keyed by id."""
        if not game_ids:
            return {}
        result = await self.session.execute(select(Game).where(Game.id.in_(game_ids)))
        return {game.id: game for game in result.scalars().all()}

    async def create_or_get(self, **fields: Any) -> tuple[Game, bool]:
        """
        Insert a game inside a savepoint; on a rawg_id race return the winner.

        Returns:
            (game, created) where created is False if another transaction
            inserted the same rawg_id first
        """
        rawg_id = fields["rawg_id"]
        try:
            async with self.session.begin_nested():
                game = Game(**fields)
                self.session.add(game)
                await self.session.flush()
        except IntegrityError:
            logger.info("Game insert lost race, re-reading", rawg_id=rawg_id)
            existing = await self.get_by_rawg_id(rawg_id)
            if existing is None:
                raise
            return existing, False

        return game, True
