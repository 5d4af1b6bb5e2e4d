"""
Collection Service

Business logic for a user's game collection.

Adding a Game:
==============
    1. Duplicate pre-check joined on rawg_id (no upstream call for duplicates)
    2. Resolve the Game (local hit, or fetch-and-memoize from the catalog)
    3. Insert the entry inside a savepoint; the unique (user_id, game_id)
       constraint is the authoritative duplicate signal under concurrency

Usage:
======
    service = CollectionService(db, game_service)
    entry, game_created = await service.add_game(user_id, rawg_id=3498)
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gamevault.shared.core.exceptions import CollectionEntryNotFoundError, ConflictError
from gamevault.shared.core.logging import logger
from gamevault.shared.models.enums import GameStatus
from gamevault.shared.models.user_game import UserGame
from gamevault.shared.repositories.user_game_repository import UserGameRepository
from gamevault.shared.services.game_service import GameService


ALREADY_IN_COLLECTION = "Game already in collection"


@dataclass
class PaginatedEntries:
    """One page of a user's collection."""

    items: List[UserGame]
    total: int
    limit: int
    offset: int

    @property
    def has_more(self) -> bool:
        return self.offset + self.limit < self.total


class CollectionService:
    """
    Service for collection business logic.

    Handles:
    - Adding games (with Game memoization)
    - Listing with status filter and offset pagination
    - Partial updates of status/playtime
    - Removal
    """

    def __init__(self, session: AsyncSession, games: GameService) -> None:
        self.session = session
        self.games = games
        self.repo = UserGameRepository(session)

    async def add_game(
        self,
        user_id: UUID,
        rawg_id: int,
        status: Optional[GameStatus] = None,
        playtime: Optional[float] = None,
    ) -> Tuple[UserGame, bool]:
        """
        Add a catalog game to the user's collection.

        Returns:
            Tuple of (entry with game, whether the Game row was created)

        Raises:
            ConflictError: If the game is already in the collection
            GameNotFoundError: If the upstream catalog cannot provide it
        """
        if await self.repo.get_for_user_and_rawg_id(user_id, rawg_id):
            raise ConflictError(ALREADY_IN_COLLECTION, details={"rawg_id": rawg_id})

        game, game_created = await self.games.resolve_game(rawg_id)

        try:
            entry = await self.repo.create_entry(
                user_id=user_id,
                game=game,
                status=status or GameStatus.BACKLOG,
                playtime=playtime,
            )
        except IntegrityError:
            raise ConflictError(ALREADY_IN_COLLECTION, details={"rawg_id": rawg_id})

        logger.info(
            "Game added to collection",
            user_id=str(user_id),
            game_id=str(game.id),
            rawg_id=rawg_id,
        )
        return entry, game_created

    async def list_collection(
        self,
        user_id: UUID,
        status: Optional[GameStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> PaginatedEntries:
        """List the user's entries, newest first."""
        items, total = await self.repo.list_for_user(
            user_id,
            status=status,
            offset=offset,
            limit=limit,
        )
        return PaginatedEntries(items=items, total=total, limit=limit, offset=offset)

    async def _get_entry(self, user_id: UUID, game_id: UUID) -> UserGame:
        entry = await self.repo.get_for_user_and_game(user_id, game_id)
        if not entry:
            raise CollectionEntryNotFoundError(str(game_id))
        return entry

    async def update_game(
        self,
        user_id: UUID,
        game_id: UUID,
        status: Optional[GameStatus] = None,
        playtime: Optional[float] = None,
    ) -> UserGame:
        """
        Change status and/or playtime; omitted (None) fields are untouched.

        Raises:
            CollectionEntryNotFoundError: If the game is not in the collection
        """
        entry = await self._get_entry(user_id, game_id)
        return await self.repo.update(entry, status=status, playtime=playtime)

    async def remove_game(self, user_id: UUID, game_id: UUID) -> None:
        """
        Remove a game from the collection.

        Raises:
            CollectionEntryNotFoundError: If the game is not in the collection
        """
        entry = await self._get_entry(user_id, game_id)
        await self.repo.delete(entry)
        logger.info("Game removed from collection", user_id=str(user_id), game_id=str(game_id))

    async def has_game(self, user_id: UUID, game_id: UUID) -> bool:
        return await self.repo.get_for_user_and_game(user_id, game_id) is not None
