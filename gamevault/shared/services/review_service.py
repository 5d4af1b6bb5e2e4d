"""
Review Service

Business logic for reviews. A user has at most one review per game;
submitting again replaces the rating and content in place.

Rules:
======
- The game must exist locally                      → else 404
- The game must be in the reviewer's collection    → else 400 (precondition)
- Only the author may update or delete a review    → else 403
- Empty-string content is stored as null
"""

from typing import Any, List, Optional, Tuple
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gamevault.shared.core.exceptions import (
    AuthorizationError,
    InvalidPreconditionError,
    ReviewNotFoundError,
)
from gamevault.shared.core.logging import logger
from gamevault.shared.models.review import Review
from gamevault.shared.repositories.review_repository import ReviewRepository
from gamevault.shared.services.collection_service import CollectionService
from gamevault.shared.services.game_service import GameService


def _normalize_content(content: Optional[str]) -> Optional[str]:
    return content or None


class ReviewService:
    """Service for review business logic."""

    def __init__(
        self,
        session: AsyncSession,
        games: GameService,
        collection: CollectionService,
    ) -> None:
        self.session = session
        self.games = games
        self.collection = collection
        self.repo = ReviewRepository(session)

    async def submit_review(
        self,
        user_id: UUID,
        game_id: UUID,
        rating: float,
        content: Optional[str] = None,
    ) -> Tuple[Review, bool]:
        """
        Create or replace the user's review of a game.

        Returns:
            Tuple of (review with user and game, whether it was newly created)

        Raises:
            GameNotFoundError: If the game does not exist
            InvalidPreconditionError: If the game is not in the user's collection
        """
        await self.games.get_game(game_id)

        if not await self.collection.has_game(user_id, game_id):
            raise InvalidPreconditionError(
                "Game must be in your collection to review it",
                details={"game_id": str(game_id)},
            )

        content = _normalize_content(content)

        existing = await self.repo.get_for_user_and_game(user_id, game_id)
        if existing:
            return await self._replace(existing, rating, content), False

        try:
            review = await self.repo.create_review(user_id, game_id, rating, content)
        except IntegrityError:
            # A concurrent submission created it first; overwrite that one
            existing = await self.repo.get_for_user_and_game(user_id, game_id)
            if existing is None:
                raise
            return await self._replace(existing, rating, content), False

        logger.info("Review created", user_id=str(user_id), game_id=str(game_id))
        return await self.repo.reload(review), True

    async def _replace(self, review: Review, rating: float, content: Optional[str]) -> Review:
        review.rating = rating
        review.content = content
        await self.session.flush()
        return await self.repo.reload(review)

    async def _get_owned(self, user_id: UUID, review_id: UUID) -> Review:
        review = await self.repo.get(review_id)
        if not review:
            raise ReviewNotFoundError(str(review_id))
        if review.user_id != user_id:
            raise AuthorizationError()
        return review

    async def update_review(
        self,
        user_id: UUID,
        review_id: UUID,
        changes: dict[str, Any],
    ) -> Review:
        """
        Apply a partial update.

        Args:
            changes: Only the fields the client sent; "rating" None is ignored,
                "content" None or "" clears the text

        Raises:
            ReviewNotFoundError: If the review does not exist
            AuthorizationError: If the caller is not the author
        """
        review = await self._get_owned(user_id, review_id)

        if changes.get("rating") is not None:
            review.rating = changes["rating"]
        if "content" in changes:
            review.content = _normalize_content(changes["content"])

        await self.session.flush()
        return await self.repo.reload(review)

    async def delete_review(self, user_id: UUID, review_id: UUID) -> None:
        """
        Delete a review.

        Raises:
            ReviewNotFoundError: If the review does not exist
            AuthorizationError: If the caller is not the author
        """
        review = await self._get_owned(user_id, review_id)
        await self.repo.delete(review)
        logger.info("Review deleted", user_id=str(user_id), review_id=str(review_id))

    async def list_for_game(
        self,
        game_id: UUID,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[List[Review], int]:
        """Reviews of a game, newest first, with total count."""
        return await self.repo.list_for_game(game_id, offset=offset, limit=limit)

    async def list_for_user(self, user_id: UUID) -> List[Review]:
        """All of the user's reviews, newest first."""
        return await self.repo.list_for_user(user_id)
