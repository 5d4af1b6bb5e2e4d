"""
Review Repository

Database operations for reviews. Every query loads the author and the game
eagerly (see the model's relationship loading) so API responses can embed
`user {id, username}` and the full game.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from gamevault.shared.repositories.base import BaseRepository
from gamevault.shared.models.review import Review


class ReviewRepository(BaseRepository[Review]):
    """Repository for Review database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Review, session)

    async def get_for_user_and_game(self, user_id: UUID, game_id: UUID) -> Optional[Review]:
        """The user's review of a game, if any."""
        result = await self.session.execute(
            select(Review).where(Review.user_id == user_id, Review.game_id == game_id)
        )
        return result.scalar_one_or_none()

    async def create_review(
        self,
        user_id: UUID,
        game_id: UUID,
        rating: float,
        content: Optional[str],
    ) -> Review:
        """
        Insert a review inside a savepoint.

        Raises:
            IntegrityError: If the user already reviewed the game
        """
        async with self.session.begin_nested():
            review = Review(user_id=user_id, game_id=game_id, rating=rating, content=content)
            self.session.add(review)
            await self.session.flush()
        return review

    async def reload(self, review: Review) -> Review:
        """Re-read a review with its author and game attached."""
        result = await self.session.execute(
            select(Review)
            .where(Review.id == review.id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one()

    async def list_for_game(
        self,
        game_id: UUID,
        *,
        offset: int = 0,
        limit: int = 20,
    ) -> tuple[list[Review], int]:
        """Page through a game's reviews, newest first."""
        result = await self.session.execute(
            select(Review)
            .where(Review.game_id == game_id)
            .order_by(Review.created_at.desc(), Review.id)
            .offset(offset)
            .limit(limit)
        )
        reviews = list(result.scalars().all())
        total = await self.count(filters={"game_id": game_id})
        return reviews, total

    async def list_for_user(self, user_id: UUID) -> list[Review]:
        """All reviews written by a user, newest first."""
        result = await self.session.execute(
            select(Review)
            .where(Review.user_id == user_id)
            .order_by(Review.created_at.desc(), Review.id)
        )
        return list(result.scalars().all())

    async def rating_summary(self, user_id: UUID) -> tuple[int, Optional[float]]:
        """
        Review count and mean rating for a user.

        SQL Generated:
            SELECT COUNT(id), AVG(rating) FROM reviews WHERE user_id = :user_id
        """
        result = await self.session.execute(
            select(func.count(Review.id), func.avg(Review.rating)).where(Review.user_id == user_id)
        )
        total, average = result.one()
        return total or 0, average
