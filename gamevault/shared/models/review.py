"""
Review Model

One review per (user, game). Resubmitting a review replaces the rating and
content in place.

Constraints:
============
    UNIQUE(user_id, game_id)
    rating: 1..10 inclusive, decimals allowed (validated at the API boundary)
    content: at most 2000 characters; empty string is stored as NULL
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import Float, ForeignKey, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gamevault.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from gamevault.shared.models.user import User
    from gamevault.shared.models.game import Game


class Review(Base, TimestampMixin):
    """A user's rating and optional text for one game."""

    __tablename__ = "reviews"
    __table_args__ = (
        UniqueConstraint("user_id", "game_id", name="uq_reviews_user_game"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    game_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("games.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    rating: Mapped[float] = mapped_column(Float, nullable=False)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    user: Mapped["User"] = relationship(
        "User",
        back_populates="reviews",
        lazy="joined",
    )

    game: Mapped["Game"] = relationship(
        "Game",
        back_populates="reviews",
        lazy="joined",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Review(id={self.id}, user_id={self.user_id}, rating={self.rating})>"
