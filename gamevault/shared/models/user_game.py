"""
UserGame (Collection Entry) Model

Per-user join between a User and a Game with tracking state.

Constraints:
============
    UNIQUE(user_id, game_id) - a game appears at most once per collection.
    The constraint is the authoritative duplicate signal; the service-level
    pre-check only produces a friendlier error in the common case.

SAMPLE ENTRY:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 1f0c...                                                   │
│ user_id          │ 550e8400-...                                              │
│ game_id          │ 7d3c1a2e-...                                              │
│ status           │ PLAYING                                                   │
│ playtime         │ 12.5   (hours, NULL until the user reports it)            │
│ added_at         │ 2024-01-01T00:00:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import (
    DateTime,
    Enum as SQLEnum,
    Float,
    ForeignKey,
    UniqueConstraint,
    Uuid,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gamevault.shared.models.base import Base, utc_now
from gamevault.shared.models.enums import GameStatus


if TYPE_CHECKING:
    from gamevault.shared.models.user import User
    from gamevault.shared.models.game import Game


class UserGame(Base):
    """
    Collection entry: one game tracked by one user.

    Attributes:
        status: BACKLOG | PLAYING | COMPLETED | DROPPED (default BACKLOG)
        playtime: Hours played, absent until set
        added_at: When the game entered the collection (list ordering key)
    """

    __tablename__ = "user_games"
    __table_args__ = (
        UniqueConstraint("user_id", "game_id", name="uq_user_games_user_game"),
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

    status: Mapped[GameStatus] = mapped_column(
        SQLEnum(GameStatus, name="game_status"),
        default=GameStatus.BACKLOG,
        nullable=False,
    )

    playtime: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    user: Mapped["User"] = relationship("User", back_populates="collection")

    # Always loaded with the entry; async sessions cannot lazy-load
    game: Mapped["Game"] = relationship(
        "Game",
        back_populates="collection_entries",
        lazy="joined",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<UserGame(user_id={self.user_id}, game_id={self.game_id}, status={self.status})>"
