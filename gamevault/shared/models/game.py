"""
Game Entity Model

Canonical catalog record, memoized from the RAWG API.

A Game row is created the first time any user references a RAWG id and is
never refreshed afterwards: it is a cache of upstream truth and staleness is
accepted. `rawg_id` is the uniqueness key; concurrent first references race on
it and the loser re-reads the winner's row.

SAMPLE GAME RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 7d3c1a2e-...                                              │
│ rawg_id          │ 3498                                                      │
│ name             │ "Grand Theft Auto V"                                      │
│ slug             │ "grand-theft-auto-v"                                      │
│ released         │ 2013-09-17                                                │
│ rating           │ 4.47                                                      │
│ metacritic       │ 92                                                        │
│ genres           │ ["Action", "Adventure"]                                   │
│ platforms        │ ["PC", "PlayStation 5", ...]                              │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import date
from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import Date, Float, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gamevault.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from gamevault.shared.models.user_game import UserGame
    from gamevault.shared.models.review import Review


class Game(Base, TimestampMixin):
    """
    Game model - one row per upstream catalog id.

    Relationships:
        collection_entries: All users' entries for this game
        reviews: All reviews of this game
    """

    __tablename__ = "games"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    rawg_id: Mapped[int] = mapped_column(
        Integer,
        unique=True,
        nullable=False,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # CATALOG METADATA
    # ═══════════════════════════════════════════════════════════════════════════

    name: Mapped[str] = mapped_column(String(512), nullable=False)
    slug: Mapped[str] = mapped_column(String(512), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    released: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    rating: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    metacritic: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    genres: Mapped[list[str]] = mapped_column(default=list, nullable=False)
    platforms: Mapped[list[str]] = mapped_column(default=list, nullable=False)

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    collection_entries: Mapped[list["UserGame"]] = relationship(
        "UserGame",
        back_populates="game",
        cascade="all, delete-orphan",
    )

    reviews: Mapped[list["Review"]] = relationship(
        "Review",
        back_populates="game",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Game(id={self.id}, rawg_id={self.rawg_id}, name={self.name})>"
