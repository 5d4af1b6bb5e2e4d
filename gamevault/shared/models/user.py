"""
User Entity Model

Represents a registered application user.

Model Hierarchy:
================
    User
       ├── collection (UserGame[]) - Games the user tracks
       └── reviews (Review[])      - Reviews the user wrote

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ email            │ "player@example.com"                                      │
│ username         │ "player1"                                                 │
│ password_hash    │ "$2b$12$..."                                              │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING
import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gamevault.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from gamevault.shared.models.user_game import UserGame
    from gamevault.shared.models.review import Review


class User(Base, TimestampMixin):
    """
    User model representing a registered application user.

    Attributes:
        id: Unique identifier (UUID v4)
        email: Login email (unique, indexed)
        username: Public display name (unique, indexed)
        password_hash: Bcrypt hashed password

    Relationships:
        collection: All collection entries of this user
        reviews: All reviews written by this user
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    username: Mapped[str] = mapped_column(
        String(20),
        unique=True,
        nullable=False,
        index=True,
    )

    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    collection: Mapped[list["UserGame"]] = relationship(
        "UserGame",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    reviews: Mapped[list["Review"]] = relationship(
        "Review",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, username={self.username})>"
