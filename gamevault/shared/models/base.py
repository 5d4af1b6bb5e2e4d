"""
Base Model Classes

Declarative base shared by users, games, user_games and reviews, plus the
created_at / updated_at pair every one of those tables carries.

Game.genres and Game.platforms are plain string lists; the base maps
`list[str]` annotations to JSONB on PostgreSQL and JSON on SQLite so the
same models run under the test database.
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, DateTime, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    """Current UTC time, used as the Python-side column default."""
    return datetime.now(timezone.utc)


# JSON everywhere, JSONB on PostgreSQL
JSONType = JSON().with_variant(JSONB(), "postgresql")


class Base(DeclarativeBase):
    """Declarative base with JSON column mapping for dict and list annotations."""

    type_annotation_map = {
        dict[str, Any]: JSONType,
        list[str]: JSONType,
    }


class TimestampMixin:
    """
    created_at / updated_at, both timezone-aware UTC.

    Values come from Python on INSERT and UPDATE; the server default only
    covers rows written outside the ORM (migrations, manual SQL).
    """

    # Python-side default keeps sub-second ordering on every backend
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=utc_now,
        nullable=False,
    )
