"""
SQLAlchemy Models

All database models are exported from here so that importing this package
registers every table on `Base.metadata` (used by Alembic and auto-create).

Entity Relationships:
=====================
    User ──< UserGame >── Game
      │                    │
      └──────< Review >────┘
"""

from gamevault.shared.models.base import Base, TimestampMixin
from gamevault.shared.models.enums import CacheRefreshType, GameStatus, TaskName
from gamevault.shared.models.user import User
from gamevault.shared.models.game import Game
from gamevault.shared.models.user_game import UserGame
from gamevault.shared.models.review import Review

__all__ = [
    "Base",
    "TimestampMixin",
    "GameStatus",
    "TaskName",
    "CacheRefreshType",
    "User",
    "Game",
    "UserGame",
    "Review",
]
