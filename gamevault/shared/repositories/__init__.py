"""
Repository Layer

Repositories encapsulate all database queries. Services use them and never
build SQL themselves.

Usage:
======
    from gamevault.shared.repositories import GameRepository

    repo = GameRepository(db)
    game = await repo.get_by_rawg_id(3498)
"""

from gamevault.shared.repositories.base import BaseRepository
from gamevault.shared.repositories.user_repository import UserRepository
from gamevault.shared.repositories.game_repository import GameRepository
from gamevault.shared.repositories.user_game_repository import UserGameRepository
from gamevault.shared.repositories.review_repository import ReviewRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "GameRepository",
    "UserGameRepository",
    "ReviewRepository",
]
