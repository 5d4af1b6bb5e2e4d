"""
Stats Schemas

Derived summaries. These are cached in Redis as their JSON form
(`model_dump(mode="json", by_alias=True)`) and re-validated on a hit.
"""

from pydantic import Field

from gamevault.shared.schemas.common import BaseSchema
from gamevault.shared.schemas.game import GameResponse


class GenreCount(BaseSchema):
    genre: str
    count: int


class UserStatsResponse(BaseSchema):
    """
    Per-user summary.

    status_count is keyed by status name (BACKLOG, PLAYING, COMPLETED,
    DROPPED) and always contains all four.
    """

    total_games: int = 0
    total_playtime: float = 0
    status_count: dict[str, int] = Field(default_factory=dict)
    top_genres: list[GenreCount] = Field(default_factory=list)
    total_reviews: int = 0
    average_rating: float = 0


class PopularGame(BaseSchema):
    game: GameResponse
    user_count: int


class GlobalStatsResponse(BaseSchema):
    """Site-wide summary."""

    total_users: int = 0
    total_games: int = 0
    total_reviews: int = 0
    total_collections: int = 0
    popular_games: list[PopularGame] = Field(default_factory=list)
