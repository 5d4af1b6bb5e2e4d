"""
Review Schemas

Request/response models for reviews.

Validation:
===========
- rating: 1..10 inclusive, decimals allowed
- content: optional, at most 2000 characters; "" is stored as null
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from gamevault.shared.schemas.common import BaseSchema, PaginationMeta
from gamevault.shared.schemas.game import GameResponse
from gamevault.shared.schemas.user import UserSummary


def _empty_to_none(value: Optional[str]) -> Optional[str]:
    if value == "":
        return None
    return value


class ReviewCreate(BaseSchema):
    """Submit (or resubmit) a review for a game in the caller's collection."""

    game_id: UUID
    rating: float = Field(ge=1, le=10)
    content: Optional[str] = Field(default=None, max_length=2000)

    @field_validator("content")
    @classmethod
    def normalize_content(cls, value: Optional[str]) -> Optional[str]:
        return _empty_to_none(value)


class ReviewUpdate(BaseSchema):
    """Partial review update."""

    rating: Optional[float] = Field(default=None, ge=1, le=10)
    content: Optional[str] = Field(default=None, max_length=2000)

    @field_validator("content")
    @classmethod
    def normalize_content(cls, value: Optional[str]) -> Optional[str]:
        return _empty_to_none(value)


class ReviewResponse(BaseSchema):
    """Review with its author and game."""

    id: UUID
    rating: float
    content: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    user: UserSummary
    game: GameResponse


class ReviewListResponse(BaseSchema):
    """Paginated reviews of one game."""

    reviews: list[ReviewResponse]
    pagination: PaginationMeta


class MyReviewsResponse(BaseSchema):
    """All reviews written by the caller."""

    reviews: list[ReviewResponse]
