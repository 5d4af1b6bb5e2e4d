"""
Game Schemas

Response model for the locally stored Game record. Catalog search and detail
endpoints do not use it: they return the upstream payload verbatim.
"""

from datetime import date
from typing import Optional
from uuid import UUID

from pydantic import Field

from gamevault.shared.schemas.common import BaseSchema


class GameResponse(BaseSchema):
    """Canonical game record."""

    id: UUID
    rawg_id: int
    name: str
    slug: str
    description: Optional[str] = None
    released: Optional[date] = None
    rating: Optional[float] = None
    metacritic: Optional[int] = None
    image_url: Optional[str] = None
    genres: list[str] = Field(default_factory=list)
    platforms: list[str] = Field(default_factory=list)
