"""
Collection Schemas

Request/response models for the per-user game collection.

Request Examples:
=================
    POST /api/collection
    {"rawgId": 3498, "status": "PLAYING", "playtime": 12.5}

    PATCH /api/collection/{gameId}
    {"status": "COMPLETED"}
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from gamevault.shared.models.enums import GameStatus
from gamevault.shared.schemas.common import BaseSchema, PaginationMeta
from gamevault.shared.schemas.game import GameResponse


class CollectionAddRequest(BaseSchema):
    """Add a catalog game to the caller's collection."""

    rawg_id: int = Field(gt=0, description="Upstream catalog id")
    status: Optional[GameStatus] = Field(default=None, description="Defaults to BACKLOG")
    playtime: Optional[float] = Field(default=None, ge=0, description="Hours played")


class CollectionUpdateRequest(BaseSchema):
    """Partial update; omitted fields keep their value."""

    status: Optional[GameStatus] = None
    playtime: Optional[float] = Field(default=None, ge=0)


class CollectionEntryResponse(BaseSchema):
    """A collection entry joined with its game."""

    id: UUID
    game_id: UUID
    status: GameStatus
    playtime: Optional[float] = None
    added_at: datetime
    game: GameResponse


class CollectionListResponse(BaseSchema):
    """Paginated collection."""

    games: list[CollectionEntryResponse]
    pagination: PaginationMeta
