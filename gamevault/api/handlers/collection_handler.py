"""
Collection Handler

Per-user game collection: list, add, update, remove.

Endpoints:
==========
    GET    /api/collection?status=&limit=&offset=
    POST   /api/collection                {rawgId, status?, playtime?}
    PATCH  /api/collection/{gameId}       {status?, playtime?}
    DELETE /api/collection/{gameId}

`gameId` in the path is the local Game id (as returned in entries), not the
catalog id.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Query, status

from gamevault.api.dependencies.auth import CurrentUser
from gamevault.api.dependencies.pagination import Pagination
from gamevault.api.dependencies.resources import Tasks
from gamevault.api.dependencies.services import get_collection_service
from gamevault.shared.models.enums import GameStatus
from gamevault.shared.schemas.collection import (
    CollectionAddRequest,
    CollectionEntryResponse,
    CollectionListResponse,
    CollectionUpdateRequest,
)
from gamevault.shared.schemas.common import PaginationMeta, SuccessResponse
from gamevault.shared.services.collection_service import CollectionService


router = APIRouter()


@router.get("", response_model=CollectionListResponse)
async def list_collection(
    current_user: CurrentUser,
    pagination: Pagination,
    status_filter: Optional[GameStatus] = Query(None, alias="status"),
    service: CollectionService = Depends(get_collection_service),
):
    """List the caller's collection, most recently added first."""
    page = await service.list_collection(
        current_user.user_id,
        status=status_filter,
        limit=pagination.limit,
        offset=pagination.offset,
    )
    return CollectionListResponse(
        games=[CollectionEntryResponse.model_validate(entry) for entry in page.items],
        pagination=PaginationMeta.create(
            total=page.total,
            limit=page.limit,
            offset=page.offset,
        ),
    )


@router.post(
    "",
    response_model=CollectionEntryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_game(
    data: CollectionAddRequest,
    current_user: CurrentUser,
    background_tasks: BackgroundTasks,
    task_queue: Tasks,
    service: CollectionService = Depends(get_collection_service),
):
    """
    Add a catalog game to the caller's collection.

    Raises:
        400: If the game is already in the collection
        404: If the catalog does not know the game
    """
    entry, game_created = await service.add_game(
        current_user.user_id,
        rawg_id=data.rawg_id,
        status=data.status,
        playtime=data.playtime,
    )

    if game_created:
        background_tasks.add_task(task_queue.refresh_global_stats)

    return CollectionEntryResponse.model_validate(entry)


@router.patch("/{game_id}", response_model=CollectionEntryResponse)
async def update_game(
    game_id: UUID,
    data: CollectionUpdateRequest,
    current_user: CurrentUser,
    service: CollectionService = Depends(get_collection_service),
):
    """
    Change status and/or playtime of a collection entry.

    Raises:
        404: If the game is not in the collection
    """
    entry = await service.update_game(
        current_user.user_id,
        game_id,
        status=data.status,
        playtime=data.playtime,
    )
    return CollectionEntryResponse.model_validate(entry)


@router.delete("/{game_id}", response_model=SuccessResponse)
async def remove_game(
    game_id: UUID,
    current_user: CurrentUser,
    service: CollectionService = Depends(get_collection_service),
):
    """
    Remove a game from the collection.

    Raises:
        404: If the game is not in the collection
    """
    await service.remove_game(current_user.user_id, game_id)
    return SuccessResponse()
