"""
Games Handler

Catalog search and detail, served through the Redis cache. Payloads are the
upstream's JSON, returned unchanged.
"""

from typing import Any

from fastapi import APIRouter, Depends, Path, Query

from gamevault.api.dependencies.services import get_catalog_service
from gamevault.shared.services.catalog_service import CatalogService


router = APIRouter()


@router.get("/search")
async def search_games(
    q: str = Query(..., min_length=1, description="Search text"),
    page: int = Query(1, ge=1, description="Result page"),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Any:
    """
    Search the game catalog.

    Raises:
        400: If q is missing or empty
        <upstream status> / 503: If the catalog fails on a cache miss
    """
    return await catalog.search(q, page)


@router.get("/{rawg_id}")
async def get_game(
    rawg_id: int = Path(..., gt=0, description="Catalog game id"),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Any:
    """Full catalog detail for one game."""
    return await catalog.get_game_details(rawg_id)
