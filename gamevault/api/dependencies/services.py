"""
Service Dependencies

FastAPI dependencies for service injection.

These dependencies create service instances with proper session and adapter
injection. Services are created per-request, which is fine because:
- Services only hold references to the session and shared adapters
- Each request gets its own db session
- FastAPI caches a dependency per request, so every service in a request
  shares the same session and transaction

Usage:
======
    from gamevault.api.dependencies.services import get_collection_service

    @router.post("")
    async def add_game(
        data: CollectionAddRequest,
        service: CollectionService = Depends(get_collection_service),
    ):
        ...
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from gamevault.api.dependencies.database import get_db
from gamevault.api.dependencies.resources import AppSettings, Cache, Rawg
from gamevault.shared.services.auth_service import AuthService
from gamevault.shared.services.catalog_service import CatalogService
from gamevault.shared.services.collection_service import CollectionService
from gamevault.shared.services.game_service import GameService
from gamevault.shared.services.review_service import ReviewService
from gamevault.shared.services.stats_service import StatsService


async def get_auth_service(
    settings: AppSettings,
    db: AsyncSession = Depends(get_db),
) -> AuthService:
    return AuthService(db, settings)


async def get_catalog_service(
    rawg: Rawg,
    cache: Cache,
    settings: AppSettings,
) -> CatalogService:
    return CatalogService(rawg, cache, settings)


async def get_game_service(
    db: AsyncSession = Depends(get_db),
    catalog: CatalogService = Depends(get_catalog_service),
) -> GameService:
    return GameService(db, catalog)


async def get_collection_service(
    db: AsyncSession = Depends(get_db),
    games: GameService = Depends(get_game_service),
) -> CollectionService:
    return CollectionService(db, games)


async def get_review_service(
    db: AsyncSession = Depends(get_db),
    games: GameService = Depends(get_game_service),
    collection: CollectionService = Depends(get_collection_service),
) -> ReviewService:
    return ReviewService(db, games, collection)


async def get_stats_service(
    cache: Cache,
    settings: AppSettings,
    db: AsyncSession = Depends(get_db),
) -> StatsService:
    return StatsService(db, cache, settings)
