"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health             → Health check endpoints
    /api/auth           → Registration, login, current user
    /api/games          → Catalog search and detail (cached)
    /api/collection     → Per-user collection (CRUD)
    /api/reviews        → Reviews
    /api/stats          → User and global statistics
"""

from fastapi import FastAPI

from gamevault.api.handlers import (
    auth_handler,
    collection_handler,
    games_handler,
    health_handler,
    reviews_handler,
    stats_handler,
)
from gamevault.shared.schemas.common import ErrorResponse


# Documented on every /api router; bodies come from the global error handlers
ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    429: {"model": ErrorResponse},
}


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    app.include_router(
        auth_handler.router,
        prefix="/api/auth",
        tags=["Authentication"],
        responses=ERROR_RESPONSES,
    )

    app.include_router(
        games_handler.router,
        prefix="/api/games",
        tags=["Games"],
        responses=ERROR_RESPONSES,
    )

    app.include_router(
        collection_handler.router,
        prefix="/api/collection",
        tags=["Collection"],
        responses=ERROR_RESPONSES,
    )

    app.include_router(
        reviews_handler.router,
        prefix="/api/reviews",
        tags=["Reviews"],
        responses=ERROR_RESPONSES,
    )

    app.include_router(
        stats_handler.router,
        prefix="/api/stats",
        tags=["Stats"],
        responses=ERROR_RESPONSES,
    )
