"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Resources: settings, cache, RAWG client, task queue (from app.state)
- Database: get_db(), DbSession
- Authentication: get_current_user(), CurrentUser
- Pagination: get_pagination(), Pagination
- Rate limiting: enforce_rate_limit() (application-wide)
- Services: get_*_service() functions

Usage:
======
    from gamevault.api.dependencies import CurrentUser, Pagination

    @router.get("/game/{game_id}")
    async def list_reviews(game_id: UUID, pagination: Pagination):
        ...
"""

from gamevault.api.dependencies.resources import (
    AppSettings,
    Cache,
    Rawg,
    Tasks,
    get_app_settings,
    get_cache,
    get_database,
    get_rawg_adapter,
    get_task_queue,
)
from gamevault.api.dependencies.database import DbSession, get_db
from gamevault.api.dependencies.auth import AuthContext, CurrentUser, get_current_user
from gamevault.api.dependencies.pagination import Pagination, get_pagination
from gamevault.api.dependencies.rate_limit import enforce_rate_limit

__all__ = [
    "AppSettings",
    "Cache",
    "Rawg",
    "Tasks",
    "get_app_settings",
    "get_cache",
    "get_database",
    "get_rawg_adapter",
    "get_task_queue",
    "DbSession",
    "get_db",
    "AuthContext",
    "CurrentUser",
    "get_current_user",
    "Pagination",
    "get_pagination",
    "enforce_rate_limit",
]
