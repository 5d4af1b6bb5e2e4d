"""
Service Layer

Business logic shared by the API and the worker. Services receive their
session and adapters through the constructor.
"""

from gamevault.shared.services.auth_service import AuthService
from gamevault.shared.services.catalog_service import CatalogService
from gamevault.shared.services.game_service import GameService, map_rawg_payload
from gamevault.shared.services.collection_service import CollectionService, PaginatedEntries
from gamevault.shared.services.review_service import ReviewService
from gamevault.shared.services.stats_service import StatsService, aggregate_user_stats
from gamevault.shared.services.task_queue import TaskQueue

__all__ = [
    "AuthService",
    "CatalogService",
    "GameService",
    "map_rawg_payload",
    "CollectionService",
    "PaginatedEntries",
    "ReviewService",
    "StatsService",
    "aggregate_user_stats",
    "TaskQueue",
]
