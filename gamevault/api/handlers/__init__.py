"""
API Handlers

Route handlers grouped by resource. Each module exposes a `router`.
"""

from gamevault.api.handlers import (
    auth_handler,
    collection_handler,
    games_handler,
    health_handler,
    reviews_handler,
    stats_handler,
)

__all__ = [
    "auth_handler",
    "collection_handler",
    "games_handler",
    "health_handler",
    "reviews_handler",
    "stats_handler",
]
