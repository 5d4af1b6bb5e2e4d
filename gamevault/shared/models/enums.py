"""
Enums used across the application.
"""

from enum import Enum


class GameStatus(str, Enum):
    """Where a game sits in a user's collection."""

    BACKLOG = "BACKLOG"
    PLAYING = "PLAYING"
    COMPLETED = "COMPLETED"
    DROPPED = "DROPPED"


class TaskName(str, Enum):
    """Background tasks understood by the worker."""

    SEND_EMAIL = "send_email"
    REFRESH_CACHE = "refresh_cache"


class CacheRefreshType(str, Enum):
    """Targets of the refresh_cache task."""

    GLOBAL_STATS = "global_stats"
    USER_STATS = "user_stats"
