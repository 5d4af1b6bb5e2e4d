"""
Database Module

Provides the async engine/session owner used by the API and the worker.

Usage:
======
    from gamevault.shared.db import Database

    database = Database(settings)
    await database.connect()
"""

from gamevault.shared.db.session import Database

__all__ = ["Database"]
