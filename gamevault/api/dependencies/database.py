"""
Database Dependency

One AsyncSession per request, opened from the Database held on app.state.
The session commits after the handler returns and rolls back if it raises,
so a handler never commits by itself.

    @router.post("")
    async def add_to_collection(db: DbSession, ...):
        ...
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from gamevault.api.dependencies.resources import get_database
from gamevault.shared.db.session import Database


async def get_db(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncGenerator[AsyncSession, None]:
    async with database.session() as session:
        yield session


DbSession = Annotated[AsyncSession, Depends(get_db)]
