"""
Base Repository

Shared persistence helpers for the GameVault tables. Each entity repository
subclasses this with its model and adds the queries only it needs
(rawg_id lookups, per-user collection pages, review summaries).

    class GameRepository(BaseRepository[Game]):
        def __init__(self, session):
            super().__init__(Game, session)

Transactions:
=============
Writes here flush and never commit. The request (or worker task) owns the
transaction through Database.session(), so a service that touches several
tables either lands all of it or none of it.
"""

from typing import Any, Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from gamevault.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Primary-key reads, equality-filtered counts and flushed writes."""

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    def _where(self, statement: Any, filters: Optional[dict[str, Any]]) -> Any:
        for column, value in (filters or {}).items():
            statement = statement.where(getattr(self.model, column) == value)
        return statement

    async def get(self, record_id: UUID) -> Optional[ModelType]:
        return await self.session.get(self.model, record_id)

    async def count(self, filters: Optional[dict[str, Any]] = None) -> int:
        """Row count, e.g. count(filters={"game_id": game.id}) for a game's reviews."""
        statement = self._where(select(func.count()).select_from(self.model), filters)
        return (await self.session.execute(statement)).scalar_one()

    async def create(self, **values: Any) -> ModelType:
        """Insert and refresh so server defaults (ids, timestamps) are populated."""
        record = self.model(**values)
        self.session.add(record)
        await self.session.flush()
        await self.session.refresh(record)
        return record

    async def update(self, record: ModelType, **changes: Any) -> ModelType:
        """
        Partial update: a None value means "leave unchanged", so a PATCH
        body can be passed through as-is.
        """
        for column, value in changes.items():
            if value is not None:
                setattr(record, column, value)
        await self.session.flush()
        await self.session.refresh(record)
        return record

    async def delete(self, record: ModelType) -> None:
        await self.session.delete(record)
        await self.session.flush()
