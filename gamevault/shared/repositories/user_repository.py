"""
User Repository

Account lookups used by registration and login. Emails are stored as
entered, so callers pass them through unchanged.
"""

from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from gamevault.shared.repositories.base import BaseRepository
from gamevault.shared.models.user import User


class UserRepository(BaseRepository[User]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(User, session)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Login lookup."""
        return await self.session.scalar(select(User).where(User.email == email))

    async def get_by_email_or_username(self, email: str, username: str) -> Optional[User]:
        """
        First account that already holds this email or this username.

        Registration uses it as a pre-check; the unique constraints on both
        columns still decide concurrent sign-ups.
        """
        statement = (
            select(User)
            .where(or_(User.email == email, User.username == username))
            .limit(1)
        )
        return await self.session.scalar(statement)
