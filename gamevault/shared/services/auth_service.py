"""
Authentication Service

Business logic for user authentication and registration.

Service Pattern:
================
Services encapsulate business logic and coordinate between:
- Repositories (data access)
- Security utilities (hashing, tokens)
- Domain rules (uniqueness, credential checks)

Usage:
======
    from gamevault.shared.services.auth_service import AuthService

    service = AuthService(db, settings)
    user, token = await service.register_user(email, username, password)
"""

from datetime import timedelta
from typing import Tuple
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gamevault.config.settings import Settings
from gamevault.shared.core.exceptions import (
    AuthenticationError,
    DuplicateResourceError,
    UserNotFoundError,
)
from gamevault.shared.core.logging import logger
from gamevault.shared.models.user import User
from gamevault.shared.repositories.user_repository import UserRepository
from gamevault.shared.utils.security import SecurityUtils


INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    """
    Service for authentication-related business logic.

    Handles:
    - User registration with email/username/password
    - User authentication (login)
    - JWT token generation
    - Current-user lookup
    """

    def __init__(self, session: AsyncSession, settings: Settings) -> None:
        self.session = session
        self.settings = settings
        self.repo = UserRepository(session)

    def _issue_token(self, user: User) -> str:
        return SecurityUtils.create_access_token(
            data={"user_id": str(user.id)},
            secret_key=self.settings.SECRET_KEY,
            expires_delta=timedelta(minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            algorithm=self.settings.JWT_ALGORITHM,
        )

    async def register_user(
        self,
        email: str,
        username: str,
        password: str,
    ) -> Tuple[User, str]:
        """
        Register a new user.

        Args:
            email: User's email address
            username: Public display name
            password: Plain text password (will be hashed)

        Returns:
            Tuple of (user, access_token)

        Raises:
            DuplicateResourceError: If the email or the username is taken
        """
        if await self.repo.get_by_email_or_username(email, username):
            raise DuplicateResourceError("User already exists")

        password_hash = SecurityUtils.hash_password(password)

        # Concurrent registrations race on the unique indexes
        try:
            async with self.session.begin_nested():
                user = await self.repo.create(
                    email=email,
                    username=username,
                    password_hash=password_hash,
                )
        except IntegrityError:
            raise DuplicateResourceError("User already exists")

        logger.info("User registered", user_id=str(user.id))
        return user, self._issue_token(user)

    async def login_user(
        self,
        email: str,
        password: str,
    ) -> Tuple[User, str]:
        """
        Authenticate user and generate token.

        Unknown email and wrong password produce the same error.

        Raises:
            AuthenticationError: If credentials are invalid
        """
        user = await self.repo.get_by_email(email)
        if not user:
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not SecurityUtils.verify_password(password, user.password_hash):
            raise AuthenticationError(INVALID_CREDENTIALS)

        return user, self._issue_token(user)

    async def get_user(self, user_id: UUID) -> User:
        """
        Load the authenticated user's profile.

        Raises:
            UserNotFoundError: If the account no longer exists
        """
        user = await self.repo.get(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))
        return user
