"""
Authentication Dependencies

FastAPI dependencies for user authentication.

Dependency Hierarchy:
=====================
    get_current_user_token()  ← Extract and validate JWT from header
           │
           ▼
    get_current_user()        ← Typed AuthContext(user_id) for handlers

Type Aliases:
=============
    CurrentUser - AuthContext of the authenticated caller

Usage:
======
    from gamevault.api.dependencies.auth import CurrentUser

    @router.get("/me")
    async def get_me(current_user: CurrentUser):
        return await service.get_user(current_user.user_id)
"""

from dataclasses import dataclass
from typing import Annotated, Any, Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from gamevault.api.dependencies.resources import AppSettings
from gamevault.shared.core.exceptions import AuthenticationError
from gamevault.shared.utils.security import SecurityUtils


# auto_error=False so a missing header is reported as 401 by us, not 403
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AuthContext:
    """Identity of the authenticated caller, resolved once per request."""

    user_id: UUID


async def get_current_user_token(
    settings: AppSettings,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> dict[str, Any]:
    """
    Extract and validate JWT token from Authorization header.

    Raises:
        AuthenticationError: If token is missing or invalid
    """
    if not credentials:
        raise AuthenticationError("Authorization header required")

    try:
        return SecurityUtils.decode_access_token(
            credentials.credentials,
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
    except ValueError as e:
        raise AuthenticationError(str(e)) from e


async def get_current_user(
    token: Annotated[dict[str, Any], Depends(get_current_user_token)],
) -> AuthContext:
    """
    Build the typed request context from the token payload.

    Raises:
        AuthenticationError: If user_id is missing or malformed
    """
    user_id = token.get("user_id")
    if not user_id:
        raise AuthenticationError("Invalid token payload")

    try:
        return AuthContext(user_id=UUID(str(user_id)))
    except ValueError as e:
        raise AuthenticationError("Invalid token payload") from e


CurrentUser = Annotated[AuthContext, Depends(get_current_user)]
