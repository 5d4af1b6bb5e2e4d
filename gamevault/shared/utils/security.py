"""
Security Utilities

Credential handling for GameVault accounts.

    hashed = SecurityUtils.hash_password(password)        # stored on users.password_hash
    SecurityUtils.verify_password(password, hashed)       # login check

    token = SecurityUtils.create_access_token({"user_id": str(user.id)}, settings.SECRET_KEY)
    claims = SecurityUtils.decode_access_token(token, settings.SECRET_KEY)

Bearer tokens are HS256 JWTs whose claims are the given data plus `iat`
and `exp`. A token that fails decoding for any reason surfaces as
ValueError; the auth dependency turns that into a 401.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt
from passlib.context import CryptContext


DEFAULT_TOKEN_LIFETIME = timedelta(days=7)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class SecurityUtils:
    """Stateless helpers; keys and lifetimes come from the caller's settings."""

    @staticmethod
    def hash_password(password: str) -> str:
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        return pwd_context.verify(plain_password, hashed_password)

    @staticmethod
    def create_access_token(
        data: dict[str, Any],
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        issued_at = datetime.now(timezone.utc)
        claims = {
            **data,
            "iat": issued_at,
            "exp": issued_at + (expires_delta or DEFAULT_TOKEN_LIFETIME),
        }
        return jwt.encode(claims, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict[str, Any]:
        """
        Verify signature and expiry and return the claims.

        Raises:
            ValueError: "Token has expired" or "Invalid token: <reason>"
        """
        try:
            return jwt.decode(token, secret_key, algorithms=[algorithm])
        except jwt.ExpiredSignatureError as e:
            raise ValueError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {e}") from e
