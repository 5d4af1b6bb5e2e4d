"""
User Schemas

Request/response models for user and authentication endpoints.
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, Field

from gamevault.shared.schemas.common import BaseSchema


def _check_email_format(value: str) -> str:
    # Format check only; the address is stored exactly as entered
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}") from e
    return value


Email = Annotated[str, AfterValidator(_check_email_format)]


class UserCreate(BaseSchema):
    """Schema for user registration."""

    email: Email
    username: str = Field(
        min_length=3,
        max_length=20,
        description="Public display name (3-20 characters)",
    )
    password: str = Field(
        min_length=8,
        description="Password (minimum 8 characters)",
    )


class UserLogin(BaseSchema):
    """Schema for user login."""

    email: Email
    password: str


class UserResponse(BaseSchema):
    """Schema for user response."""

    id: UUID
    email: str
    username: str
    created_at: datetime


class UserSummary(BaseSchema):
    """Public author info embedded in reviews."""

    id: UUID
    username: str


class AuthResponse(BaseSchema):
    """Schema for register/login response."""

    user: UserResponse
    token: str


class MeResponse(BaseSchema):
    """Schema for the current-user endpoint."""

    user: UserResponse
