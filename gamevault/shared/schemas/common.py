"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- BaseSchema: Base with common config (camelCase aliases, from_attributes)
- Pagination: Parameters and response metadata
- Standard Responses: SuccessResponse, ErrorResponse
- Health: HealthResponse, DetailedHealthResponse

JSON Field Names:
=================
Fields are declared in snake_case and serialized in camelCase:

    class CollectionEntryResponse(BaseSchema):
        added_at: datetime        # → "addedAt"

Request bodies accept both spellings (populate_by_name).
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All request and response schemas inherit from this class.
    Provides:
    - alias_generator: camelCase JSON field names
    - from_attributes: Allow creating from ORM models
    - populate_by_name: Allow field population by name or alias
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        from_attributes=True,
        populate_by_name=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# PAGINATION
# ═══════════════════════════════════════════════════════════════════════════════


class PaginationParams(BaseModel):
    """
    Offset pagination query parameters.

    Built by the pagination dependency from `?limit=&offset=`.
    """

    limit: int = Field(default=20, ge=1, description="Items per page")
    offset: int = Field(default=0, ge=0, description="Items to skip")


class PaginationMeta(BaseSchema):
    """
    Pagination metadata in response.

    Example:
        {"total": 45, "limit": 20, "offset": 20, "hasMore": true}
    """

    total: int = Field(description="Total number of items")
    limit: int = Field(description="Items per page")
    offset: int = Field(description="Items skipped")
    has_more: bool = Field(description="Whether another page exists")

    @classmethod
    def create(cls, total: int, limit: int, offset: int) -> "PaginationMeta":
        """Create pagination meta; hasMore is offset + limit < total."""
        return cls(
            total=total,
            limit=limit,
            offset=offset,
            has_more=offset + limit < total,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class SuccessResponse(BaseModel):
    """Acknowledgement for deletes."""

    success: bool = True


class ErrorDetail(BaseModel):
    """Error detail structure in error responses."""

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context",
    )


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    Example:
        {
            "error": {
                "code": "NOT_FOUND",
                "message": "Review with id 'abc-123' not found",
                "details": {}
            }
        }
    """

    error: ErrorDetail


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseSchema):
    """Liveness response."""

    status: str = "ok"
    timestamp: datetime = Field(default_factory=utc_now)
    uptime: float = Field(description="Process uptime in seconds")


class HealthChecks(BaseSchema):
    """Per-dependency results: "healthy" or "unhealthy"."""

    database: str = "unknown"
    redis: str = "unknown"
    rawg_api: str = "unknown"
    uptime: float = 0.0


class DetailedHealthResponse(BaseSchema):
    """Dependency health; status is "healthy" or "degraded"."""

    status: str
    checks: HealthChecks
    timestamp: datetime = Field(default_factory=utc_now)
