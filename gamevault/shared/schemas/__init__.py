"""
Pydantic Schemas

Request validation and response serialization models.
"""

from gamevault.shared.schemas.common import (
    BaseSchema,
    DetailedHealthResponse,
    ErrorResponse,
    HealthChecks,
    HealthResponse,
    PaginationMeta,
    PaginationParams,
    SuccessResponse,
)
from gamevault.shared.schemas.user import (
    AuthResponse,
    MeResponse,
    UserCreate,
    UserLogin,
    UserResponse,
    UserSummary,
)
from gamevault.shared.schemas.game import GameResponse
from gamevault.shared.schemas.collection import (
    CollectionAddRequest,
    CollectionEntryResponse,
    CollectionListResponse,
    CollectionUpdateRequest,
)
from gamevault.shared.schemas.review import (
    MyReviewsResponse,
    ReviewCreate,
    ReviewListResponse,
    ReviewResponse,
    ReviewUpdate,
)
from gamevault.shared.schemas.stats import (
    GenreCount,
    GlobalStatsResponse,
    PopularGame,
    UserStatsResponse,
)

__all__ = [
    "BaseSchema",
    "DetailedHealthResponse",
    "ErrorResponse",
    "HealthChecks",
    "HealthResponse",
    "PaginationMeta",
    "PaginationParams",
    "SuccessResponse",
    "AuthResponse",
    "MeResponse",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "UserSummary",
    "GameResponse",
    "CollectionAddRequest",
    "CollectionEntryResponse",
    "CollectionListResponse",
    "CollectionUpdateRequest",
    "MyReviewsResponse",
    "ReviewCreate",
    "ReviewListResponse",
    "ReviewResponse",
    "ReviewUpdate",
    "GenreCount",
    "GlobalStatsResponse",
    "PopularGame",
    "UserStatsResponse",
]
