"""
Custom Exceptions

Domain errors carry the HTTP status and machine-readable code they map to,
so services raise them directly and the error handler renders them without
a lookup table.

Exception Hierarchy:
====================
    GameVaultException (500 INTERNAL_ERROR)
       │
       ├── ValidationError (400 VALIDATION_ERROR)
       ├── InvalidPreconditionError (400 INVALID_PRECONDITION)  ← e.g. reviewing an unowned game
       ├── ConflictError (400 CONFLICT)                         ← uniqueness, deliberately not 409
       │      └── DuplicateResourceError
       ├── AuthenticationError (401 AUTHENTICATION_ERROR)
       ├── AuthorizationError (403 AUTHORIZATION_ERROR)         ← someone else's review
       ├── NotFoundError (404 NOT_FOUND)
       │      ├── UserNotFoundError
       │      ├── GameNotFoundError
       │      ├── CollectionEntryNotFoundError
       │      └── ReviewNotFoundError
       ├── RateLimitError (429 RATE_LIMIT_EXCEEDED)
       └── UpstreamUnavailableError (upstream status or 503 UPSTREAM_UNAVAILABLE)

Rendered body:

    {"error": {"code": "CONFLICT", "message": "Game already in collection", "details": {"rawg_id": 3498}}}
"""

from typing import Any, Optional


class GameVaultException(Exception):
    """
    Base for every error the API reports on purpose.

    Subclasses set `status_code`, `error_code` and `default_message`; callers
    override the message or attach `details` per raise.
    """

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"
    default_message: str = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message or self.default_message
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code
        if error_code is not None:
            self.error_code = error_code
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# 400
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(GameVaultException):
    status_code = 400
    error_code = "VALIDATION_ERROR"
    default_message = "Validation failed"


class InvalidPreconditionError(GameVaultException):
    """Well-formed request that the current state does not allow."""

    status_code = 400
    error_code = "INVALID_PRECONDITION"
    default_message = "Precondition failed"


class ConflictError(GameVaultException):
    status_code = 400
    error_code = "CONFLICT"
    default_message = "Resource conflict"


class DuplicateResourceError(ConflictError):
    default_message = "Resource already exists"


# ═══════════════════════════════════════════════════════════════════════════════
# 401 / 403
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(GameVaultException):
    """Missing, malformed or expired bearer token, or bad login credentials."""

    status_code = 401
    error_code = "AUTHENTICATION_ERROR"
    default_message = "Authentication failed"


class AuthorizationError(GameVaultException):
    status_code = 403
    error_code = "AUTHORIZATION_ERROR"
    default_message = "Forbidden"


# ═══════════════════════════════════════════════════════════════════════════════
# 404
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(GameVaultException):
    """
    Message is built from the resource name:

        NotFoundError("Review", review_id)  →  "Review with id '<id>' not found"
        NotFoundError("Review")             →  "Review not found"
    """

    status_code = 404
    error_code = "NOT_FOUND"

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        else:
            message = f"{resource} not found"
        super().__init__(message, details=details)


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: str) -> None:
        super().__init__("User", user_id)


class GameNotFoundError(NotFoundError):
    """Neither stored locally nor known to the catalog."""

    def __init__(self, game_id: str) -> None:
        super().__init__("Game", game_id)


class CollectionEntryNotFoundError(NotFoundError):
    def __init__(self, game_id: str) -> None:
        super().__init__("Collection entry", details={"game_id": game_id})
        self.message = "Game not in collection"


class ReviewNotFoundError(NotFoundError):
    def __init__(self, review_id: str) -> None:
        super().__init__("Review", review_id)


# ═══════════════════════════════════════════════════════════════════════════════
# 429 / UPSTREAM
# ═══════════════════════════════════════════════════════════════════════════════


class RateLimitError(GameVaultException):
    """`retry_after` becomes both details.retry_after_seconds and the Retry-After header."""

    status_code = 429
    error_code = "RATE_LIMIT_EXCEEDED"
    default_message = "Too many requests"

    def __init__(
        self,
        message: Optional[str] = None,
        retry_after: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.retry_after = retry_after
        details = dict(details or {})
        if retry_after:
            details["retry_after_seconds"] = retry_after
        super().__init__(message, details=details)


class UpstreamUnavailableError(GameVaultException):
    """
    Catalog call failed.

    A non-2xx answer keeps the upstream's status (a 404 from RAWG stays 404);
    a call that never completed is 503.
    """

    error_code = "UPSTREAM_UNAVAILABLE"

    def __init__(
        self,
        service_name: str,
        message: Optional[str] = None,
        upstream_status: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.upstream_status = upstream_status
        details = {**(details or {}), "service": service_name}
        if upstream_status is not None:
            details["upstream_status"] = upstream_status
        super().__init__(
            message or f"{service_name} service error",
            status_code=upstream_status or 503,
            details=details,
        )

    @property
    def is_not_found(self) -> bool:
        return self.upstream_status == 404
