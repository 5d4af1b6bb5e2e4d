"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from gamevault.shared.core.logging import logger, get_logger
    from gamevault.shared.core.exceptions import GameVaultException, NotFoundError

    logger.info("Starting operation", user_id=user_id)
"""

from gamevault.shared.core.logging import (
    logger,
    get_logger,
    setup_logging,
    log_context,
    clear_log_context,
)
from gamevault.shared.core.exceptions import (
    GameVaultException,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    UserNotFoundError,
    GameNotFoundError,
    CollectionEntryNotFoundError,
    ReviewNotFoundError,
    ValidationError,
    InvalidPreconditionError,
    ConflictError,
    DuplicateResourceError,
    RateLimitError,
    UpstreamUnavailableError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "setup_logging",
    "log_context",
    "clear_log_context",
    # Exceptions
    "GameVaultException",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "UserNotFoundError",
    "GameNotFoundError",
    "CollectionEntryNotFoundError",
    "ReviewNotFoundError",
    "ValidationError",
    "InvalidPreconditionError",
    "ConflictError",
    "DuplicateResourceError",
    "RateLimitError",
    "UpstreamUnavailableError",
]
