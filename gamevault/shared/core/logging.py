"""
Logging Configuration

structlog on top of stdlib logging, configured once per process by the API
factory or the worker entry point.

Rendering:
==========
APP_ENV=development renders coloured key=value lines:

    2026-10-19T10:30:00Z [info     ] Game added to collection  user_id=550e8400-... status=playing

Every other environment renders one JSON object per line, with tracebacks
serialised into the `exception` field.

Request Context:
================
The HTTP middleware binds `request_id` through log_context() so every line
logged while a request is handled carries it; clear_log_context() resets it
before the next request on the same task.
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.typing import Processor

from gamevault.config.settings import Settings, get_settings

# Libraries that are chatty at INFO. uvicorn.access duplicates the request
# middleware's own line.
QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "botocore", "httpx", "passlib")


def setup_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.is_development:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))
    else:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Named logger, e.g. get_logger("gamevault.worker")."""
    return structlog.get_logger(name)


def log_context(**values: Any) -> None:
    """Bind values onto every log line emitted from the current context."""
    structlog.contextvars.bind_contextvars(**values)


def clear_log_context() -> None:
    structlog.contextvars.clear_contextvars()


logger = get_logger("gamevault")
