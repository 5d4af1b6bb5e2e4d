"""
GameVault API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                              GAMEVAULT API                                  │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   Middleware:   CORS → Request logging → Error handlers                     │
│                              │                                              │
│                              ▼                                              │
│   App-wide dependency:  Rate limiter (Redis fixed window)                   │
│                              │                                              │
│                              ▼                                              │
│   Routers:  Health │ Auth │ Games │ Collection │ Reviews │ Stats            │
│                              │                                              │
│                              ▼                                              │
│   Injected from app.state:  Database │ Redis │ RAWG client │ Task queue     │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database verified (tables auto-created if configured), Redis client,
   RAWG HTTP client and SQS producer built and stored on app.state
3. Application serves requests
4. Application stops → lifespan shutdown
5. RAWG client, Redis pool and database engine closed

Usage:
======
    gamevault-api                                  # HOST / PORT from settings
    uvicorn gamevault.api.main:app --port 3001 --reload

    from gamevault.api.main import create_application
    app = create_application(Settings(DATABASE_URL="sqlite+aiosqlite:///./dev.db"))
"""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gamevault.api.dependencies.rate_limit import enforce_rate_limit
from gamevault.api.middleware import RequestLoggingMiddleware, setup_exception_handlers
from gamevault.api.routes import register_routes
from gamevault.config.settings import Settings, get_settings
from gamevault.shared.adapters.rawg_adapter import RawgAdapter
from gamevault.shared.adapters.redis_adapter import RedisAdapter
from gamevault.shared.adapters.sqs_adapter import SQSAdapter
from gamevault.shared.core.logging import logger, setup_logging
from gamevault.shared.db.session import Database
from gamevault.shared.services.task_queue import TaskQueue


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Verify the database (and create tables when DATABASE_AUTO_CREATE is set)
    - Build Redis, RAWG and SQS clients

    Shutdown:
    - Close every client and dispose of the engine
    """
    settings: Settings = app.state.settings

    logger.info(
        "Starting GameVault API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )

    database = Database(settings)
    await database.connect()

    app.state.database = database
    app.state.cache = RedisAdapter(settings.REDIS_URL)
    app.state.rawg = RawgAdapter(settings)
    app.state.task_queue = TaskQueue(SQSAdapter.from_settings(settings), settings.SQS_TASK_QUEUE_URL)

    logger.info("GameVault API started successfully")

    try:
        yield
    finally:
        logger.info("Shutting down GameVault API")

        await app.state.rawg.close()
        await app.state.cache.close()
        await database.close()

        logger.info("GameVault API shutdown complete")


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Explicit settings; defaults to the cached environment settings

    This factory function:
    1. Creates the FastAPI app with settings
    2. Adds middleware (CORS, request logging)
    3. Sets up exception handlers
    4. Registers all routes behind the rate limiter
    """
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Game collection tracker",
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
        dependencies=[Depends(enforce_rate_limit)],
    )
    app.state.settings = settings
    app.state.started_at = time.monotonic()

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    register_routes(app)

    return app


app = create_application()


def serve() -> None:
    """Console entry point: run the API under uvicorn on HOST:PORT."""
    settings = get_settings()
    uvicorn.run("gamevault.api.main:app", host=settings.HOST, port=settings.PORT)
