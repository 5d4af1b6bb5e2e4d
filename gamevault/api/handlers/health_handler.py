"""
Health Check Handler

Provides health check endpoints for monitoring and load balancers.

    GET /health            liveness: always 200 while the process serves
    GET /health/detailed   dependency probes: database, Redis, RAWG;
                           200 "healthy" or 503 "degraded"
"""

import time
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from gamevault.api.dependencies.resources import Cache, Rawg, get_database
from gamevault.shared.db.session import Database
from gamevault.shared.schemas.common import (
    DetailedHealthResponse,
    HealthChecks,
    HealthResponse,
)


router = APIRouter()


def _uptime(request: Request) -> float:
    return round(time.monotonic() - request.app.state.started_at, 3)


def _status(ok: bool) -> str:
    return "healthy" if ok else "unhealthy"


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Basic health check endpoint."""
    return HealthResponse(status="ok", uptime=_uptime(request))


@router.get(
    "/health/detailed",
    response_model=DetailedHealthResponse,
    responses={503: {"model": DetailedHealthResponse}},
)
async def detailed_health_check(
    request: Request,
    database: Annotated[Database, Depends(get_database)],
    cache: Cache,
    rawg: Rawg,
):
    """Probe every dependency; any failure marks the service degraded."""
    checks = HealthChecks(
        database=_status(await database.ping()),
        redis=_status(await cache.ping()),
        rawg_api=_status(await rawg.ping()),
        uptime=_uptime(request),
    )
    healthy = all(
        value == "healthy" for value in (checks.database, checks.redis, checks.rawg_api)
    )
    body = DetailedHealthResponse(
        status="healthy" if healthy else "degraded",
        checks=checks,
    )
    return JSONResponse(
        status_code=200 if healthy else 503,
        content=body.model_dump(mode="json", by_alias=True),
    )
