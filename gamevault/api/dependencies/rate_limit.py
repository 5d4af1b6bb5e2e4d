"""
Rate Limit Dependency

Fixed-window request limit per (client IP, route template), installed as an
application-wide dependency so it runs ahead of every route.

    key = ratelimit:<client ip>:<route path template>

The route template (e.g. /api/collection/{game_id}) is used rather than the
concrete URL, so every game id shares one counter. When Redis is down the
request is allowed.
"""

from fastapi import Request

from gamevault.api.dependencies.resources import AppSettings, Cache
from gamevault.shared.core.exceptions import RateLimitError
from gamevault.shared.core.logging import logger


def rate_limit_key(request: Request) -> str:
    route = request.scope.get("route")
    path = getattr(route, "path", None) or request.url.path
    client_ip = request.client.host if request.client else "unknown"
    return f"ratelimit:{client_ip}:{path}"


async def enforce_rate_limit(
    request: Request,
    cache: Cache,
    settings: AppSettings,
) -> None:
    """
    Count the request and reject it once the window's cap is exceeded.

    Raises:
        RateLimitError: With retry_after set to the window's remaining seconds
    """
    if not settings.RATE_LIMIT_ENABLED:
        return

    key = rate_limit_key(request)
    allowed, current, retry_after = await cache.check_rate_limit(
        key,
        limit=settings.RATE_LIMIT_MAX_REQUESTS,
        window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
    )
    if not allowed:
        logger.warning("Rate limit exceeded", key=key, count=current)
        raise RateLimitError(retry_after=retry_after)
