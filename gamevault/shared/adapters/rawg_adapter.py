"""
RAWG adapter - upstream game catalog client.

Thin async HTTP client over the RAWG REST API. Responses are returned as the
decoded JSON payload, untouched; caching lives one layer up in the catalog
service.

Endpoints used:
===============
    GET {base}/games?key=&search=&page=&page_size=   → search results
    GET {base}/games/{id}?key=                       → game detail

Failure Mapping:
================
    upstream non-2xx              → UpstreamUnavailableError(upstream_status=<status>)
    timeout / DNS / connection    → UpstreamUnavailableError (503)

There is no retry; the transport timeout bounds every call.
"""

import logging
from typing import Any, Optional

import httpx

from gamevault.config.settings import Settings
from gamevault.shared.core.exceptions import UpstreamUnavailableError

logger = logging.getLogger(__name__)

SERVICE_NAME = "RAWG"


class RawgAdapter:
    """
    Adapter for the RAWG catalog API.

    Handles:
    - Game search (paged)
    - Game detail lookup
    - Reachability probe for health checks
    """

    def __init__(
        self,
        settings: Settings,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize RAWG adapter.

        Args:
            settings: Application settings (base URL, key, timeout, page size)
            client: Pre-built client (tests pass one with a mock transport)
        """
        self.api_key = settings.RAWG_API_KEY
        self.page_size = settings.RAWG_SEARCH_PAGE_SIZE
        self._client = client or httpx.AsyncClient(
            base_url=settings.RAWG_BASE_URL,
            timeout=settings.RAWG_TIMEOUT_SECONDS,
            follow_redirects=True,
        )

    async def _get(self, path: str, params: dict[str, Any]) -> Any:
        query = {"key": self.api_key, **params}
        try:
            response = await self._client.get(path, params=query)
        except httpx.HTTPError as e:
            logger.error("RAWG request to %s failed: %s", path, e)
            raise UpstreamUnavailableError(
                SERVICE_NAME,
                message="Game catalog is unreachable",
            ) from e

        if response.is_error:
            logger.warning("RAWG returned %s for %s", response.status_code, path)
            raise UpstreamUnavailableError(
                SERVICE_NAME,
                message="Failed to fetch games",
                upstream_status=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamUnavailableError(
                SERVICE_NAME,
                message="Game catalog returned an unreadable response",
            ) from e

    async def search_games(self, query: str, page: int = 1) -> dict[str, Any]:
        """
        Search the catalog.

        Args:
            query: Free-text search
            page: 1-indexed result page
        """
        return await self._get(
            "/games",
            {"search": query, "page": page, "page_size": self.page_size},
        )

    async def get_game(self, rawg_id: int) -> dict[str, Any]:
        """Fetch full detail for one catalog id."""
        return await self._get(f"/games/{rawg_id}", {})

    async def ping(self) -> bool:
        """True if the catalog answers a minimal search with 2xx."""
        try:
            await self._get("/games", {"page_size": 1})
            return True
        except UpstreamUnavailableError:
            return False

    async def close(self) -> None:
        await self._client.aclose()
