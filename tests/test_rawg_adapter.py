"""RAWG HTTP client against a mock transport."""

import asyncio

import httpx
import pytest

from gamevault.config.settings import Settings
from gamevault.shared.adapters.rawg_adapter import RawgAdapter
from gamevault.shared.core.exceptions import UpstreamUnavailableError


def make_adapter(handler) -> RawgAdapter:
    settings = Settings(RAWG_API_KEY="test-key", RAWG_SEARCH_PAGE_SIZE=5)
    client = httpx.AsyncClient(
        base_url=settings.RAWG_BASE_URL,
        transport=httpx.MockTransport(handler),
    )
    return RawgAdapter(settings, client=client)


def test_search_sends_key_and_paging():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json={"count": 0, "results": []})

    result = asyncio.run(make_adapter(handler).search_games("zelda", page=2))

    assert result == {"count": 0, "results": []}
    assert seen["path"] == "/api/games"
    assert seen["params"] == {"key": "test-key", "search": "zelda", "page": "2", "page_size": "5"}


def test_detail_path():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/games/3498"
        return httpx.Response(200, json={"id": 3498, "name": "GTA V"})

    assert asyncio.run(make_adapter(handler).get_game(3498))["name"] == "GTA V"


def test_non_2xx_carries_upstream_status():
    adapter = make_adapter(lambda request: httpx.Response(404, json={"detail": "Not found."}))

    with pytest.raises(UpstreamUnavailableError) as exc_info:
        asyncio.run(adapter.get_game(1))

    assert exc_info.value.upstream_status == 404
    assert exc_info.value.status_code == 404
    assert exc_info.value.is_not_found


def test_transport_error_is_503():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(UpstreamUnavailableError) as exc_info:
        asyncio.run(make_adapter(handler).search_games("zelda"))

    assert exc_info.value.upstream_status is None
    assert exc_info.value.status_code == 503


def test_ping():
    healthy = make_adapter(lambda request: httpx.Response(200, json={"results": []}))
    broken = make_adapter(lambda request: httpx.Response(500))

    assert asyncio.run(healthy.ping()) is True
    assert asyncio.run(broken.ping()) is False
