"""Catalog search and detail through the cache."""

from gamevault.shared.core.exceptions import UpstreamUnavailableError


def test_search_returns_upstream_payload(client, rawg):
    response = client.get("/api/games/search", params={"q": "witcher"})

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 1
    assert body["results"][0]["id"] == 3328
    # Upstream field names pass through untouched
    assert "background_image" in body["results"][0]


def test_search_is_cached_by_normalized_query(client, rawg):
    client.get("/api/games/search", params={"q": "Portal"})
    client.get("/api/games/search", params={"q": "  portal "})
    client.get("/api/games/search", params={"q": "PORTAL"})

    assert rawg.search_calls == 1


def test_search_pages_are_cached_separately(client, rawg):
    client.get("/api/games/search", params={"q": "portal", "page": 1})
    client.get("/api/games/search", params={"q": "portal", "page": 2})

    assert rawg.search_calls == 2


def test_search_requires_query(client):
    for params in ({}, {"q": ""}):
        response = client.get("/api/games/search", params=params)
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_search_rejects_invalid_page(client):
    response = client.get("/api/games/search", params={"q": "zelda", "page": 0})

    assert response.status_code == 400


def test_search_upstream_status_is_propagated(client, rawg):
    rawg.error = UpstreamUnavailableError("RAWG", "Failed to fetch games", upstream_status=502)

    response = client.get("/api/games/search", params={"q": "zelda"})

    assert response.status_code == 502
    assert response.json()["error"]["code"] == "UPSTREAM_UNAVAILABLE"


def test_search_transport_failure_is_503(client, rawg):
    rawg.error = UpstreamUnavailableError("RAWG", "Game catalog is unreachable")

    response = client.get("/api/games/search", params={"q": "zelda"})

    assert response.status_code == 503


def test_failed_search_is_not_cached(client, rawg):
    rawg.error = UpstreamUnavailableError("RAWG", upstream_status=500)
    assert client.get("/api/games/search", params={"q": "witcher"}).status_code == 500

    rawg.error = None
    response = client.get("/api/games/search", params={"q": "witcher"})

    assert response.status_code == 200
    assert rawg.search_calls == 2


def test_game_detail_is_cached(client, rawg):
    first = client.get("/api/games/3498")
    second = client.get("/api/games/3498")

    assert first.status_code == 200
    assert first.json() == second.json()
    assert first.json()["name"] == "Grand Theft Auto V"
    assert rawg.detail_calls == 1


def test_game_detail_unknown_id_uses_upstream_status(client):
    response = client.get("/api/games/999999")

    assert response.status_code == 404


def test_game_detail_rejects_non_positive_id(client):
    assert client.get("/api/games/0").status_code == 400
    assert client.get("/api/games/abc").status_code == 400
