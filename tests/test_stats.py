"""User and global statistics."""

from types import SimpleNamespace

from gamevault.shared.models.enums import GameStatus
from gamevault.shared.services.stats_service import aggregate_user_stats, round_half_up
from tests.conftest import add_to_collection


def entry(status, playtime=None, genres=()):
    return SimpleNamespace(status=status, playtime=playtime, game=SimpleNamespace(genres=list(genres)))


def test_round_half_up():
    assert round_half_up(7.25) == 7.3
    assert round_half_up(7.35) == 7.4
    assert round_half_up(7.24) == 7.2
    assert round_half_up(8.0) == 8.0


def test_aggregate_empty():
    stats = aggregate_user_stats([], 0, None)

    assert stats.total_games == 0
    assert stats.total_playtime == 0
    assert stats.status_count == {"BACKLOG": 0, "PLAYING": 0, "COMPLETED": 0, "DROPPED": 0}
    assert stats.top_genres == []
    assert stats.average_rating == 0


def test_aggregate_counts_and_genres():
    entries = [
        entry(GameStatus.PLAYING, 10, ("Action", "RPG")),
        entry(GameStatus.COMPLETED, 2.5, ("Puzzle",)),
        entry(GameStatus.PLAYING, None, ("RPG", "Action")),
        entry(GameStatus.BACKLOG, None, ("Indie",)),
    ]

    stats = aggregate_user_stats(entries, review_count=3, average_rating=7.25)

    assert stats.total_games == 4
    assert stats.total_playtime == 12.5
    assert stats.status_count["PLAYING"] == 2
    assert stats.status_count["COMPLETED"] == 1
    assert stats.status_count["DROPPED"] == 0
    # Ties keep first-seen order
    assert [(g.genre, g.count) for g in stats.top_genres] == [
        ("Action", 2),
        ("RPG", 2),
        ("Puzzle", 1),
        ("Indie", 1),
    ]
    assert stats.total_reviews == 3
    assert stats.average_rating == 7.3


def test_top_genres_capped_at_five():
    entries = [entry(GameStatus.BACKLOG, genres=(f"G{i}",)) for i in range(8)]

    stats = aggregate_user_stats(entries, 0, None)

    assert [g.genre for g in stats.top_genres] == ["G0", "G1", "G2", "G3", "G4"]


def test_my_stats_endpoint(client, user):
    game_id = add_to_collection(client, user["headers"], 3498, status="PLAYING", playtime=4)["gameId"]
    add_to_collection(client, user["headers"], 3328, status="COMPLETED", playtime=6.5)
    client.post("/api/reviews", json={"gameId": game_id, "rating": 8}, headers=user["headers"])

    response = client.get("/api/stats/me", headers=user["headers"])

    assert response.status_code == 200
    body = response.json()
    assert body["totalGames"] == 2
    assert body["totalPlaytime"] == 10.5
    assert body["statusCount"] == {"BACKLOG": 0, "PLAYING": 1, "COMPLETED": 1, "DROPPED": 0}
    assert body["topGenres"][0] == {"genre": "Action", "count": 2}
    assert body["totalReviews"] == 1
    assert body["averageRating"] == 8


def test_my_stats_is_cached(client, user):
    first = client.get("/api/stats/me", headers=user["headers"]).json()
    add_to_collection(client, user["headers"], 3498)

    second = client.get("/api/stats/me", headers=user["headers"]).json()

    assert first == second
    assert second["totalGames"] == 0


def test_my_stats_requires_auth(client):
    assert client.get("/api/stats/me").status_code == 401


def test_global_stats(client, user, other_user):
    add_to_collection(client, user["headers"], 3498)
    add_to_collection(client, user["headers"], 3328)
    game_id = add_to_collection(client, other_user["headers"], 3498)["gameId"]
    client.post("/api/reviews", json={"gameId": game_id, "rating": 9}, headers=other_user["headers"])

    response = client.get("/api/stats/global")

    assert response.status_code == 200
    body = response.json()
    assert body["totalUsers"] == 2
    assert body["totalGames"] == 2
    assert body["totalReviews"] == 1
    assert body["totalCollections"] == 3
    assert body["popularGames"][0]["game"]["rawgId"] == 3498
    assert body["popularGames"][0]["userCount"] == 2
    assert body["popularGames"][1]["userCount"] == 1


def test_global_stats_served_from_cache(client, user):
    before = client.get("/api/stats/global").json()
    add_to_collection(client, user["headers"], 3498)

    after = client.get("/api/stats/global").json()

    assert after == before
