"""Review endpoints."""

import uuid

from tests.conftest import add_to_collection


def post_review(client, headers, game_id, **fields):
    return client.post("/api/reviews", json={"gameId": game_id, **fields}, headers=headers)


def test_create_review(client, user):
    entry = add_to_collection(client, user["headers"], 3498)

    response = post_review(client, user["headers"], entry["gameId"], rating=8.5, content="Great")

    assert response.status_code == 201
    review = response.json()
    assert review["rating"] == 8.5
    assert review["content"] == "Great"
    assert review["user"] == {"id": user["user"]["id"], "username": "player1"}
    assert review["game"]["rawgId"] == 3498
    assert review["createdAt"] and review["updatedAt"]


def test_resubmitting_replaces_review(client, user):
    entry = add_to_collection(client, user["headers"], 3498)
    first = post_review(client, user["headers"], entry["gameId"], rating=5, content="Meh").json()

    response = post_review(client, user["headers"], entry["gameId"], rating=9)

    assert response.status_code == 200
    assert response.json()["id"] == first["id"]
    assert response.json()["rating"] == 9
    assert response.json()["content"] is None

    listing = client.get(f"/api/reviews/game/{entry['gameId']}").json()
    assert listing["pagination"]["total"] == 1


def test_review_requires_game_in_collection(client, user, other_user):
    entry = add_to_collection(client, user["headers"], 3498)

    response = post_review(client, other_user["headers"], entry["gameId"], rating=7)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_PRECONDITION"


def test_review_unknown_game(client, user):
    response = post_review(client, user["headers"], str(uuid.uuid4()), rating=7)

    assert response.status_code == 404


def test_review_validation(client, user):
    entry = add_to_collection(client, user["headers"], 3498)
    cases = [
        {"rating": 0.5},
        {"rating": 10.5},
        {"rating": 7, "content": "x" * 2001},
        {},
    ]
    for fields in cases:
        response = post_review(client, user["headers"], entry["gameId"], **fields)
        assert response.status_code == 400, fields


def test_rating_bounds_are_inclusive(client, user):
    entry = add_to_collection(client, user["headers"], 3498)

    assert post_review(client, user["headers"], entry["gameId"], rating=1).status_code == 201
    assert post_review(client, user["headers"], entry["gameId"], rating=10).status_code == 200


def test_empty_content_is_stored_as_null(client, user):
    entry = add_to_collection(client, user["headers"], 3498)

    review = post_review(client, user["headers"], entry["gameId"], rating=6, content="").json()

    assert review["content"] is None


def test_game_reviews_are_public_and_newest_first(client, user, other_user):
    game_id = add_to_collection(client, user["headers"], 3498)["gameId"]
    add_to_collection(client, other_user["headers"], 3498)
    post_review(client, user["headers"], game_id, rating=6)
    post_review(client, other_user["headers"], game_id, rating=9)

    response = client.get(f"/api/reviews/game/{game_id}", params={"limit": 1})

    assert response.status_code == 200
    body = response.json()
    assert [r["user"]["username"] for r in body["reviews"]] == ["player2"]
    assert body["pagination"] == {"total": 2, "limit": 1, "offset": 0, "hasMore": True}


def test_my_reviews(client, user, other_user):
    first = add_to_collection(client, user["headers"], 3498)["gameId"]
    second = add_to_collection(client, user["headers"], 3328)["gameId"]
    add_to_collection(client, other_user["headers"], 3498)
    post_review(client, user["headers"], first, rating=6)
    post_review(client, user["headers"], second, rating=8)
    post_review(client, other_user["headers"], first, rating=2)

    response = client.get("/api/reviews/me", headers=user["headers"])

    assert response.status_code == 200
    assert [r["game"]["rawgId"] for r in response.json()["reviews"]] == [3328, 3498]


def test_update_review(client, user):
    game_id = add_to_collection(client, user["headers"], 3498)["gameId"]
    review = post_review(client, user["headers"], game_id, rating=6, content="Fine").json()

    rating_only = client.patch(
        f"/api/reviews/{review['id']}", json={"rating": 7.5}, headers=user["headers"]
    )
    assert rating_only.status_code == 200
    assert rating_only.json()["rating"] == 7.5
    assert rating_only.json()["content"] == "Fine"

    cleared = client.patch(
        f"/api/reviews/{review['id']}", json={"content": ""}, headers=user["headers"]
    )
    assert cleared.json()["content"] is None
    assert cleared.json()["rating"] == 7.5


def test_update_or_delete_someone_elses_review(client, user, other_user):
    game_id = add_to_collection(client, user["headers"], 3498)["gameId"]
    review = post_review(client, user["headers"], game_id, rating=6).json()

    patch = client.patch(
        f"/api/reviews/{review['id']}", json={"rating": 1}, headers=other_user["headers"]
    )
    delete = client.delete(f"/api/reviews/{review['id']}", headers=other_user["headers"])

    assert patch.status_code == 403
    assert delete.status_code == 403


def test_update_missing_review(client, user):
    response = client.patch(
        f"/api/reviews/{uuid.uuid4()}", json={"rating": 5}, headers=user["headers"]
    )

    assert response.status_code == 404


def test_delete_review(client, user):
    game_id = add_to_collection(client, user["headers"], 3498)["gameId"]
    review = post_review(client, user["headers"], game_id, rating=6).json()

    response = client.delete(f"/api/reviews/{review['id']}", headers=user["headers"])

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.get(f"/api/reviews/game/{game_id}").json()["reviews"] == []
    assert client.delete(f"/api/reviews/{review['id']}", headers=user["headers"]).status_code == 404
