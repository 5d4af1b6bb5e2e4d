"""Unique-constraint recovery when a concurrent request wins the insert."""

import asyncio
from unittest.mock import MagicMock

import pytest
from sqlalchemy import func, select

from gamevault.shared.core.exceptions import ConflictError
from gamevault.shared.db.session import Database
from gamevault.shared.models import Game, Review, User, UserGame
from gamevault.shared.repositories.game_repository import GameRepository
from gamevault.shared.repositories.user_game_repository import UserGameRepository
from gamevault.shared.services.collection_service import CollectionService
from gamevault.shared.services.game_service import GameService
from gamevault.shared.services.review_service import ReviewService


def game_fields(rawg_id: int = 1) -> dict:
    return {
        "rawg_id": rawg_id,
        "name": "Celeste",
        "slug": "celeste",
        "genres": ["Platformer"],
        "platforms": ["PC"],
    }


async def seed(database: Database, with_entry: bool = False, rating: float = 0):
    async with database.session() as session:
        user = User(email="a@example.com", username="alpha", password_hash="x")
        game = Game(**game_fields())
        session.add_all([user, game])
        await session.flush()
        if with_entry:
            session.add(UserGame(user_id=user.id, game_id=game.id))
        if rating:
            session.add(Review(user_id=user.id, game_id=game.id, rating=rating, content="first"))
        return user.id, game.id


def run_with_database(settings, scenario):
    async def run():
        database = Database(settings)
        await database.connect()
        try:
            return await scenario(database)
        finally:
            await database.close()

    return asyncio.run(run())


def test_second_game_insert_returns_existing_row(settings):
    async def scenario(database):
        async with database.session() as session:
            repo = GameRepository(session)
            first, first_created = await repo.create_or_get(**game_fields(7))
            second, second_created = await repo.create_or_get(**game_fields(7))
            total = await session.scalar(
                select(func.count()).select_from(Game).where(Game.rawg_id == 7)
            )
            return first, first_created, second, second_created, total

    first, first_created, second, second_created, total = run_with_database(settings, scenario)

    assert first_created is True
    assert second_created is False
    assert second.id == first.id
    assert total == 1


def test_duplicate_entry_insert_is_a_conflict(settings):
    async def scenario(database):
        user_id, game_id = await seed(database, with_entry=True)
        async with database.session() as session:
            service = CollectionService(session, GameService(session, MagicMock()))

            async def not_found(*args):
                return None

            # The row already exists but the pre-check misses it
            service.repo.get_for_user_and_rawg_id = not_found
            with pytest.raises(ConflictError) as excinfo:
                await service.add_game(user_id, 1)

            _, total = await UserGameRepository(session).list_for_user(user_id)
            return excinfo.value, total

    error, total = run_with_database(settings, scenario)

    assert error.message == "Game already in collection"
    assert error.status_code == 400
    assert total == 1


def test_review_inserted_concurrently_is_replaced(settings):
    async def scenario(database):
        user_id, game_id = await seed(database, with_entry=True, rating=2)
        async with database.session() as session:
            games = GameService(session, MagicMock())
            service = ReviewService(session, games, CollectionService(session, games))

            lookup = service.repo.get_for_user_and_game
            calls = []

            async def miss_first_lookup(*args):
                calls.append(args)
                if len(calls) == 1:
                    return None
                return await lookup(*args)

            service.repo.get_for_user_and_game = miss_first_lookup
            review, created = await service.submit_review(user_id, game_id, 4.5, "")
            total = await session.scalar(select(func.count()).select_from(Review))
            return review, created, total, len(calls)

    review, created, total, lookups = run_with_database(settings, scenario)

    assert created is False
    assert review.rating == 4.5
    assert review.content is None
    assert total == 1
    assert lookups == 2
