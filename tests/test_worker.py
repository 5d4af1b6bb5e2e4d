"""Background task processing."""

import asyncio
from unittest.mock import MagicMock

import fakeredis
import pytest
from botocore.exceptions import ClientError

from gamevault.shared.adapters.redis_adapter import RedisAdapter
from gamevault.shared.adapters.sqs_adapter import QueueMessage
from gamevault.shared.db.session import Database
from gamevault.shared.models import Game, User, UserGame
from gamevault.shared.services.stats_service import GLOBAL_STATS_KEY, user_stats_key
from gamevault.worker.main import Worker
from gamevault.worker.processors import BaseProcessor, TaskProcessor, UnknownTaskError


def message(body, message_id="m-1"):
    return QueueMessage(message_id=message_id, receipt_handle=f"rh-{message_id}", body=body, attributes={})


async def seed(database: Database) -> None:
    async with database.session() as session:
        user = User(email="a@example.com", username="alpha", password_hash="x")
        game = Game(rawg_id=1, name="Celeste", slug="celeste", genres=["Platformer"], platforms=["PC"])
        session.add_all([user, game])
        await session.flush()
        session.add(UserGame(user_id=user.id, game_id=game.id))


def test_refresh_global_stats_writes_cache(settings):
    async def run():
        database = Database(settings)
        await database.connect()
        cache = RedisAdapter(client=fakeredis.FakeAsyncRedis(decode_responses=True))
        try:
            await seed(database)
            processor = TaskProcessor(database, cache, settings)
            result = await processor.process(
                {"task": "refresh_cache", "payload": {"type": "global_stats"}}
            )
            return result, await cache.get_json(GLOBAL_STATS_KEY)
        finally:
            await cache.close()
            await database.close()

    result, cached = asyncio.run(run())

    assert result == {"success": True}
    assert cached["totalUsers"] == 1
    assert cached["totalCollections"] == 1
    assert cached["popularGames"][0]["game"]["name"] == "Celeste"
    assert cached["popularGames"][0]["userCount"] == 1


def test_refresh_user_stats_drops_cached_entry(settings):
    async def run():
        cache = RedisAdapter(client=fakeredis.FakeAsyncRedis(decode_responses=True))
        await cache.set_json(user_stats_key("u-1"), {"totalGames": 3}, ttl=60)
        processor = TaskProcessor(MagicMock(), cache, settings)
        await processor.process(
            {"task": "refresh_cache", "payload": {"type": "user_stats", "user_id": "u-1"}}
        )
        return await cache.get(user_stats_key("u-1"))

    assert asyncio.run(run()) is None


def test_send_email_requires_recipient(settings):
    processor = TaskProcessor(MagicMock(), MagicMock(), settings)

    assert asyncio.run(
        processor.process({"task": "send_email", "payload": {"to": "a@example.com", "subject": "Hi"}})
    ) == {"success": True}
    with pytest.raises(ValueError):
        asyncio.run(processor.process({"task": "send_email", "payload": {}}))


def test_unknown_task_and_refresh_type(settings):
    processor = TaskProcessor(MagicMock(), MagicMock(), settings)

    with pytest.raises(UnknownTaskError):
        asyncio.run(processor.process({"task": "launch_rockets", "payload": {}}))
    with pytest.raises(ValueError):
        asyncio.run(processor.process({"task": "refresh_cache", "payload": {"type": "everything"}}))


class RecordingProcessor(BaseProcessor):
    def __init__(self, fail=False):
        self.emails = []
        self.fail = fail

    async def handle_send_email(self, payload):
        if self.fail:
            raise RuntimeError("smtp down")
        self.emails.append(payload)


def test_message_is_deleted_after_success_and_failure():
    sqs = MagicMock()
    ok = Worker(sqs, "queue", RecordingProcessor())
    failing = Worker(sqs, "queue", RecordingProcessor(fail=True))

    good = asyncio.run(ok.handle_message(message({"task": "send_email", "payload": {"to": "x"}}, "m-1")))
    bad = asyncio.run(failing.handle_message(message({"task": "send_email", "payload": {}}, "m-2")))
    unknown = asyncio.run(ok.handle_message(message({"task": "nope"}, "m-3")))

    assert good.success is True
    assert bad.success is False and bad.error_message == "smtp down"
    assert unknown.success is False
    assert [c.args for c in sqs.delete_message.call_args_list] == [
        ("queue", "rh-m-1"),
        ("queue", "rh-m-2"),
        ("queue", "rh-m-3"),
    ]


def test_consumer_runs_until_stopped():
    sqs = MagicMock()
    processor = RecordingProcessor()
    worker = Worker(sqs, "queue", processor, concurrency=1, wait_time_seconds=0)
    batches = [[message({"task": "send_email", "payload": {"to": "a@example.com"}})]]

    def receive(*args, **kwargs):
        if batches:
            return batches.pop()
        worker.stop()
        return []

    sqs.receive_messages.side_effect = receive

    asyncio.run(worker.consume(0))

    assert processor.emails == [{"to": "a@example.com"}]
    assert worker.stopping


def test_consumer_survives_receive_errors(monkeypatch):
    monkeypatch.setattr("gamevault.worker.main.RECEIVE_ERROR_BACKOFF_SECONDS", 0)
    sqs = MagicMock()
    worker = Worker(sqs, "queue", RecordingProcessor(), concurrency=1, wait_time_seconds=0)
    error = ClientError({"Error": {"Code": "AccessDenied", "Message": "no"}}, "ReceiveMessage")
    calls = []

    def receive(*args, **kwargs):
        calls.append(1)
        if len(calls) == 1:
            raise error
        worker.stop()
        return []

    sqs.receive_messages.side_effect = receive

    asyncio.run(worker.consume(0))

    assert len(calls) == 2
