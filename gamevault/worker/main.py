"""
Worker Entry Point

Consumes background tasks from the SQS task queue.

    python -m gamevault.worker.main

Consumer Pool:
==============
WORKER_CONCURRENCY consumers run concurrently in one event loop. Each one
long-polls the queue, dispatches every message to the TaskProcessor and
deletes it afterwards.

    ┌──────────────┐   receive   ┌───────────────┐   process   ┌─────────────┐
    │ SQS (long    │ ──────────► │ consumer N    │ ──────────► │ processor   │
    │ polling)     │ ◄────────── │               │             │             │
    └──────────────┘   delete    └───────────────┘             └─────────────┘

Failure Policy:
===============
- A failing task is logged and its message deleted: no retry, nothing is
  reported back to the producer
- An unknown task name is logged and dropped the same way
- SIGINT / SIGTERM stop the consumers after their current poll
"""

import asyncio
import signal
from dataclasses import dataclass
from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError

from gamevault.config.settings import Settings, get_settings
from gamevault.shared.adapters.redis_adapter import RedisAdapter
from gamevault.shared.adapters.sqs_adapter import QueueMessage, SQSAdapter
from gamevault.shared.core.logging import get_logger, setup_logging
from gamevault.shared.db.session import Database
from gamevault.worker.processors.base_processor import BaseProcessor, UnknownTaskError
from gamevault.worker.processors.task_processor import TaskProcessor

logger = get_logger("gamevault.worker")

RECEIVE_ERROR_BACKOFF_SECONDS = 5


@dataclass
class TaskResult:
    """Outcome of one message."""

    success: bool
    message_id: str
    task: Optional[str] = None
    error_message: Optional[str] = None


class Worker:
    """
    Pool of queue consumers sharing one processor.

    Attributes:
        sqs: SQS adapter (sync, called through threads)
        queue_url: Task queue URL
        processor: Dispatches task messages
        concurrency: Number of consumers
    """

    def __init__(
        self,
        sqs: SQSAdapter,
        queue_url: str,
        processor: BaseProcessor,
        concurrency: int = 4,
        wait_time_seconds: int = 20,
    ):
        self.sqs = sqs
        self.queue_url = queue_url
        self.processor = processor
        self.concurrency = max(1, concurrency)
        self.wait_time_seconds = wait_time_seconds
        self._stop = asyncio.Event()

    def stop(self) -> None:
        """Ask every consumer to exit after its current poll."""
        if not self._stop.is_set():
            logger.info("Worker stopping")
        self._stop.set()

    @property
    def stopping(self) -> bool:
        return self._stop.is_set()

    async def handle_message(self, message: QueueMessage) -> TaskResult:
        """
        Process one message, then delete it regardless of the outcome.
        """
        task = message.body.get("task")
        try:
            await self.processor.process(message.body)
            result = TaskResult(success=True, message_id=message.message_id, task=task)
        except UnknownTaskError as e:
            logger.warning("Dropping unknown task", message_id=message.message_id, task=task)
            result = TaskResult(False, message.message_id, task, str(e))
        except Exception as e:
            logger.error(
                "Task failed",
                message_id=message.message_id,
                task=task,
                error=str(e),
                exc_info=True,
            )
            result = TaskResult(False, message.message_id, task, str(e))

        try:
            await asyncio.to_thread(
                self.sqs.delete_message, self.queue_url, message.receipt_handle
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to delete message", message_id=message.message_id, error=str(e))

        return result

    async def consume(self, consumer_id: int) -> None:
        """Long-poll and process until stopped."""
        logger.info("Consumer started", consumer_id=consumer_id)
        while not self.stopping:
            try:
                messages = await asyncio.to_thread(
                    self.sqs.receive_messages,
                    self.queue_url,
                    max_messages=1,
                    wait_time_seconds=self.wait_time_seconds,
                )
            except (ClientError, BotoCoreError) as e:
                logger.error("Receive failed", consumer_id=consumer_id, error=str(e))
                try:
                    await asyncio.wait_for(self._stop.wait(), RECEIVE_ERROR_BACKOFF_SECONDS)
                except asyncio.TimeoutError:
                    pass
                continue

            for message in messages:
                await self.handle_message(message)

        logger.info("Consumer stopped", consumer_id=consumer_id)

    async def run(self) -> None:
        """Run the consumer pool until SIGINT/SIGTERM or stop()."""
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, self.stop)
            except (NotImplementedError, RuntimeError):
                # Not available on this platform or outside the main thread
                pass

        logger.info("Worker started", concurrency=self.concurrency, queue_url=self.queue_url)
        await asyncio.gather(*(self.consume(i) for i in range(self.concurrency)))
        logger.info("Worker stopped")


async def run_worker(settings: Settings) -> None:
    """Build resources, run the pool, release resources."""
    database = Database(settings)
    await database.connect()
    cache = RedisAdapter(settings.REDIS_URL)

    worker = Worker(
        sqs=SQSAdapter.from_settings(settings),
        queue_url=settings.SQS_TASK_QUEUE_URL,
        processor=TaskProcessor(database, cache, settings),
        concurrency=settings.WORKER_CONCURRENCY,
        wait_time_seconds=settings.WORKER_WAIT_TIME_SECONDS,
    )

    try:
        await worker.run()
    finally:
        await cache.close()
        await database.close()


def main() -> int:
    settings = get_settings()
    setup_logging(settings)

    if not settings.SQS_TASK_QUEUE_URL:
        logger.error("SQS_TASK_QUEUE_URL is not set; nothing to consume")
        return 1

    asyncio.run(run_worker(settings))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
