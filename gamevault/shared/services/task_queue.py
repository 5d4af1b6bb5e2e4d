"""
Task Queue (producer side)

Enqueues named background tasks onto SQS for the worker.

Message Format:
===============
    {"task": "send_email", "payload": {"to": "...", "subject": "...", "body": "..."}}
    {"task": "refresh_cache", "payload": {"type": "global_stats"}}

Failure Policy:
===============
Enqueueing is fire-and-forget. When no queue URL is configured, or SQS
rejects the call, the task is logged and dropped; the caller gets None and
the originating request is unaffected.

Usage:
======
    background_tasks.add_task(task_queue.send_welcome_email, user.email, user.username)
"""

import asyncio
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from gamevault.shared.adapters.sqs_adapter import SQSAdapter
from gamevault.shared.core.logging import get_logger
from gamevault.shared.models.enums import CacheRefreshType, TaskName

logger = get_logger("gamevault.tasks")


class TaskQueue:
    """
    Producer for background tasks.

    Attributes:
        sqs: SQS adapter used to publish messages
        queue_url: Target queue; empty string disables publishing
    """

    def __init__(self, sqs: SQSAdapter, queue_url: str) -> None:
        self.sqs = sqs
        self.queue_url = queue_url

    async def enqueue(self, task: str, payload: dict[str, Any]) -> Optional[str]:
        """
        Publish a task.

        Returns:
            SQS message id, or None if the task was not published
        """
        if not self.queue_url:
            logger.info("Task queue not configured, dropping task", task=task)
            return None

        try:
            message_id = await asyncio.to_thread(
                self.sqs.send_task, self.queue_url, task, payload
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to enqueue task", task=task, error=str(e))
            return None

        logger.info("Task enqueued", task=task, message_id=message_id)
        return message_id

    # ═══════════════════════════════════════════════════════════════════════════
    # TASK SHORTCUTS
    # ═══════════════════════════════════════════════════════════════════════════

    async def send_welcome_email(self, email: str, username: str) -> Optional[str]:
        return await self.enqueue(
            TaskName.SEND_EMAIL.value,
            {
                "to": email,
                "subject": "Welcome to GameVault!",
                "body": f"Hi {username}, your game vault is ready. Start adding games to your collection.",
            },
        )

    async def refresh_global_stats(self) -> Optional[str]:
        return await self.enqueue(
            TaskName.REFRESH_CACHE.value,
            {"type": CacheRefreshType.GLOBAL_STATS.value},
        )

    async def refresh_user_stats(self, user_id: str) -> Optional[str]:
        return await self.enqueue(
            TaskName.REFRESH_CACHE.value,
            {"type": CacheRefreshType.USER_STATS.value, "user_id": user_id},
        )
