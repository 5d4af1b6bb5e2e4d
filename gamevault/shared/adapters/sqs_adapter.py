"""
SQS Adapter

Background tasks travel over one SQS queue as JSON envelopes:

    {"task": "send_email", "payload": {"to": "...", "template": "welcome"}}
    {"task": "refresh_cache", "payload": {"type": "global_stats"}}

The API side only calls send_task(); the worker long-polls with
receive_messages() and deletes each message once handled. boto3 is
blocking, so async callers go through asyncio.to_thread.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from gamevault.config.settings import Settings
from gamevault.shared.core.logging import get_logger

logger = get_logger("gamevault.sqs")

# SQS caps a single receive at 10 messages
MAX_RECEIVE_BATCH = 10


@dataclass
class QueueMessage:
    """A received envelope plus the handle needed to delete it."""

    message_id: str
    receipt_handle: str
    body: Dict[str, Any]
    attributes: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_sqs(cls, raw: Dict[str, Any]) -> "QueueMessage":
        # Bodies that are not a JSON object still get a dict so the worker can
        # log and drop them as an unknown task.
        try:
            body = json.loads(raw["Body"])
        except json.JSONDecodeError:
            body = raw["Body"]
        return cls(
            message_id=raw["MessageId"],
            receipt_handle=raw["ReceiptHandle"],
            body=body if isinstance(body, dict) else {"raw": body},
            attributes=raw.get("Attributes", {}),
        )


class SQSAdapter:
    def __init__(
        self,
        region: str = "us-east-1",
        aws_access_key_id: Optional[str] = None,
        aws_secret_access_key: Optional[str] = None,
        client: Any = None,
    ):
        self.region = region
        self.aws_access_key_id = aws_access_key_id
        self.aws_secret_access_key = aws_secret_access_key
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "SQSAdapter":
        """Explicit keys when configured, otherwise boto3's default credential chain."""
        return cls(
            region=settings.AWS_REGION,
            aws_access_key_id=settings.AWS_ACCESS_KEY_ID or None,
            aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY or None,
        )

    @property
    def client(self) -> Any:
        # Built on first use so an API without a queue never touches AWS
        if self._client is None:
            credentials = {}
            if self.aws_access_key_id and self.aws_secret_access_key:
                credentials = {
                    "aws_access_key_id": self.aws_access_key_id,
                    "aws_secret_access_key": self.aws_secret_access_key,
                }
            self._client = boto3.client("sqs", region_name=self.region, **credentials)
        return self._client

    def send_task(self, queue_url: str, task: str, payload: Dict[str, Any]) -> str:
        """Enqueue a task envelope and return the SQS message id."""
        try:
            response = self.client.send_message(
                QueueUrl=queue_url,
                MessageBody=json.dumps({"task": task, "payload": payload}),
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("Task enqueue failed", task=task, error=str(e))
            raise

        logger.info("Task enqueued", task=task, message_id=response["MessageId"])
        return response["MessageId"]

    def receive_messages(
        self,
        queue_url: str,
        max_messages: int = MAX_RECEIVE_BATCH,
        wait_time_seconds: int = 20,
        visibility_timeout: int = 300,
    ) -> List[QueueMessage]:
        """Long-poll for up to max_messages envelopes. Empty list on timeout."""
        response = self.client.receive_message(
            QueueUrl=queue_url,
            MaxNumberOfMessages=min(max_messages, MAX_RECEIVE_BATCH),
            WaitTimeSeconds=wait_time_seconds,
            VisibilityTimeout=visibility_timeout,
            AttributeNames=["All"],
        )
        return [QueueMessage.from_sqs(raw) for raw in response.get("Messages", [])]

    def delete_message(self, queue_url: str, receipt_handle: str) -> None:
        self.client.delete_message(QueueUrl=queue_url, ReceiptHandle=receipt_handle)
