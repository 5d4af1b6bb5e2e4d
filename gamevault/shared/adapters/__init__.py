"""
External Service Adapters

Adapters wrap third-party clients (Redis, SQS, RAWG) behind small async or
sync interfaces. Instances are built once in the API lifespan (or the worker
entry point) and injected; nothing here is a module-level singleton.
"""

from gamevault.shared.adapters.redis_adapter import RedisAdapter
from gamevault.shared.adapters.sqs_adapter import QueueMessage, SQSAdapter
from gamevault.shared.adapters.rawg_adapter import RawgAdapter

__all__ = [
    "RedisAdapter",
    "SQSAdapter",
    "QueueMessage",
    "RawgAdapter",
]
