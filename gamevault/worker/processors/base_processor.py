"""
Base processor class.
"""

from typing import Any

from gamevault.shared.models.enums import TaskName


class UnknownTaskError(ValueError):
    """Message names a task no processor handles."""


class BaseProcessor:
    """Base class for task processors."""

    async def process(self, message: dict[str, Any]) -> Any:
        """Process a task message: {"task": <name>, "payload": {...}}."""
        task = message.get("task")
        payload = message.get("payload") or {}

        if task == TaskName.SEND_EMAIL.value:
            return await self.handle_send_email(payload)
        if task == TaskName.REFRESH_CACHE.value:
            return await self.handle_refresh_cache(payload)
        raise UnknownTaskError(f"Unknown task: {task}")

    async def handle_send_email(self, payload: dict[str, Any]) -> Any:
        """Handle e-mail delivery task."""
        raise NotImplementedError

    async def handle_refresh_cache(self, payload: dict[str, Any]) -> Any:
        """Handle cache refresh task."""
        raise NotImplementedError
