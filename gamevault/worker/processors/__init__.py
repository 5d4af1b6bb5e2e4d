from gamevault.worker.processors.base_processor import BaseProcessor, UnknownTaskError
from gamevault.worker.processors.task_processor import TaskProcessor

__all__ = ["BaseProcessor", "UnknownTaskError", "TaskProcessor"]
