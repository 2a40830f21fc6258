"""
Task store implementations for Resume Ingest.

Implements the repository pattern for parse task persistence.
"""

from typing import Optional

from resume_ingest.utils.config import get_settings

from .base import TaskStore
from .memory_repository import InMemoryTaskStore
from .task_repository import MongoTaskStore

_task_store: Optional[TaskStore] = None


def get_task_store() -> TaskStore:
    """Get the configured task store singleton."""
    global _task_store
    if _task_store is None:
        if get_settings().store == "mongodb":
            _task_store = MongoTaskStore()
        else:
            _task_store = InMemoryTaskStore()
    return _task_store


__all__ = [
    "TaskStore",
    "InMemoryTaskStore",
    "MongoTaskStore",
    "get_task_store",
]
