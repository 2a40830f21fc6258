"""
In-memory task store.

Keeps deep copies of tasks so callers never share mutable state with the
worker executing a task.
"""

import threading

from resume_ingest.data.models import ParseTask
from resume_ingest.errors import TaskNotFoundError
from resume_ingest.utils.logger import get_logger

from .base import TaskStore

logger = get_logger(__name__)


class InMemoryTaskStore(TaskStore):
    """Thread-safe dictionary-backed task store."""

    def __init__(self) -> None:
        self._tasks: dict[str, ParseTask] = {}
        self._lock = threading.Lock()

    def create_task(self, task: ParseTask) -> ParseTask:
        with self._lock:
            self._tasks[task.id] = task.model_copy(deep=True)
        logger.debug(f"Created parse task: {task.id}")
        return task.model_copy(deep=True)

    def get_task(self, task_id: str) -> ParseTask:
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            return task.model_copy(deep=True)

    def update_task(self, task: ParseTask) -> None:
        with self._lock:
            self._tasks[task.id] = task.model_copy(deep=True)
        logger.debug(f"Updated parse task {task.id}: {task.status} ({task.progress}%)")

    def list_tasks_by_user(
        self, user_id: str, limit: int = 20, offset: int = 0
    ) -> list[ParseTask]:
        with self._lock:
            # Reversed insertion order breaks created_at ties newest first
            tasks = [t for t in reversed(self._tasks.values()) if t.user_id == user_id]
        tasks.sort(key=lambda t: t.created_at, reverse=True)
        return [t.model_copy(deep=True) for t in tasks[offset:offset + limit]]

    def delete_task(self, task_id: str) -> None:
        with self._lock:
            if self._tasks.pop(task_id, None) is not None:
                logger.debug(f"Deleted parse task: {task_id}")

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)
