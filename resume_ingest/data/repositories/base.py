"""
Task store contract.

The task coordinator only talks to storage through this interface, so any
backend (MongoDB, in-memory, ...) can be plugged in.
"""

from abc import ABC, abstractmethod

from resume_ingest.data.models import ParseTask


class TaskStore(ABC):
    """
    Durable parse task persistence.

    Implementations must be safe to call from several worker threads.
    """

    @abstractmethod
    def create_task(self, task: ParseTask) -> ParseTask:
        """Persist a new task and return the stored version."""
        pass

    @abstractmethod
    def get_task(self, task_id: str) -> ParseTask:
        """
        Load a task by ID.

        Raises:
            TaskNotFoundError: If no task has this ID
        """
        pass

    @abstractmethod
    def update_task(self, task: ParseTask) -> None:
        """Full-row upsert of the task's mutable state."""
        pass

    @abstractmethod
    def list_tasks_by_user(
        self, user_id: str, limit: int = 20, offset: int = 0
    ) -> list[ParseTask]:
        """List a user's tasks, newest first."""
        pass

    @abstractmethod
    def delete_task(self, task_id: str) -> None:
        """Delete a task; deleting a missing task is a no-op."""
        pass
