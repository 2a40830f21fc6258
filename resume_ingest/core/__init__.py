"""
Core orchestration for Resume Ingest.
"""

from .coordinator import TaskCoordinator, wait_for_task

__all__ = [
    "TaskCoordinator",
    "wait_for_task",
]
