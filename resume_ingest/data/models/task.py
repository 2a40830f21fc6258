"""
Parse task models for Resume Ingest.

A ParseTask is one extraction request and its lifecycle record:
pending -> processing -> completed | failed.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from resume_ingest.errors import InvalidTaskTransitionError
from resume_ingest.utils.constants import (
    COMPLETED_PROGRESS,
    PROCESSING_START_PROGRESS,
    SECTION_NAMES,
)

from .base import BaseDocument, EmbeddedModel, utc_now
from .content import StructuredContent


class TaskStatus(str, Enum):
    """Lifecycle state of a parse task."""

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (TaskStatus.COMPLETED, TaskStatus.FAILED)


class ParseOptions(EmbeddedModel):
    """Extraction configuration attached to a task at creation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    extract_images: bool = False
    clean_text: bool = False
    target_language: Optional[str] = None
    skip_sections: tuple[str, ...] = ()

    @field_validator("skip_sections", mode="before")
    @classmethod
    def normalize_skip_sections(cls, v):
        """Lower-case, de-duplicate and validate section names."""
        if v is None:
            return ()
        if isinstance(v, str):
            v = [v]
        names = sorted({str(name).strip().lower() for name in v if str(name).strip()})
        unknown = [name for name in names if name not in SECTION_NAMES]
        if unknown:
            raise ValueError(
                f"Unknown section(s): {', '.join(unknown)}. "
                f"Expected any of: {', '.join(SECTION_NAMES)}"
            )
        return tuple(names)

    def skips(self, section: str) -> bool:
        """Check if a section should be omitted from the result."""
        return section in self.skip_sections


class ParseTask(BaseDocument):
    """
    Unit of work and its lifecycle record.

    Mutated only by the single worker executing it; the transition methods
    enforce the state machine and the result/error/progress invariants.
    """

    resume_id: str
    user_id: str
    file_path: str
    file_type: str

    status: TaskStatus = TaskStatus.PENDING
    progress: int = Field(default=0, ge=0, le=100)

    result: Optional[StructuredContent] = None
    error_message: Optional[str] = None
    options: ParseOptions = Field(default_factory=ParseOptions)

    completed_at: Optional[datetime] = None

    @property
    def is_terminal(self) -> bool:
        return TaskStatus(self.status).is_terminal

    def _require(self, expected: TaskStatus, target: TaskStatus) -> None:
        if self.status != expected:
            raise InvalidTaskTransitionError(self.id, TaskStatus(self.status).value, target.value)

    def mark_processing(self, progress: int = PROCESSING_START_PROGRESS) -> None:
        """Enter processing; progress signals liveness to pollers."""
        self._require(TaskStatus.PENDING, TaskStatus.PROCESSING)
        self.status = TaskStatus.PROCESSING
        self.progress = progress
        self.touch()

    def mark_completed(self, content: StructuredContent) -> None:
        """Attach the result and finish the task."""
        self._require(TaskStatus.PROCESSING, TaskStatus.COMPLETED)
        self.result = content
        self.error_message = None
        self.status = TaskStatus.COMPLETED
        self.progress = COMPLETED_PROGRESS
        self.completed_at = utc_now()
        self.touch()

    def mark_failed(self, error_message: str) -> None:
        """Record the failure cause and finish the task."""
        self._require(TaskStatus.PROCESSING, TaskStatus.FAILED)
        self.result = None
        self.error_message = error_message or "unknown error"
        self.status = TaskStatus.FAILED
        self.progress = 0
        self.completed_at = utc_now()
        self.touch()

    class Settings:
        """MongoDB collection settings."""

        name = "parse_tasks"
        indexes = [
            "user_id",
            "resume_id",
            "status",
            "created_at",
        ]
