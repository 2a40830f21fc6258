"""
Pydantic data models for Resume Ingest.

- base: shared document/embedded model configuration
- content: the structured extraction product
- task: parse task lifecycle record and options
"""

from .base import BaseDocument, EmbeddedModel, TimestampMixin, new_id, utc_now
from .content import (
    Education,
    Experience,
    ParseMetadata,
    PersonalInfo,
    Project,
    SkillCategory,
    SkillItem,
    Skills,
    StructuredContent,
)
from .task import ParseOptions, ParseTask, TaskStatus

__all__ = [
    # Base
    "BaseDocument",
    "EmbeddedModel",
    "TimestampMixin",
    "new_id",
    "utc_now",
    # Content
    "Education",
    "Experience",
    "ParseMetadata",
    "PersonalInfo",
    "Project",
    "SkillCategory",
    "SkillItem",
    "Skills",
    "StructuredContent",
    # Task
    "ParseOptions",
    "ParseTask",
    "TaskStatus",
]
