"""
Base model classes for Resume Ingest data models.

Provides common fields and functionality shared across all models.
"""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Generate an opaque unique identifier."""
    return str(uuid4())


class TimestampMixin(BaseModel):
    """Mixin providing timestamp fields for models."""

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def touch(self) -> None:
        """Refresh the update timestamp."""
        self.updated_at = utc_now()


class BaseDocument(TimestampMixin):
    """
    Base document model for stored records.

    Identifiers are uuid strings stored under MongoDB's ``_id`` key.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        validate_assignment=True,
        validate_default=True,
    )

    id: str = Field(default_factory=new_id, alias="_id")

    def model_dump_mongo(self) -> dict[str, Any]:
        """Convert model to a MongoDB-compatible dictionary."""
        return self.model_dump(by_alias=True)


class EmbeddedModel(BaseModel):
    """
    Base model for embedded documents (subdocuments).

    Use this for models that are embedded within other documents
    rather than stored in their own collection.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
    )
