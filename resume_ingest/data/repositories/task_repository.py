"""
MongoDB task store.

Stores one document per parse task, keyed by the task id in ``_id``.
"""

from typing import Any, Optional

from pymongo.collection import Collection
from pymongo.results import DeleteResult

from resume_ingest.data.database import DatabaseManager, get_database_manager
from resume_ingest.data.models import ParseTask
from resume_ingest.errors import TaskNotFoundError
from resume_ingest.utils.config import get_settings
from resume_ingest.utils.logger import get_logger

from .base import TaskStore

logger = get_logger(__name__)


class MongoTaskStore(TaskStore):
    """Task store backed by a MongoDB collection."""

    def __init__(
        self,
        db_manager: Optional[DatabaseManager] = None,
        collection_name: Optional[str] = None,
    ) -> None:
        self._db_manager = db_manager or get_database_manager()
        self._collection_name = (
            collection_name or get_settings().database.tasks_collection
        )

    @property
    def collection_name(self) -> str:
        return self._collection_name

    def _get_collection(self) -> Collection:
        return self._db_manager.get_collection(self._collection_name)

    # -------------------------------------------------------------------------
    # Document Conversion
    # -------------------------------------------------------------------------

    @staticmethod
    def _to_model(document: dict[str, Any]) -> ParseTask:
        return ParseTask.model_validate(document)

    @staticmethod
    def _to_document(task: ParseTask) -> dict[str, Any]:
        return task.model_dump_mongo()

    # -------------------------------------------------------------------------
    # Store Operations
    # -------------------------------------------------------------------------

    def create_task(self, task: ParseTask) -> ParseTask:
        collection = self._get_collection()
        collection.insert_one(self._to_document(task))
        logger.debug(f"Created {self._collection_name} document: {task.id}")
        return task.model_copy(deep=True)

    def get_task(self, task_id: str) -> ParseTask:
        document = self._get_collection().find_one({"_id": task_id})
        if document is None:
            raise TaskNotFoundError(task_id)
        return self._to_model(document)

    def update_task(self, task: ParseTask) -> None:
        document = self._to_document(task)
        document.pop("_id", None)
        self._get_collection().update_one(
            {"_id": task.id},
            {"$set": document},
            upsert=True,
        )
        logger.debug(f"Updated {self._collection_name} document: {task.id}")

    def list_tasks_by_user(
        self, user_id: str, limit: int = 20, offset: int = 0
    ) -> list[ParseTask]:
        cursor = (
            self._get_collection()
            .find({"user_id": user_id})
            .sort("created_at", -1)
            .skip(offset)
            .limit(limit)
        )
        return [self._to_model(doc) for doc in cursor]

    def delete_task(self, task_id: str) -> None:
        result: DeleteResult = self._get_collection().delete_one({"_id": task_id})
        if result.deleted_count > 0:
            logger.debug(f"Deleted {self._collection_name} document: {task_id}")
