"""
Parse task coordinator.

Accepts parse requests, persists a task record, and runs extraction on a
bounded pool of background worker threads. Errors found while validating a
request are raised to the caller and no task is created; errors raised while
a task executes are recorded on the task, which moves to ``failed``.
"""

import queue
import threading
import time
from pathlib import Path
from typing import Optional

from resume_ingest.data.models import ParseOptions, ParseTask, TaskStatus
from resume_ingest.data.repositories import TaskStore
from resume_ingest.errors import (
    FileTooLargeError,
    ResumeFileNotFoundError,
    UnsupportedTypeError,
)
from resume_ingest.nlp.confidence import calculate_confidence
from resume_ingest.nlp.extractors import ExtractorRegistry, normalize_type
from resume_ingest.utils.config import get_settings
from resume_ingest.utils.logger import get_logger

logger = get_logger(__name__)


class TaskCoordinator:
    """
    Owns the task queue and the worker threads consuming it.

    Each task is executed by exactly one worker, so its store writes are
    ordered pending -> processing -> completed | failed. ``submit`` blocks
    while the queue is full.

    Usage:
        with TaskCoordinator(InMemoryTaskStore()) as coordinator:
            task = coordinator.submit("cv.pdf", "pdf", "resume-1", "user-1")
            coordinator.join()
            task = coordinator.get_status(task.id)
    """

    def __init__(
        self,
        store: TaskStore,
        registry: Optional[ExtractorRegistry] = None,
        max_workers: Optional[int] = None,
        queue_size: Optional[int] = None,
        max_file_size: Optional[int] = None,
        parser_version: Optional[str] = None,
    ):
        settings = get_settings()

        self.store = store
        self.registry = registry or ExtractorRegistry.default()
        self.max_workers = settings.workers.max_workers if max_workers is None else max_workers
        self.max_file_size = (
            settings.workers.max_file_size_bytes if max_file_size is None else max_file_size
        )
        self.parser_version = parser_version or settings.parser_version
        queue_size = settings.workers.queue_size if queue_size is None else queue_size

        if self.max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        if queue_size < 1:
            raise ValueError("queue_size must be at least 1")

        self._queue: queue.Queue[Optional[ParseTask]] = queue.Queue(maxsize=queue_size)
        self._workers: list[threading.Thread] = []
        self._lock = threading.Lock()
        # Orders submissions against shutdown; workers never take it
        self._submit_lock = threading.Lock()
        self._closed = False

    # ==================== Submission ====================

    def submit(
        self,
        file_path: str | Path,
        file_type: str,
        resume_id: str,
        user_id: str,
        options: Optional[ParseOptions] = None,
    ) -> ParseTask:
        """
        Validate a parse request, persist a pending task and enqueue it.

        Raises:
            ResumeFileNotFoundError: If the file does not exist
            FileTooLargeError: If the file exceeds the configured size limit
            UnsupportedTypeError: If no extractor handles the file type
        """
        path = Path(file_path)
        if not path.is_file():
            raise ResumeFileNotFoundError(str(file_path))

        size = path.stat().st_size
        if size > self.max_file_size:
            raise FileTooLargeError(str(file_path), size, self.max_file_size)

        tag = normalize_type(file_type)
        if tag not in self.registry:
            raise UnsupportedTypeError(file_type)

        task = ParseTask(
            resume_id=resume_id,
            user_id=user_id,
            file_path=str(path),
            file_type=tag,
            options=options or ParseOptions(),
        )

        with self._submit_lock:
            if self._closed:
                raise RuntimeError("coordinator has been shut down")

            created = self.store.create_task(task)
            logger.info(f"Submitted parse task {created.id} ({tag}) for resume {resume_id}")

            self.start()
            self._queue.put(created.model_copy(deep=True))
        return created

    # ==================== Queries ====================

    def get_status(self, task_id: str) -> ParseTask:
        """Current snapshot of a task; raises TaskNotFoundError."""
        return self.store.get_task(task_id)

    def list_by_user(self, user_id: str, limit: int = 20, offset: int = 0) -> list[ParseTask]:
        """A user's tasks, newest first."""
        return self.store.list_tasks_by_user(user_id, limit=limit, offset=offset)

    # ==================== Lifecycle ====================

    def start(self) -> None:
        """Start the worker threads if they are not running yet."""
        with self._lock:
            if self._workers or self._closed:
                return
            for index in range(self.max_workers):
                worker = threading.Thread(
                    target=self._worker_loop,
                    name=f"parse-worker-{index}",
                    daemon=True,
                )
                worker.start()
                self._workers.append(worker)
        logger.debug(f"Started {self.max_workers} parse worker(s)")

    def join(self) -> None:
        """Block until every queued task has been executed."""
        self._queue.join()

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting tasks and stop the workers after the queue drains."""
        # Sentinels go in behind every task already submitted
        with self._submit_lock:
            with self._lock:
                if self._closed:
                    return
                self._closed = True
                workers = list(self._workers)

            for _ in workers:
                self._queue.put(None)

        if wait:
            for worker in workers:
                worker.join()
        logger.debug("Parse workers stopped")

    def __enter__(self) -> "TaskCoordinator":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown(wait=True)

    # ==================== Execution ====================

    def _worker_loop(self) -> None:
        while True:
            task = self._queue.get()
            try:
                if task is None:
                    return
                self._execute(task)
            except Exception:
                # Store failures leave the task in its last persisted state
                logger.exception(f"Parse worker could not record task {task.id if task else None}")
            finally:
                self._queue.task_done()

    def _execute(self, task: ParseTask) -> None:
        """Run one task to a terminal state."""
        task.mark_processing()
        self.store.update_task(task)
        logger.info(f"Processing parse task {task.id} ({task.file_type})")

        started = time.perf_counter()
        try:
            extractor = self.registry.get(task.file_type)
            if extractor is None:
                raise UnsupportedTypeError(task.file_type)

            content = extractor.parse(task.file_path, task.options)

            metadata = content.metadata
            metadata.parse_duration_ms = int((time.perf_counter() - started) * 1000)
            metadata.file_size = Path(task.file_path).stat().st_size
            if metadata.parser_version is None:
                metadata.parser_version = self.parser_version
            metadata.confidence_score = calculate_confidence(content)
        except Exception as e:
            task.mark_failed(str(e))
            self.store.update_task(task)
            logger.error(f"Parse task {task.id} failed: {e}")
            return

        task.mark_completed(content)
        self.store.update_task(task)
        logger.info(
            f"Parse task {task.id} completed in {metadata.parse_duration_ms}ms "
            f"(confidence {metadata.confidence_score})"
        )

    @property
    def pending_count(self) -> int:
        """Approximate number of queued tasks not yet picked up."""
        return self._queue.qsize()

    @property
    def is_running(self) -> bool:
        return any(worker.is_alive() for worker in self._workers)


def wait_for_task(
    coordinator: TaskCoordinator,
    task_id: str,
    timeout: Optional[float] = None,
    poll_interval: float = 0.05,
) -> ParseTask:
    """Poll a task until it reaches a terminal state or the timeout expires."""
    deadline = None if timeout is None else time.monotonic() + timeout
    while True:
        task = coordinator.get_status(task_id)
        if TaskStatus(task.status).is_terminal:
            return task
        if deadline is not None and time.monotonic() >= deadline:
            return task
        time.sleep(poll_interval)
