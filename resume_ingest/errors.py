"""
Error taxonomy for Resume Ingest.

Every error raised by the service carries an ErrorKind so callers and the
task coordinator can branch on a closed set of failure kinds. Each class also
derives from the closest builtin exception.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds."""

    TASK_NOT_FOUND = "task_not_found"
    UNSUPPORTED_TYPE = "unsupported_type"
    FILE_NOT_FOUND = "file_not_found"
    FILE_TOO_LARGE = "file_too_large"
    EMPTY_CONTENT = "empty_content"
    UNSUPPORTED_FORMAT = "unsupported_format"
    DECODE_ERROR = "decode_error"
    INVALID_TRANSITION = "invalid_transition"


class IngestError(Exception):
    """Base class for all service errors."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TaskNotFoundError(IngestError, LookupError):
    kind = ErrorKind.TASK_NOT_FOUND

    def __init__(self, task_id: str) -> None:
        super().__init__(f"task not found: {task_id}")
        self.task_id = task_id


class UnsupportedTypeError(IngestError, ValueError):
    """No extractor is registered for the file type tag."""

    kind = ErrorKind.UNSUPPORTED_TYPE

    def __init__(self, file_type: str) -> None:
        super().__init__(f"unsupported file type: {file_type}")
        self.file_type = file_type


class ResumeFileNotFoundError(IngestError, FileNotFoundError):
    kind = ErrorKind.FILE_NOT_FOUND

    def __init__(self, file_path: str) -> None:
        super().__init__(f"file not found: {file_path}")
        self.file_path = file_path


class FileTooLargeError(IngestError, ValueError):
    kind = ErrorKind.FILE_TOO_LARGE

    def __init__(self, file_path: str, size: int, limit: int) -> None:
        super().__init__(f"file too large: {file_path} is {size} bytes (max: {limit})")
        self.file_path = file_path
        self.size = size
        self.limit = limit


class EmptyContentError(IngestError, ValueError):
    """Recovered text is blank after decoding."""

    kind = ErrorKind.EMPTY_CONTENT

    def __init__(self, message: str = "document content is empty") -> None:
        super().__init__(message)


class UnsupportedFormatError(IngestError, ValueError):
    """An extractor rejected the file at parse time (e.g. legacy .doc)."""

    kind = ErrorKind.UNSUPPORTED_FORMAT


class DocumentDecodeError(IngestError):
    """A format library failed to open or decode the document."""

    kind = ErrorKind.DECODE_ERROR


class InvalidTaskTransitionError(IngestError):
    kind = ErrorKind.INVALID_TRANSITION

    def __init__(self, task_id: str, current: str, target: str) -> None:
        super().__init__(f"task {task_id}: cannot move from {current} to {target}")
        self.task_id = task_id
        self.current = current
        self.target = target
