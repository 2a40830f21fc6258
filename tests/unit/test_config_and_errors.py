"""
Tests for settings and the error taxonomy.
"""

import pytest
from pydantic import ValidationError

from resume_ingest.errors import (
    DocumentDecodeError,
    EmptyContentError,
    ErrorKind,
    FileTooLargeError,
    IngestError,
    InvalidTaskTransitionError,
    ResumeFileNotFoundError,
    TaskNotFoundError,
    UnsupportedFormatError,
    UnsupportedTypeError,
)
from resume_ingest.utils.config import AppSettings, WorkerSettings, get_settings


class TestSettings:
    def test_test_environment(self):
        settings = get_settings()
        assert settings.environment == "testing"
        assert settings.store == "memory"
        assert settings.logging.file_output is False
        assert settings.logging.console_output is False

    def test_worker_defaults(self):
        workers = WorkerSettings()
        assert workers.max_workers == 4
        assert workers.queue_size == 100
        assert workers.max_file_size_bytes == 20 * 1024 * 1024

    def test_worker_env_override(self, monkeypatch):
        monkeypatch.setenv("WORKER_MAX_WORKERS", "8")
        assert WorkerSettings().max_workers == 8

    def test_blank_parser_version_rejected(self):
        with pytest.raises(ValidationError):
            AppSettings(parser_version="  ")

    def test_unknown_store_rejected(self):
        with pytest.raises(ValidationError):
            AppSettings(store="redis")


class TestErrors:
    @pytest.mark.parametrize(
        "error, kind, builtin",
        [
            (TaskNotFoundError("t1"), ErrorKind.TASK_NOT_FOUND, LookupError),
            (UnsupportedTypeError("xlsx"), ErrorKind.UNSUPPORTED_TYPE, ValueError),
            (ResumeFileNotFoundError("/x"), ErrorKind.FILE_NOT_FOUND, FileNotFoundError),
            (FileTooLargeError("/x", 10, 5), ErrorKind.FILE_TOO_LARGE, ValueError),
            (EmptyContentError(), ErrorKind.EMPTY_CONTENT, ValueError),
            (UnsupportedFormatError("only .docx"), ErrorKind.UNSUPPORTED_FORMAT, ValueError),
            (DocumentDecodeError("bad"), ErrorKind.DECODE_ERROR, IngestError),
            (InvalidTaskTransitionError("t1", "failed", "processing"), ErrorKind.INVALID_TRANSITION, IngestError),
        ],
    )
    def test_kind_and_builtin(self, error, kind, builtin):
        assert isinstance(error, IngestError)
        assert isinstance(error, builtin)
        assert error.kind == kind
        assert str(error) == error.message

    def test_messages(self):
        assert str(TaskNotFoundError("t1")) == "task not found: t1"
        assert str(UnsupportedTypeError("xlsx")) == "unsupported file type: xlsx"
        assert str(EmptyContentError()) == "document content is empty"
