"""
Shared test fixtures for the Resume Ingest test suite.

Sets environment variables before any package imports so settings resolve to
a test configuration, then provides sample files, an in-memory task store and
a running task coordinator.
"""

import os

# === Set environment BEFORE any resume_ingest imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("APP_STORE", "memory")
os.environ.setdefault("DB_NAME", "resume_ingest_test")
os.environ.setdefault("LOG_FILE_OUTPUT", "false")
os.environ.setdefault("LOG_CONSOLE_OUTPUT", "false")

from pathlib import Path
from typing import Optional

import pytest
from docx import Document

from resume_ingest.core import TaskCoordinator
from resume_ingest.data.models import (
    Education,
    Experience,
    PersonalInfo,
    SkillCategory,
    SkillItem,
    Skills,
    StructuredContent,
)
from resume_ingest.data.repositories import InMemoryTaskStore


SAMPLE_RESUME = """张三
zhangsan@example.com
13812345678

教育背景
北京大学 计算机科学与技术 本科
专业：计算机科学

工作经历
字节跳动科技有限公司 高级工程师
负责推荐系统后端开发，使用 Python 和 Go

项目经历
“智能推荐平台” 项目负责人
技术栈：Python, Redis, Docker
"""


# ---------------------------------------------------------------------------
# Sample files
# ---------------------------------------------------------------------------


@pytest.fixture
def write_file(tmp_path):
    """Factory that writes text (or bytes) to a file under tmp_path."""

    def _factory(name: str, content: str | bytes, encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding=encoding)
        return path

    return _factory


@pytest.fixture
def sample_resume_text() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def sample_text_file(write_file) -> Path:
    return write_file("resume.txt", SAMPLE_RESUME)


@pytest.fixture
def contact_only_file(write_file) -> Path:
    return write_file("contact.txt", "张三\nzhangsan@example.com\n13812345678\n")


@pytest.fixture
def make_docx(tmp_path):
    """Factory that builds a .docx file from paragraphs and table rows."""

    def _factory(
        paragraphs: list[str],
        table_rows: Optional[list[list[str]]] = None,
        name: str = "resume.docx",
    ) -> Path:
        doc = Document()
        for text in paragraphs:
            doc.add_paragraph(text)
        if table_rows:
            table = doc.add_table(rows=len(table_rows), cols=len(table_rows[0]))
            for row_index, row in enumerate(table_rows):
                for col_index, value in enumerate(row):
                    table.cell(row_index, col_index).text = value
        path = tmp_path / name
        doc.save(str(path))
        return path

    return _factory


# ---------------------------------------------------------------------------
# Structured content
# ---------------------------------------------------------------------------


@pytest.fixture
def full_content() -> StructuredContent:
    """A result that earns every confidence point."""
    return StructuredContent(
        personal_info=PersonalInfo(name="张三", email="zhangsan@example.com", phone="13812345678"),
        education=[Education(school="北京大学", degree="本科", major="计算机科学")],
        experience=[Experience(company="字节跳动科技有限公司", position="工程师")],
        skills=Skills(
            categories=[SkillCategory(category="技术技能", skills=[SkillItem(name="Python", level="熟练")])]
        ),
        raw_text="x" * 200,
    )


# ---------------------------------------------------------------------------
# Store and coordinator
# ---------------------------------------------------------------------------


@pytest.fixture
def store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture
def coordinator(store):
    coordinator = TaskCoordinator(store, max_workers=2, queue_size=10)
    yield coordinator
    coordinator.shutdown(wait=True)
