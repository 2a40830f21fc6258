"""
Tests for Pydantic data models in resume_ingest.data.models.
"""

import pytest
from pydantic import ValidationError

from resume_ingest.data.models import (
    ParseOptions,
    ParseTask,
    PersonalInfo,
    ParseMetadata,
    Skills,
    SkillCategory,
    SkillItem,
    StructuredContent,
    TaskStatus,
)
from resume_ingest.errors import ErrorKind, InvalidTaskTransitionError


@pytest.fixture
def task():
    return ParseTask(
        resume_id="resume-1",
        user_id="user-1",
        file_path="/tmp/resume.txt",
        file_type="txt",
    )


class TestParseTask:
    def test_defaults(self, task):
        assert task.status == TaskStatus.PENDING
        assert task.progress == 0
        assert task.result is None
        assert task.error_message is None
        assert task.completed_at is None
        assert task.id

    def test_ids_are_unique(self):
        a = ParseTask(resume_id="r", user_id="u", file_path="f", file_type="txt")
        b = ParseTask(resume_id="r", user_id="u", file_path="f", file_type="txt")
        assert a.id != b.id

    def test_completed_lifecycle(self, task):
        task.mark_processing()
        assert task.status == TaskStatus.PROCESSING
        assert task.progress == 10

        task.mark_completed(StructuredContent(raw_text="text"))
        assert task.status == TaskStatus.COMPLETED
        assert task.progress == 100
        assert task.result.raw_text == "text"
        assert task.error_message is None
        assert task.completed_at is not None
        assert task.is_terminal

    def test_failed_lifecycle(self, task):
        task.mark_processing()
        task.mark_failed("document content is empty")
        assert task.status == TaskStatus.FAILED
        assert task.progress == 0
        assert task.result is None
        assert task.error_message == "document content is empty"
        assert task.completed_at is not None

    def test_cannot_complete_pending_task(self, task):
        with pytest.raises(InvalidTaskTransitionError) as exc_info:
            task.mark_completed(StructuredContent())
        assert exc_info.value.kind == ErrorKind.INVALID_TRANSITION
        assert "pending" in str(exc_info.value)

    def test_terminal_state_is_final(self, task):
        task.mark_processing()
        task.mark_failed("boom")
        with pytest.raises(InvalidTaskTransitionError):
            task.mark_processing()
        with pytest.raises(InvalidTaskTransitionError):
            task.mark_completed(StructuredContent())

    def test_progress_bounds(self, task):
        with pytest.raises(ValidationError):
            task.progress = 101

    def test_mongo_dump_uses_id_alias(self, task):
        document = task.model_dump_mongo()
        assert document["_id"] == task.id
        assert "id" not in document
        assert document["status"] == "pending"

    def test_round_trip_from_document(self, task):
        restored = ParseTask.model_validate(task.model_dump_mongo())
        assert restored.id == task.id
        assert restored.options == task.options

    def test_status_is_terminal(self):
        assert TaskStatus.COMPLETED.is_terminal
        assert TaskStatus.FAILED.is_terminal
        assert not TaskStatus.PENDING.is_terminal
        assert not TaskStatus.PROCESSING.is_terminal


class TestParseOptions:
    def test_defaults(self):
        options = ParseOptions()
        assert options.clean_text is False
        assert options.extract_images is False
        assert options.target_language is None
        assert options.skip_sections == ()

    def test_skip_sections_normalized(self):
        options = ParseOptions(skip_sections=["Skills", "skills", " EDUCATION "])
        assert options.skip_sections == ("education", "skills")
        assert options.skips("skills")
        assert not options.skips("projects")

    def test_single_section_string(self):
        assert ParseOptions(skip_sections="projects").skip_sections == ("projects",)

    def test_unknown_section_rejected(self):
        with pytest.raises(ValidationError):
            ParseOptions(skip_sections=["hobbies"])

    def test_frozen(self):
        options = ParseOptions()
        with pytest.raises(ValidationError):
            options.clean_text = True


class TestContentModels:
    def test_personal_info_is_empty(self):
        assert PersonalInfo().is_empty
        assert PersonalInfo(address="Beijing").is_empty
        assert not PersonalInfo(email="a@b.co").is_empty

    def test_skills_has_skills(self):
        assert not Skills().has_skills
        assert not Skills(categories=[SkillCategory(category="技术技能")]).has_skills
        assert Skills(
            categories=[SkillCategory(category="技术技能", skills=[SkillItem(name="Go")])]
        ).has_skills

    def test_confidence_score_bounds(self):
        content = StructuredContent()
        assert content.metadata.confidence_score == 0
        with pytest.raises(ValidationError):
            ParseMetadata(confidence_score=101)

    def test_skill_years_non_negative(self):
        with pytest.raises(ValidationError):
            SkillItem(name="Python", years=-1)
