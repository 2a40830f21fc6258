"""
Tests for resume_ingest.nlp.parsers.projects_parser: ProjectsParser.
"""

import pytest

from resume_ingest.nlp.parsers import ProjectsParser


@pytest.fixture
def parser():
    return ProjectsParser()


class TestProjectsParser:
    def test_quoted_name_and_role(self, parser):
        entries = parser.parse("项目经历\n“智能推荐平台” 项目负责人")
        assert len(entries) == 1
        assert entries[0].name == "智能推荐平台"
        assert entries[0].role == "负责人"

    def test_corner_bracket_quotes(self, parser):
        entries = parser.parse("项目经验\n「智慧校园系统」")
        assert entries[0].name == "智慧校园系统"

    def test_labeled_chinese_name(self, parser):
        entries = parser.parse("参与项目\n项目：数据中台")
        assert entries[0].name == "数据中台"

    def test_labeled_english_name(self, parser):
        text = "Projects\nProject: Smart Campus\nRole: Tech Lead"
        entries = parser.parse(text)
        assert entries[0].name.startswith("Smart Campus")
        assert entries[0].role == "Tech Lead"

    def test_quoted_name_preferred_over_label(self, parser):
        entries = parser.parse('Projects\nProject: Alpha\n"Beta Platform"')
        assert entries[0].name == "Beta Platform"

    def test_name_required(self, parser):
        assert parser.parse("项目经历\n担任架构师") == []

    def test_window_limited_to_six_following_lines(self, parser):
        lines = ["项目经历"] + ["-"] * 6 + ['"Late Project"']
        assert parser.parse("\n".join(lines)) == []
