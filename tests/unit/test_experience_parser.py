"""
Tests for resume_ingest.nlp.parsers.experience_parser: ExperienceParser.
"""

import pytest

from resume_ingest.nlp.parsers import ExperienceParser


@pytest.fixture
def parser():
    return ExperienceParser()


class TestExperienceParser:
    def test_company_and_position(self, parser):
        entries = parser.parse("工作经历\n阿里巴巴集团 高级工程师")
        assert len(entries) == 1
        assert "阿里巴巴集团" in entries[0].company
        assert entries[0].position == "工程师"

    def test_position_only(self, parser):
        entries = parser.parse("工作经验\n担任产品经理三年")
        assert entries[0].company is None
        assert entries[0].position == "经理"

    def test_english_experience_block(self, parser):
        text = "Work Experience\nAcme Corp\nSenior Software Engineer"
        entries = parser.parse(text)
        assert entries[0].company == "Acme Corp"
        assert entries[0].position == "Engineer"

    def test_window_reaches_eight_following_lines(self, parser):
        lines = ["Experience"] + ["-"] * 7 + ["Data Analyst"]
        entries = parser.parse("\n".join(lines))
        assert entries[0].position == "Analyst"

    def test_window_does_not_reach_ninth_line(self, parser):
        lines = ["Experience"] + ["-"] * 8 + ["Data Analyst"]
        assert parser.parse("\n".join(lines)) == []

    def test_no_trigger_no_entries(self, parser):
        assert parser.parse("Senior Engineer at Acme Corp") == []

    def test_section_name(self, parser):
        assert parser.section_name == "experience"
