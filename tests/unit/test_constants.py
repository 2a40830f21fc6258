"""
Tests for resume_ingest.utils.constants: section names and keyword vocabularies.
"""

from resume_ingest.nlp.extractors import ExtractorRegistry
from resume_ingest.nlp.parsers import (
    ContactParser,
    EducationParser,
    ExperienceParser,
    ProjectsParser,
    SkillsParser,
)
from resume_ingest.utils.constants import (
    DEGREE_KEYWORDS,
    EDUCATION_WINDOW,
    EXPERIENCE_WINDOW,
    PROJECT_WINDOW,
    SECTION_NAMES,
    SUPPORTED_RESUME_TYPES,
    TECH_SKILLS,
)


# ── Sections ────────────────────────────────────────────────────────────────


class TestSectionNames:
    def test_every_parser_has_a_known_section(self):
        parsers = [ContactParser(), EducationParser(), ExperienceParser(), SkillsParser(), ProjectsParser()]
        assert sorted(p.section_name for p in parsers) == sorted(SECTION_NAMES)

    def test_section_names_unique(self):
        assert len(set(SECTION_NAMES)) == len(SECTION_NAMES)


# ── File types ──────────────────────────────────────────────────────────────


class TestSupportedTypes:
    def test_registry_matches_supported_types(self):
        assert ExtractorRegistry.default().supported_types() == sorted(SUPPORTED_RESUME_TYPES)


# ── Heuristic vocabularies ──────────────────────────────────────────────────


class TestVocabularies:
    def test_window_sizes(self):
        assert EDUCATION_WINDOW == 5
        assert EXPERIENCE_WINDOW == 8
        assert PROJECT_WINDOW == 6

    def test_degree_keywords_cover_both_locales(self):
        assert "本科" in DEGREE_KEYWORDS
        assert "Bachelor" in DEGREE_KEYWORDS

    def test_tech_skills_unique(self):
        assert len(set(TECH_SKILLS)) == len(TECH_SKILLS)
