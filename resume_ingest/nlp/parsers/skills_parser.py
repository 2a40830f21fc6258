"""
Skills parser for resumes.

Scans the whole text for a fixed technology vocabulary.
"""

from typing import Optional

from resume_ingest.data.models import SkillCategory, SkillItem, Skills
from resume_ingest.utils.constants import (
    SECTION_SKILLS,
    TECH_SKILL_CATEGORY,
    TECH_SKILL_LEVEL,
    TECH_SKILLS,
)

from .base import SectionParser


class SkillsParser(SectionParser[Optional[Skills]]):
    """
    Vocabulary-based skill extractor.

    Matching is case-sensitive substring containment, so overlapping names
    (e.g. "Java" inside "JavaScript") both match. Each vocabulary entry is
    emitted at most once.
    """

    section_name = SECTION_SKILLS

    def __init__(self, vocabulary: tuple[str, ...] = TECH_SKILLS):
        self.vocabulary = vocabulary

    def parse(self, text: str) -> Optional[Skills]:
        found = [
            SkillItem(name=skill, level=TECH_SKILL_LEVEL)
            for skill in self.vocabulary
            if skill in text
        ]
        if not found:
            return None

        return Skills(
            categories=[SkillCategory(category=TECH_SKILL_CATEGORY, skills=found)]
        )
