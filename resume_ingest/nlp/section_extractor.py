"""
Section extractor.

Runs every section parser over recovered plain text and assembles the
StructuredContent, honoring ParseOptions.skip_sections.
"""

import re
from typing import Optional

from resume_ingest.data.models import ParseOptions, StructuredContent
from resume_ingest.utils.logger import get_logger

from .parsers import (
    ContactParser,
    EducationParser,
    ExperienceParser,
    ProjectsParser,
    SkillsParser,
)

logger = get_logger(__name__)


def clean_text(text: str) -> str:
    """
    Normalize whitespace in recovered text.

    Trims the text, unifies line endings, collapses three or more newlines to
    a blank line and runs of spaces to one space.
    """
    text = text.strip()
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = re.sub(r"\n{3,}", "\n\n", text)
    text = re.sub(r" {2,}", " ", text)
    return text


class SectionExtractor:
    """
    Deterministic decomposition of resume text into structured sections.

    Pipeline:
    1. Personal info (name, email, phone)
    2. Education windows
    3. Experience windows
    4. Skills vocabulary scan
    5. Project windows
    """

    def __init__(
        self,
        contact_parser: Optional[ContactParser] = None,
        education_parser: Optional[EducationParser] = None,
        experience_parser: Optional[ExperienceParser] = None,
        skills_parser: Optional[SkillsParser] = None,
        projects_parser: Optional[ProjectsParser] = None,
    ):
        self.contact_parser = contact_parser or ContactParser()
        self.education_parser = education_parser or EducationParser()
        self.experience_parser = experience_parser or ExperienceParser()
        self.skills_parser = skills_parser or SkillsParser()
        self.projects_parser = projects_parser or ProjectsParser()

    def extract(
        self, text: str, options: Optional[ParseOptions] = None
    ) -> StructuredContent:
        """
        Extract structured sections from plain text.

        Args:
            text: Recovered resume text
            options: Parse options; sections named in skip_sections are left empty

        Returns:
            StructuredContent with raw_text set to the input text
        """
        options = options or ParseOptions()
        content = StructuredContent(raw_text=text)

        def wanted(parser) -> bool:
            return not options.skips(parser.section_name)

        if wanted(self.contact_parser):
            content.personal_info = self.contact_parser.parse(text)
        if wanted(self.education_parser):
            content.education = self.education_parser.parse(text)
        if wanted(self.experience_parser):
            content.experience = self.experience_parser.parse(text)
        if wanted(self.skills_parser):
            content.skills = self.skills_parser.parse(text)
        if wanted(self.projects_parser):
            content.projects = self.projects_parser.parse(text)

        logger.debug(
            f"Extracted sections: education={len(content.education)} "
            f"experience={len(content.experience)} projects={len(content.projects)} "
            f"skipped={list(options.skip_sections)}"
        )
        return content


# Singleton instance
_section_extractor: Optional[SectionExtractor] = None


def get_section_extractor() -> SectionExtractor:
    """Get the section extractor singleton instance."""
    global _section_extractor
    if _section_extractor is None:
        _section_extractor = SectionExtractor()
    return _section_extractor
