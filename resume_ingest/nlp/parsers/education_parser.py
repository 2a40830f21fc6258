"""
Education parser for resumes.

Extracts school, major and degree level from keyword-triggered windows.
"""

import re
from typing import Optional

from resume_ingest.data.models import Education
from resume_ingest.utils.constants import (
    DEGREE_KEYWORDS,
    EDUCATION_KEYWORDS,
    EDUCATION_WINDOW,
    SECTION_EDUCATION,
)

from .base import WindowedSectionParser


class EducationParser(WindowedSectionParser[Education]):
    """Parser for extracting education entries from resume text."""

    section_name = SECTION_EDUCATION
    trigger_keywords = EDUCATION_KEYWORDS
    window_size = EDUCATION_WINDOW

    SCHOOL_PATTERNS = [
        # 北京大学, 计算机学院, ...
        re.compile(r"[\u4e00-\u9fa5]{2,10}(?:大学|学院|学校)"),
        # Stanford University, University of California, ...
        re.compile(
            r"\b(?:(?!Education\b|EDUCATION\b)[A-Z][A-Za-z&.'-]*\s+){0,4}"
            r"(?:University|College|Institute|School)\b"
            r"(?:\s+of(?:\s+[A-Z][A-Za-z&.'-]*){1,4})?"
        ),
    ]

    MAJOR_PATTERNS = [
        re.compile(r"专业[:：]?\s*([\u4e00-\u9fa5a-zA-Z\s]{2,20})"),
        re.compile(r"\bMajor[:：]\s*([A-Za-z&]+(?:[ ][A-Za-z&]+){0,4})", re.IGNORECASE),
    ]

    def _parse_window(self, window: str) -> Optional[Education]:
        school = self._extract_school(window)
        major = self._extract_major(window)

        if not school and not major:
            return None

        return Education(
            school=school,
            major=major,
            degree=self._first_keyword(window, DEGREE_KEYWORDS),
        )

    def _extract_school(self, window: str) -> Optional[str]:
        for pattern in self.SCHOOL_PATTERNS:
            match = pattern.search(window)
            if match:
                return match.group(0).strip()
        return None

    def _extract_major(self, window: str) -> Optional[str]:
        for pattern in self.MAJOR_PATTERNS:
            match = pattern.search(window)
            if match and match.group(1).strip():
                return match.group(1).strip()
        return None
