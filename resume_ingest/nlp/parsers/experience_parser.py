"""
Work experience parser for resumes.

Extracts company names and job titles from keyword-triggered windows.
"""

import re
from typing import Optional

from resume_ingest.data.models import Experience
from resume_ingest.utils.constants import (
    EXPERIENCE_KEYWORDS,
    EXPERIENCE_WINDOW,
    POSITION_KEYWORDS,
    SECTION_EXPERIENCE,
)

from .base import WindowedSectionParser


class ExperienceParser(WindowedSectionParser[Experience]):
    """Parser for extracting work experience entries from resume text."""

    section_name = SECTION_EXPERIENCE
    trigger_keywords = EXPERIENCE_KEYWORDS
    window_size = EXPERIENCE_WINDOW

    COMPANY_PATTERNS = [
        # 北京某某科技有限公司, 某某集团, ...
        re.compile(
            r"[\u4e00-\u9fa5a-zA-Z\s]{2,20}"
            r"(?:公司|集团|科技|有限责任公司|股份有限公司)"
        ),
        # Acme Corp, Globex Technologies Inc., ...
        re.compile(
            r"\b(?:(?!(?:Work|Experience|Employment|EXPERIENCE)\b)[A-Z][A-Za-z0-9&.'-]*\s+){1,4}"
            r"(?:Inc|LLC|Ltd|Corp|Corporation|Company|Co|Group|Technologies)\b\.?"
        ),
    ]

    def _parse_window(self, window: str) -> Optional[Experience]:
        company = self._extract_company(window)
        position = self._first_keyword(window, POSITION_KEYWORDS)

        if not company and not position:
            return None

        return Experience(company=company, position=position)

    def _extract_company(self, window: str) -> Optional[str]:
        for pattern in self.COMPANY_PATTERNS:
            match = pattern.search(window)
            if match:
                return match.group(0).strip()
        return None
