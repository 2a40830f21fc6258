"""
Projects parser for resumes.

Extracts project names and roles from keyword-triggered windows.
"""

import re
from typing import Optional

from resume_ingest.data.models import Project
from resume_ingest.utils.constants import (
    PROJECT_KEYWORDS,
    PROJECT_WINDOW,
    ROLE_KEYWORDS,
    SECTION_PROJECTS,
)

from .base import WindowedSectionParser


class ProjectsParser(WindowedSectionParser[Project]):
    """Parser for extracting project entries from resume text."""

    section_name = SECTION_PROJECTS
    trigger_keywords = PROJECT_KEYWORDS
    window_size = PROJECT_WINDOW

    # "Smart Campus", “智慧校园”, 「智慧校园」
    QUOTED_NAME_PATTERN = re.compile(r"[\"“”「」]([^\"“”「」]{3,30})[\"“”「」]")

    # 项目: 智慧校园 / Project: Smart Campus / Project Name: ...
    LABELED_NAME_PATTERNS = [
        re.compile(r"项目[:：]\s*([\u4e00-\u9fa5a-zA-Z\s]{3,30})"),
        re.compile(r"\bProject(?:\s+Name)?[:：]\s*([A-Za-z0-9][A-Za-z0-9 .&-]{2,29})", re.IGNORECASE),
    ]

    def _parse_window(self, window: str) -> Optional[Project]:
        name = self._extract_name(window)
        if not name:
            return None

        return Project(name=name, role=self._first_keyword(window, ROLE_KEYWORDS))

    def _extract_name(self, window: str) -> Optional[str]:
        match = self.QUOTED_NAME_PATTERN.search(window)
        if match:
            return match.group(1).strip()

        for pattern in self.LABELED_NAME_PATTERNS:
            match = pattern.search(window)
            if match and match.group(1).strip():
                return match.group(1).strip()
        return None
