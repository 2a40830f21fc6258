"""
Contact information parser for resumes.

Extracts the candidate name, email and mobile phone number.
"""

import re
from typing import Optional

from resume_ingest.data.models import PersonalInfo
from resume_ingest.utils.constants import NAME_SEARCH_LINES, SECTION_PERSONAL_INFO

from .base import SectionParser


class ContactParser(SectionParser[Optional[PersonalInfo]]):
    """Parser for extracting personal information from resume text."""

    section_name = SECTION_PERSONAL_INFO

    # Short run of CJK characters, ASCII letters and whitespace
    NAME_PATTERN = re.compile(r"^[\u4e00-\u9fa5a-zA-Z\s]{2,20}$")

    EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

    # 11-digit mainland mobile number, optionally prefixed with +86
    PHONE_PATTERN = re.compile(r"1[3-9]\d{9}|(?:\+86)?[\s-]?1[3-9]\d{9}")

    def parse(self, text: str) -> Optional[PersonalInfo]:
        """
        Parse personal information from resume text.

        Returns:
            PersonalInfo, or None when no name, email or phone was found
        """
        info = PersonalInfo(
            name=self._extract_name(text),
            email=self._extract_email(text),
            phone=self._extract_phone(text),
        )
        if info.is_empty:
            return None
        return info

    def _extract_name(self, text: str) -> Optional[str]:
        """First non-blank line among the leading lines that looks like a name."""
        for line in text.split("\n")[:NAME_SEARCH_LINES]:
            line = line.strip()
            if line and self.NAME_PATTERN.match(line):
                return line
        return None

    def _extract_email(self, text: str) -> Optional[str]:
        match = self.EMAIL_PATTERN.search(text)
        return match.group(0) if match else None

    def _extract_phone(self, text: str) -> Optional[str]:
        match = self.PHONE_PATTERN.search(text)
        # The optional separator can pull in the preceding newline, space or dash
        return match.group(0).strip().lstrip("-") if match else None
