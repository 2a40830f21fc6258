"""
Base classes for resume section parsers.

Each parser is a pure function of the recovered text: ``parse(text)`` returns
the section's entity (or entities) without side effects.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")
E = TypeVar("E")


class SectionParser(ABC, Generic[T]):
    """Common interface of all section parsers."""

    #: Section name, as accepted by ParseOptions.skip_sections
    section_name: str = ""

    @abstractmethod
    def parse(self, text: str) -> T:
        """Extract the section from plain resume text."""
        pass


class WindowedSectionParser(SectionParser[list[E]]):
    """
    Keyword-triggered window scanner.

    Every line containing a trigger keyword opens a window made of that line
    plus the next ``window_size`` lines, joined with spaces. Overlapping
    windows are not merged, so nearby triggers may yield repeated entries.
    """

    trigger_keywords: tuple[str, ...] = ()
    window_size: int = 0

    def parse(self, text: str) -> list[E]:
        entries: list[E] = []
        if not text:
            return entries

        lines = text.split("\n")
        for index, line in enumerate(lines):
            if not self._is_trigger(line):
                continue
            window = " ".join(lines[index:index + self.window_size + 1])
            entry = self._parse_window(window)
            if entry is not None:
                entries.append(entry)

        return entries

    def _is_trigger(self, line: str) -> bool:
        lowered = line.lower()
        return any(keyword.lower() in lowered for keyword in self.trigger_keywords)

    @abstractmethod
    def _parse_window(self, window: str) -> Optional[E]:
        """Build an entry from one window, or None when nothing was found."""
        pass

    @staticmethod
    def _first_keyword(text: str, keywords: tuple[str, ...]) -> Optional[str]:
        """Return the first keyword (in list order) contained in text."""
        for keyword in keywords:
            if keyword in text:
                return keyword
        return None
