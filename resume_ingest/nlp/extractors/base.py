"""
Base extractor class for resume documents.

An extractor recovers plain text from one file format and hands it to the
shared section extractor, so adding a format only means implementing the
text-recovery half.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from resume_ingest.data.models import ParseOptions, StructuredContent
from resume_ingest.errors import EmptyContentError, ResumeFileNotFoundError
from resume_ingest.nlp.section_extractor import (
    SectionExtractor,
    clean_text,
    get_section_extractor,
)
from resume_ingest.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ExtractionResult:
    """Result of text recovery from a document."""

    text: str
    page_count: Optional[int] = None
    metadata: dict = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    @property
    def char_count(self) -> int:
        """Count characters in extracted text."""
        return len(self.text)

    @property
    def is_empty(self) -> bool:
        """Check if extraction resulted in blank text."""
        return len(self.text.strip()) == 0


class BaseExtractor(ABC):
    """
    Abstract base class for format extractors.

    Subclasses implement ``extract_text``; ``parse`` runs the shared
    pipeline: validate, recover text, reject blank text, optionally clean,
    extract sections and stamp metadata.
    """

    #: Version stamped on results produced by this extractor
    parser_version: Optional[str] = None

    def __init__(self, section_extractor: Optional[SectionExtractor] = None):
        self._section_extractor = section_extractor

    @property
    def section_extractor(self) -> SectionExtractor:
        if self._section_extractor is None:
            self._section_extractor = get_section_extractor()
        return self._section_extractor

    @property
    @abstractmethod
    def supported_types(self) -> tuple[str, ...]:
        """Return tuple of supported file type tags (e.g. 'pdf', 'docx')."""
        pass

    @abstractmethod
    def extract_text(self, path: Path) -> ExtractionResult:
        """
        Recover plain text from a document.

        Args:
            path: Validated path to the document

        Returns:
            ExtractionResult with the recovered text
        """
        pass

    def parse(
        self, file_path: str | Path, options: Optional[ParseOptions] = None
    ) -> StructuredContent:
        """
        Parse a document into structured content.

        Raises:
            ResumeFileNotFoundError: If the file is missing
            EmptyContentError: If the recovered text is blank
            UnsupportedFormatError: If the extractor rejects the file
            DocumentDecodeError: If the format library cannot read the file
        """
        options = options or ParseOptions()
        path = self._validate_file(file_path)

        extraction = self.extract_text(path)
        if extraction.is_empty:
            raise EmptyContentError()

        text = clean_text(extraction.text) if options.clean_text else extraction.text

        content = self.section_extractor.extract(text, options)
        content.metadata.page_count = extraction.page_count
        content.metadata.parser_version = self.parser_version
        content.metadata.warnings.extend(extraction.warnings)

        logger.debug(
            f"{self.__class__.__name__} parsed {path.name}: "
            f"{extraction.char_count} chars, {extraction.page_count} page(s)"
        )
        return content

    def _validate_file(self, file_path: str | Path) -> Path:
        """Validate that the path exists and is a regular file."""
        path = Path(file_path)
        if not path.is_file():
            raise ResumeFileNotFoundError(str(file_path))
        return path
