"""
Registry of format extractors keyed by file type tag.

The registry is assembled once through a builder and is read-only afterwards,
so worker threads can share it without locking.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Optional

from resume_ingest.nlp.section_extractor import SectionExtractor
from resume_ingest.utils.logger import get_logger

from .base import BaseExtractor
from .docx_extractor import DOCXExtractor
from .markdown_extractor import MarkdownExtractor
from .pdf_extractor import PDFExtractor
from .text_extractor import TextExtractor

logger = get_logger(__name__)


def normalize_type(file_type: str) -> str:
    """Normalize a type tag: lower case, no leading dot ('.PDF' -> 'pdf')."""
    return file_type.strip().lower().lstrip(".")


class ExtractorRegistry(Mapping[str, BaseExtractor]):
    """Immutable mapping from type tag to extractor."""

    class Builder:
        """Accumulates registrations before the registry is frozen."""

        def __init__(self):
            self._extractors: dict[str, BaseExtractor] = {}

        def register(self, file_type: str, extractor: BaseExtractor) -> "ExtractorRegistry.Builder":
            tag = normalize_type(file_type)
            if not tag:
                raise ValueError("file type tag must not be empty")
            self._extractors[tag] = extractor
            return self

        def register_extractor(self, extractor: BaseExtractor) -> "ExtractorRegistry.Builder":
            """Register an extractor under every tag it supports."""
            for tag in extractor.supported_types:
                self.register(tag, extractor)
            return self

        def build(self) -> "ExtractorRegistry":
            return ExtractorRegistry(self._extractors)

    def __init__(self, extractors: Mapping[str, BaseExtractor]):
        self._extractors = MappingProxyType(dict(extractors))

    @classmethod
    def builder(cls) -> "ExtractorRegistry.Builder":
        return cls.Builder()

    @classmethod
    def default(
        cls, section_extractor: Optional[SectionExtractor] = None
    ) -> "ExtractorRegistry":
        """
        Registry with the built-in formats.

        Legacy 'doc' is routed to the Word extractor, which rejects it at
        parse time with an unsupported-format error.
        """
        word = DOCXExtractor(section_extractor)
        registry = (
            cls.builder()
            .register_extractor(TextExtractor(section_extractor))
            .register_extractor(MarkdownExtractor(section_extractor))
            .register_extractor(PDFExtractor(section_extractor))
            .register_extractor(word)
            .register("doc", word)
            .build()
        )
        logger.debug(f"Extractor registry built for: {', '.join(registry.supported_types())}")
        return registry

    def get(self, file_type: str, default: Optional[BaseExtractor] = None) -> Optional[BaseExtractor]:
        return self._extractors.get(normalize_type(file_type), default)

    def supported_types(self) -> list[str]:
        """Sorted list of registered type tags."""
        return sorted(self._extractors)

    def __getitem__(self, file_type: str) -> BaseExtractor:
        return self._extractors[normalize_type(file_type)]

    def __contains__(self, file_type: object) -> bool:
        return isinstance(file_type, str) and normalize_type(file_type) in self._extractors

    def __iter__(self) -> Iterator[str]:
        return iter(self._extractors)

    def __len__(self) -> int:
        return len(self._extractors)
