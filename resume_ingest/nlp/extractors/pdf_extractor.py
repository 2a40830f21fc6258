"""
PDF resume extractor.

Uses two extraction methods for robust text recovery:
1. pdfplumber - Primary method, good for structured text
2. pypdf - Fallback when pdfplumber cannot open the file or recovers nothing

Pages that fail to extract are skipped; the document fails only when no
page yields any text.
"""

from pathlib import Path
from typing import Any, Callable, Iterable, Optional

import pdfplumber
from pypdf import PdfReader

from resume_ingest.errors import DocumentDecodeError
from resume_ingest.utils.logger import get_logger

from .base import BaseExtractor, ExtractionResult

logger = get_logger(__name__)


class PDFExtractor(BaseExtractor):
    """Extractor for PDF documents."""

    parser_version = "PDF-1.0.0"

    @property
    def supported_types(self) -> tuple[str, ...]:
        return ("pdf",)

    def extract_text(self, path: Path) -> ExtractionResult:
        """Extract text page by page, pdfplumber first, pypdf as fallback."""
        warnings: list[str] = []
        errors: list[str] = []

        result = self._extract_with_pdfplumber(path, errors)
        if result is not None and not result.is_empty:
            return result

        if result is None:
            warnings.append("pdfplumber could not open the file, trying pypdf")
        else:
            warnings.append("pdfplumber recovered no text, trying pypdf")
        fallback = self._extract_with_pypdf(path, errors)

        if fallback is None:
            if result is not None:
                # pdfplumber opened the file; keep its page count
                result.warnings.extend(warnings)
                return result
            raise DocumentDecodeError(f"failed to open PDF: {'; '.join(errors)}")

        fallback.warnings[:0] = warnings
        if fallback.is_empty:
            fallback.warnings.append("PDF may be image-based or encrypted")
        return fallback

    def _extract_with_pdfplumber(
        self, path: Path, errors: list[str]
    ) -> Optional[ExtractionResult]:
        """Extract text using pdfplumber; None when the file cannot be opened."""
        try:
            with pdfplumber.open(path) as pdf:
                page_count = len(pdf.pages)
                text, skipped = self._walk_pages(pdf.pages, lambda page: page.extract_text())
        except Exception as e:
            logger.debug(f"pdfplumber could not read {path.name}: {e}")
            errors.append(f"pdfplumber: {e}")
            return None

        return self._build_result(text, page_count, skipped, "pdfplumber")

    def _extract_with_pypdf(
        self, path: Path, errors: list[str]
    ) -> Optional[ExtractionResult]:
        """Extract text using pypdf; None when the file cannot be opened."""
        try:
            reader = PdfReader(path)
            page_count = len(reader.pages)
            text, skipped = self._walk_pages(reader.pages, lambda page: page.extract_text())
        except Exception as e:
            logger.debug(f"pypdf could not read {path.name}: {e}")
            errors.append(f"pypdf: {e}")
            return None

        return self._build_result(text, page_count, skipped, "pypdf")

    @staticmethod
    def _walk_pages(
        pages: Iterable[Any], extract: Callable[[Any], Optional[str]]
    ) -> tuple[str, list[int]]:
        """
        Concatenate page texts in order, one newline after each page.

        Returns the text and the 1-based numbers of pages that were skipped
        because they were null, empty or raised during extraction.
        """
        parts: list[str] = []
        skipped: list[int] = []

        for number, page in enumerate(pages, start=1):
            if page is None:
                skipped.append(number)
                continue
            try:
                page_text = extract(page)
            except Exception as e:
                logger.debug(f"Skipping PDF page {number}: {e}")
                skipped.append(number)
                continue
            if not page_text:
                skipped.append(number)
                continue
            parts.append(page_text)
            parts.append("\n")

        return "".join(parts), skipped

    @staticmethod
    def _build_result(
        text: str, page_count: int, skipped: list[int], extractor: str
    ) -> ExtractionResult:
        warnings = []
        if skipped:
            warnings.append(f"Skipped {len(skipped)} PDF page(s) without text: {skipped}")
        return ExtractionResult(
            text=text,
            page_count=page_count,
            metadata={"extractor": extractor, "skipped_pages": skipped},
            warnings=warnings,
        )
