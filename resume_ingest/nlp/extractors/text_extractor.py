"""
Plain text resume extractor.
"""

from pathlib import Path

from resume_ingest.utils.logger import get_logger

from .base import BaseExtractor, ExtractionResult

logger = get_logger(__name__)

# Roughly 3000 characters per printed page
CHARS_PER_PAGE = 3000


class TextExtractor(BaseExtractor):
    """Extractor for plain text documents; the canonical baseline."""

    parser_version = "TXT-1.0.0"

    # utf-8-sig drops a leading BOM; gb18030 covers legacy Chinese exports
    ENCODINGS = ("utf-8-sig", "gb18030")
    # Maps every byte to a character, so it never fails
    FALLBACK_ENCODING = "latin-1"

    @property
    def supported_types(self) -> tuple[str, ...]:
        return ("txt", "text")

    def extract_text(self, path: Path) -> ExtractionResult:
        """Read the file verbatim, trying common encodings in order."""
        text, encoding = self._read_text(path)
        result = ExtractionResult(
            text=text,
            page_count=max(1, len(text) // CHARS_PER_PAGE),
            metadata={"extractor": "plain_text", "encoding": encoding},
        )
        if encoding == self.FALLBACK_ENCODING:
            result.warnings.append(
                f"Text is neither {' nor '.join(self.ENCODINGS)}; decoded as {encoding}"
            )
        return result

    def _read_text(self, path: Path) -> tuple[str, str]:
        content = path.read_bytes()

        for encoding in self.ENCODINGS:
            try:
                return content.decode(encoding), encoding
            except UnicodeDecodeError:
                logger.debug(f"{path.name} is not valid {encoding}")

        logger.warning(f"Decoding {path.name} as {self.FALLBACK_ENCODING}")
        return content.decode(self.FALLBACK_ENCODING), self.FALLBACK_ENCODING
