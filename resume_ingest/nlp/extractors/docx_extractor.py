"""
Word document text extractor.

Uses python-docx, which reads the Office Open XML (.docx) container only.
Legacy binary .doc files are rejected rather than guessed at.
"""

from pathlib import Path

from docx import Document

from resume_ingest.errors import DocumentDecodeError, UnsupportedFormatError
from resume_ingest.utils.logger import get_logger

from .base import BaseExtractor, ExtractionResult

logger = get_logger(__name__)

# Placeholder pagination: python-docx has no layout engine
CHARS_PER_PAGE = 1500


def _runs_text(paragraph) -> str:
    return "".join(run.text for run in paragraph.runs)


def _row_cells(row) -> list[str]:
    """Cell texts for one table row, paragraphs inside a cell joined by a space."""
    cells = []
    previous = None
    for cell in row.cells:
        # A merged cell is returned once per grid column it spans
        if cell._tc is previous:
            continue
        previous = cell._tc
        cells.append(" ".join(_runs_text(p) for p in cell.paragraphs))
    return cells


class DOCXExtractor(BaseExtractor):
    """Extractor for Microsoft Word documents (.docx)."""

    parser_version = "DOCX-1.0.0"

    @property
    def supported_types(self) -> tuple[str, ...]:
        return ("docx",)

    def _validate_file(self, file_path: str | Path) -> Path:
        if Path(file_path).suffix.lower() != ".docx":
            raise UnsupportedFormatError(
                "unsupported format: only .docx files are supported"
            )
        return super()._validate_file(file_path)

    def extract_text(self, path: Path) -> ExtractionResult:
        """Extract body paragraphs first, then table rows."""
        try:
            doc = Document(str(path))
        except Exception as e:
            raise DocumentDecodeError(f"failed to open Word document {path.name}: {e}") from e

        text_parts = []

        # Paragraphs: run text, one newline each
        for paragraph in doc.paragraphs:
            text_parts.append(_runs_text(paragraph))
            text_parts.append("\n")

        # Tables: tab between cells, newline per row
        table_count = 0
        for table in doc.tables:
            table_count += 1
            for row in table.rows:
                text_parts.append("\t".join(_row_cells(row)))
                text_parts.append("\n")

        full_text = "".join(text_parts)
        logger.debug(
            f"Read {len(doc.paragraphs)} paragraph(s) and {table_count} table(s) "
            f"from {path.name}"
        )

        return ExtractionResult(
            text=full_text,
            page_count=max(1, len(full_text) // CHARS_PER_PAGE + 1),
            metadata={"extractor": "python-docx", "table_count": table_count},
        )
