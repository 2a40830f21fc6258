"""
Format extractors for resume documents.

Supports text recovery from TXT, Markdown, PDF and DOCX files.
"""

from .base import BaseExtractor, ExtractionResult
from .docx_extractor import DOCXExtractor
from .markdown_extractor import MarkdownExtractor, strip_markdown
from .pdf_extractor import PDFExtractor
from .registry import ExtractorRegistry, normalize_type
from .text_extractor import TextExtractor

__all__ = [
    "BaseExtractor",
    "ExtractionResult",
    "DOCXExtractor",
    "MarkdownExtractor",
    "PDFExtractor",
    "TextExtractor",
    "ExtractorRegistry",
    "normalize_type",
    "strip_markdown",
]
