"""
Text recovery and heuristic structuring for resumes.

- section_extractor: regex/keyword section parsing over plain text
- confidence: completeness score for a structured result
- extractors: per-format text recovery and the extractor registry
"""

from .confidence import calculate_confidence
from .section_extractor import SectionExtractor, clean_text, get_section_extractor
from .extractors import BaseExtractor, ExtractionResult, ExtractorRegistry

__all__ = [
    "calculate_confidence",
    "SectionExtractor",
    "clean_text",
    "get_section_extractor",
    "BaseExtractor",
    "ExtractionResult",
    "ExtractorRegistry",
]
