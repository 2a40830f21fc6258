"""
Markdown resume extractor.

Markup pollutes keyword and regex matching, so it is stripped before the
section heuristics run.
"""

import re
from pathlib import Path

from .base import ExtractionResult
from .text_extractor import TextExtractor

# Applied in order; later rules assume earlier ones already ran
MARKDOWN_RULES: tuple[tuple[re.Pattern, str], ...] = (
    # Fenced code blocks are dropped entirely
    (re.compile(r"```[\s\S]*?```"), ""),
    # Inline code keeps its content
    (re.compile(r"`([^`\n]*)`"), r"\1"),
    # ATX headings
    (re.compile(r"^(?:[ \t]*#{1,6}[ \t]*)+", re.MULTILINE), ""),
    # List bullets
    (re.compile(r"^[ \t]*[-*+][ \t]+", re.MULTILINE), ""),
    # Images and links keep their text
    (re.compile(r"!?\[([^\]]*)\]\([^)]*\)"), r"\1"),
    # Bold, then italic
    (re.compile(r"\*\*(.*?)\*\*"), r"\1"),
    (re.compile(r"\*(.*?)\*"), r"\1"),
)


def _apply_rules(text: str) -> str:
    for pattern, replacement in MARKDOWN_RULES:
        text = pattern.sub(replacement, text)
    return text


def strip_markdown(text: str) -> str:
    """
    Remove Markdown markup, keeping the readable text.

    The rule sequence is repeated until the text stops changing, so markers
    uncovered by a later rule (e.g. a heading inside link text) are removed
    too and the output is a fixed point. Every match shortens the text, which
    bounds the loop.
    """
    while True:
        stripped = _apply_rules(text)
        if stripped == text:
            return stripped
        text = stripped


class MarkdownExtractor(TextExtractor):
    """Extractor for Markdown documents."""

    parser_version = "MD-1.0.0"

    @property
    def supported_types(self) -> tuple[str, ...]:
        return ("md", "markdown")

    def extract_text(self, path: Path) -> ExtractionResult:
        result = super().extract_text(path)
        result.text = strip_markdown(result.text)
        result.metadata["extractor"] = "markdown"
        return result
