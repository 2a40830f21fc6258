"""
Tests for resume_ingest.nlp.extractors.docx_extractor: DOCXExtractor.
"""

import pytest
from docx import Document

from resume_ingest.errors import (
    DocumentDecodeError,
    EmptyContentError,
    ErrorKind,
    UnsupportedFormatError,
)
from resume_ingest.nlp.extractors import DOCXExtractor


@pytest.fixture
def extractor():
    return DOCXExtractor()


class TestDOCXExtractor:
    def test_paragraphs_precede_tables(self, extractor, make_docx):
        path = make_docx(
            ["张三", "zhangsan@example.com"],
            [["Python", "Redis"], ["Docker", "Git"]],
        )
        text = extractor.extract_text(path).text

        assert "张三\nzhangsan@example.com\n" in text
        assert "Python\tRedis\nDocker\tGit\n" in text
        assert text.index("zhangsan@example.com") < text.index("Python")

    def test_parse_uses_table_text(self, extractor, make_docx):
        path = make_docx(["张三"], [["技能", "Python"]])
        content = extractor.parse(path)

        assert content.personal_info.name == "张三"
        names = [s.name for s in content.skills.categories[0].skills]
        assert names == ["Python"]
        assert content.metadata.parser_version == "DOCX-1.0.0"

    def test_page_estimate(self, extractor, make_docx):
        path = make_docx(["x" * 100] * 40)
        result = extractor.extract_text(path)
        assert result.page_count == max(1, len(result.text) // 1500 + 1)
        assert result.page_count >= 3

    def test_short_document_is_one_page(self, extractor, make_docx):
        assert extractor.extract_text(make_docx(["张三"])).page_count == 1

    def test_legacy_doc_rejected(self, extractor, write_file):
        path = write_file("resume.doc", "张三")
        with pytest.raises(UnsupportedFormatError) as exc_info:
            extractor.parse(path)
        assert exc_info.value.kind == ErrorKind.UNSUPPORTED_FORMAT

    def test_non_docx_rejected_before_file_check(self, extractor, tmp_path):
        with pytest.raises(UnsupportedFormatError):
            extractor.parse(tmp_path / "missing.doc")

    def test_corrupt_docx_raises_decode_error(self, extractor, write_file):
        path = write_file("broken.docx", b"this is not a zip archive")
        with pytest.raises(DocumentDecodeError):
            extractor.parse(path)

    def test_empty_document_is_empty_content(self, extractor, make_docx):
        with pytest.raises(EmptyContentError):
            extractor.parse(make_docx([]))


class TestDOCXTableCells:
    def test_cell_paragraphs_separated(self, extractor, tmp_path):
        doc = Document()
        doc.add_paragraph("Work Experience")
        cell = doc.add_table(rows=1, cols=1).cell(0, 0)
        cell.text = "Acme Corp"
        cell.add_paragraph("Software Engineer")
        path = tmp_path / "table_layout.docx"
        doc.save(str(path))

        assert "Acme Corp Software Engineer\n" in extractor.extract_text(path).text

        content = extractor.parse(path)
        assert content.experience[0].company == "Acme Corp"

    def test_merged_cell_text_appears_once(self, extractor, tmp_path):
        doc = Document()
        doc.add_paragraph("张三")
        table = doc.add_table(rows=2, cols=2)
        merged = table.cell(0, 0).merge(table.cell(0, 1))
        merged.text = "Acme Corp"
        table.cell(1, 0).text = "Python"
        table.cell(1, 1).text = "Redis"
        path = tmp_path / "merged.docx"
        doc.save(str(path))

        text = extractor.extract_text(path).text

        assert text.count("Acme Corp") == 1
        assert "Acme Corp\nPython\tRedis\n" in text
