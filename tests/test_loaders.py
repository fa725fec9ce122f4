"""Tests for text extraction loaders."""
from __future__ import annotations

import json
from pathlib import Path

import docx
import pytest

from vsm_search.core.errors import ExtractionError, UnsupportedFileTypeError
from vsm_search.core.services import IndexService, IngestService, ModelStore
from vsm_search.infrastructure.document_loaders import (
    CompositeLoader,
    CSVLoader,
    DocxLoader,
    JSONLoader,
    LegacyDocLoader,
    MarkupLoader,
    PDFLoader,
    TextLoader,
)


class TestLoaders:

    def test_text(self, tmp_path: Path) -> None:
        path = tmp_path / "a.txt"
        path.write_text("plain ünïcode text", encoding="utf-8")
        assert TextLoader().load(path) == "plain ünïcode text"

    def test_csv_cells_joined_by_spaces(self, tmp_path: Path) -> None:
        path = tmp_path / "people.csv"
        path.write_text('name,notes\n"Smith, J",likes tea\n', encoding="utf-8")
        assert CSVLoader().load(path) == "name notes\nSmith, J likes tea"

    def test_json_pretty_printed(self, tmp_path: Path) -> None:
        path = tmp_path / "data.json"
        path.write_text('{"title":"Report","tags":["q1","sales"]}', encoding="utf-8")
        expected = json.dumps({"title": "Report", "tags": ["q1", "sales"]}, indent=2)
        assert JSONLoader().load(path) == expected

    def test_html_tags_and_scripts_stripped(self, tmp_path: Path) -> None:
        path = tmp_path / "page.html"
        path.write_text(
            "<html><head><style>p {color: red}</style><script>var x = 1;</script></head>"
            "<body><h1>Title</h1><p>Hello <b>world</b></p></body></html>",
            encoding="utf-8",
        )
        assert MarkupLoader().load(path) == "Title Hello world"

    def test_xml_tags_stripped(self, tmp_path: Path) -> None:
        path = tmp_path / "feed.xml"
        path.write_text("<root>\n  <item>Alpha</item>\n  <item>Beta</item>\n</root>", encoding="utf-8")
        assert MarkupLoader().load(path) == "Alpha Beta"

    def test_docx_paragraphs(self, tmp_path: Path) -> None:
        path = tmp_path / "memo.docx"
        document = docx.Document()
        document.add_paragraph("First paragraph")
        document.add_paragraph("   ")
        document.add_paragraph("Second paragraph")
        document.save(str(path))
        assert DocxLoader().load(path) == "First paragraph\n\nSecond paragraph"

    def test_legacy_doc_best_effort(self, tmp_path: Path) -> None:
        path = tmp_path / "old.doc"
        path.write_bytes(b"<w:t>Legacy</w:t>   document\xff")
        assert LegacyDocLoader().load(path) == "Legacy document"

    def test_pdf_supports_by_suffix(self) -> None:
        assert PDFLoader().supports(Path("REPORT.PDF"))
        assert not PDFLoader().supports(Path("report.txt"))


class TestCompositeLoader:

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("a.txt", "text/plain"),
            ("a.pdf", "application/pdf"),
            ("a.docx", "application/vnd.openxmlformats-officedocument.wordprocessingml.document"),
            ("a.md", "text/markdown"),
            ("a.unknownext", "text/plain"),
        ],
    )
    def test_mime_type(self, name: str, expected: str) -> None:
        assert CompositeLoader().mime_type(Path(name)) == expected

    def test_supports(self) -> None:
        loader = CompositeLoader()
        for name in ["a.txt", "a.pdf", "a.doc", "a.docx", "a.csv", "a.json", "a.html", "a.xml"]:
            assert loader.supports(Path(name)), name
        assert not loader.supports(Path("a.png"))

    def test_invalid_json_wrapped(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ExtractionError) as exc_info:
            CompositeLoader().load(path)
        assert exc_info.value.source == "bad.json"

    def test_corrupt_pdf_wrapped(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.pdf"
        path.write_bytes(b"this is not a pdf")
        with pytest.raises(ExtractionError):
            CompositeLoader().load(path)

    def test_unsupported_type(self, tmp_path: Path) -> None:
        with pytest.raises(UnsupportedFileTypeError):
            CompositeLoader().load(tmp_path / "image.png")

    def test_explicit_unsupported_path_in_ingest(self, docs_dir: Path) -> None:
        service = IngestService(IndexService(ModelStore()), docs_path=str(docs_dir))
        with pytest.raises(UnsupportedFileTypeError) as exc_info:
            service.collect([docs_dir / "logo.png"])
        assert exc_info.value.file_type == "image/png"
