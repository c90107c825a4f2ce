# tests/test_decoders.py
"""
Tests for the format decoders, through the extractors that use them.
"""

import base64
import gzip
import io
import tarfile

import docx
import pytest
from docx.opc.constants import RELATIONSHIP_TYPE as RT
from docx.opc.packuri import PackURI
from docx.opc.part import Part
from pypdf import PdfWriter

from docextract.core.document import Document
from docextract.core.metadata import Metadata
from docextract.engine.autodetect import AutoDetectDecoder
from docextract.engine.base import CONTENT_ENCODING, DecodeContext
from docextract.engine.decoders.pdf import PAGE_COUNT
from docextract.engine.decoders.text import TextDecoder
from docextract.extraction.base import extract_to_result
from docextract.extraction.plugins import GenericExtractor, PdfExtractor
from tests.conftest import make_zip

pytestmark = pytest.mark.tier2


# =============================================================================
# Builders
# =============================================================================


def make_pdf(attachments: dict) -> bytes:
    writer = PdfWriter()
    writer.add_blank_page(width=200, height=200)
    writer.add_metadata({"/Title": "Quarterly Report"})
    for name, data in attachments.items():
        writer.add_attachment(name, data)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


# 1x1 PNG
PIXEL_PNG = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)

XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def save_docx(document) -> bytes:
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def make_docx_with_picture() -> bytes:
    document = docx.Document()
    document.add_paragraph("See the picture.")
    document.add_picture(io.BytesIO(PIXEL_PNG))
    return save_docx(document)


def make_docx_with_package() -> bytes:
    document = docx.Document()
    document.add_paragraph("See the workbook.")
    part = Part(
        PackURI("/word/embeddings/budget.xlsx"), XLSX, b"workbook bytes", document.part.package
    )
    document.part.relate_to(part, RT.PACKAGE)
    return save_docx(document)


def make_docx() -> bytes:
    document = docx.Document()
    document.core_properties.title = "Minutes"
    document.add_paragraph("First paragraph of the minutes.")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "left cell"
    table.rows[0].cells[1].text = "right cell"
    return save_docx(document)


def make_tar(entries: dict, mode: str = "w") -> bytes:
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode=mode) as archive:
        for name, data in entries.items():
            info = tarfile.TarInfo(name)
            info.size = len(data)
            archive.addfile(info, io.BytesIO(data))
    return buffer.getvalue()


# =============================================================================
# Tests
# =============================================================================


class TestText:
    def test_declared_encoding(self):
        sink = io.StringIO()
        meta = Metadata({CONTENT_ENCODING: "utf-16"})

        TextDecoder().decode(io.BytesIO("héllo".encode("utf-16")), sink, meta, DecodeContext())

        assert sink.getvalue() == "héllo\n"

    def test_latin1_fallback_reported(self):
        sink = io.StringIO()
        meta = Metadata()

        TextDecoder().decode(io.BytesIO("café".encode("latin-1")), sink, meta, DecodeContext())

        assert sink.getvalue() == "café\n"
        assert meta.get(CONTENT_ENCODING) == "latin-1"


class TestAutoDetect:
    def test_unknown_type_yields_no_text(self):
        sink = io.StringIO()
        meta = Metadata()

        AutoDetectDecoder().decode(io.BytesIO(b"\x00\x01\x02"), sink, meta, DecodeContext())

        assert sink.getvalue() == ""
        assert meta.get("Content-Type") == "application/octet-stream"

    def test_non_seekable_stream_buffered(self):
        class OneShot(io.RawIOBase):
            def __init__(self, data):
                self._data = io.BytesIO(data)

            def readable(self):
                return True

            def readinto(self, buffer):
                chunk = self._data.read(len(buffer))
                buffer[: len(chunk)] = chunk
                return len(chunk)

        sink = io.StringIO()
        meta = Metadata({"resourceName": "a.txt"})

        AutoDetectDecoder().decode(OneShot(b"streamed text"), sink, meta, DecodeContext())

        assert sink.getvalue() == "streamed text\n"


class TestPdf:
    def test_merge_attachments(self):
        doc = Document.from_bytes("report.pdf", make_pdf({"note.txt": b"attached text"}))

        result = extract_to_result(PdfExtractor(), doc)

        assert result.embedded_documents is None
        assert "attached text" in result.text
        assert doc.metadata.get("title") == "Quarterly Report"
        assert doc.metadata.get(PAGE_COUNT) == "1"

    def test_split_attachments(self):
        doc = Document.from_bytes("report.pdf", make_pdf({"note.txt": b"attached text"}))

        result = extract_to_result(PdfExtractor(split_embedded=True), doc)

        assert "attached text" not in result.text
        (child,) = result.embedded_documents
        assert child.reference == "report.pdf!note.txt"
        assert child.metadata.embedded_type == "file-file"
        assert child.content.read() == b"attached text"


class TestDocx:
    def test_text_tables_and_properties(self):
        doc = Document.from_bytes("minutes.docx", make_docx())
        doc.detect_content_type()

        result = extract_to_result(GenericExtractor(), doc)

        assert doc.content_type.endswith("wordprocessingml.document")
        assert "First paragraph of the minutes." in result.text
        assert "left cell\tright cell" in result.text
        assert doc.metadata.get("title") == "Minutes"

    def test_picture_reported_by_content_type(self):
        doc = Document.from_bytes("m.docx", make_docx_with_picture())
        doc.detect_content_type()

        result = extract_to_result(GenericExtractor(split_embedded=True), doc)

        named = [(d.reference, d.metadata.embedded_type) for d in result.embedded_documents]
        assert named == [("m.docx!embedded-1.png", "file-object")]
        assert result.embedded_documents[0].content_type == "image/png"
        assert result.embedded_documents[0].content.read() == PIXEL_PNG

    def test_package_reported_by_part_name(self):
        doc = Document.from_bytes("m.docx", make_docx_with_package())
        doc.detect_content_type()

        result = extract_to_result(GenericExtractor(split_embedded=True), doc)

        (child,) = result.embedded_documents
        assert child.reference == "m.docx!budget.xlsx"
        assert child.metadata.embedded_type == "file-file"
        assert child.content.read() == b"workbook bytes"

    def test_merge_keeps_paragraph_text(self):
        doc = Document.from_bytes("m.docx", make_docx_with_picture())
        doc.detect_content_type()

        result = extract_to_result(GenericExtractor(), doc)

        assert result.embedded_documents is None
        assert "See the picture." in result.text


class TestZip:
    def test_merged_entries_stay_word_separated(self):
        data = make_zip({"a.txt": b"alpha words", "b.txt": b"beta words"})
        doc = Document.from_bytes("pair.zip", data)

        result = extract_to_result(GenericExtractor(), doc)

        assert result.text.splitlines() == ["a.txt", "alpha words", "b.txt", "beta words"]

    def test_merged_html_entry_separated(self):
        data = make_zip({"p.html": b"<html><body><p>page end</p></body></html>", "q.txt": b"next"})
        doc = Document.from_bytes("pair.zip", data)

        result = extract_to_result(GenericExtractor(), doc)

        assert result.text.split() == ["p.html", "page", "end", "q.txt", "next"]


class TestTar:
    def test_split_tar_entries(self):
        doc = Document.from_bytes("bundle.tar", make_tar({"docs/a.txt": b"alpha", "b.txt": b"beta"}))

        result = extract_to_result(GenericExtractor(split_embedded=True), doc)

        assert [d.reference for d in result.embedded_documents] == [
            "bundle.tar!docs/a.txt",
            "bundle.tar!b.txt",
        ]
        assert [d.content.read() for d in result.embedded_documents] == [b"alpha", b"beta"]

    def test_merge_compressed_tar(self):
        doc = Document.from_bytes("bundle.tar.gz", make_tar({"a.txt": b"alpha words"}, mode="w:gz"))

        result = extract_to_result(GenericExtractor(), doc)

        assert "alpha words" in result.text

    def test_plain_gzip_is_one_entry(self):
        doc = Document.from_bytes("notes.txt.gz", gzip.compress(b"gzipped notes"))

        result = extract_to_result(GenericExtractor(split_embedded=True), doc)

        (child,) = result.embedded_documents
        assert child.reference == "notes.txt.gz!notes.txt"
        assert child.content.read() == b"gzipped notes"
