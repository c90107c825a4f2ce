# docextract/engine/decoders/__init__.py
"""
Format decoders used by the auto-detecting engine.
"""

from docextract.engine.decoders.archive import TarDecoder, ZipDecoder
from docextract.engine.decoders.docx import DocxDecoder
from docextract.engine.decoders.html import HtmlDecoder
from docextract.engine.decoders.pdf import PdfDecoder
from docextract.engine.decoders.text import TextDecoder

__all__ = [
    "DocxDecoder",
    "HtmlDecoder",
    "PdfDecoder",
    "TarDecoder",
    "TextDecoder",
    "ZipDecoder",
]
