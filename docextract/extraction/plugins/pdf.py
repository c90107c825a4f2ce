# docextract/extraction/plugins/pdf.py
"""
PDF extractor.

File attachments are embedded items: merged into the PDF text, or split
into their own documents named "<pdf reference>!<attachment name>".
"""

from __future__ import annotations

from dataclasses import dataclass, field

from docextract.engine.base import Decoder
from docextract.engine.decoders.pdf import PdfDecoder
from docextract.extraction.driver import EngineExtractor


@dataclass
class PdfExtractor(EngineExtractor):
    plugin_name: str = field(default="pdf", repr=False)
    decoder: Decoder = field(default_factory=PdfDecoder)


__all__ = ["PdfExtractor"]
