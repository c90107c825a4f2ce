# docextract/engine/autodetect.py
"""
AutoDetectDecoder - Routes a stream to a format decoder by content type.

Architecture:
    ┌─────────────────────────────────────┐
    │          AutoDetectDecoder          │
    │  declared or detected content type  │
    └─────────────────────────────────────┘
                    │
     ┌──────────┬───┴──────┬──────────┬──────────┐
     ▼          ▼          ▼          ▼          ▼
   Text       Html        Pdf      Zip/Tar     Docx ...

Content types without a decoder produce no text; they are not an error.

Usage:
    engine = AutoDetectDecoder()
    engine.decode(stream, sink, metadata, DecodeContext(embedded_decoder=engine))
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import BinaryIO, Dict, List, Optional, TextIO

from docextract.core import content_type as ct
from docextract.core.metadata import Metadata
from docextract.engine.base import CONTENT_TYPE, RESOURCE_NAME, DecodeContext, Decoder
from docextract.engine.decoders import (
    DocxDecoder,
    HtmlDecoder,
    PdfDecoder,
    TarDecoder,
    TextDecoder,
    ZipDecoder,
)
from docextract.engine.decoders.wordperfect import WordPerfectDecoder
from docextract.logging.logger import get_logger
from docextract.logging.tags import ENGINE

logger = get_logger(__name__)


def default_decoders() -> Dict[str, Decoder]:
    """Content type -> decoder for every format the engine understands."""
    html = HtmlDecoder()
    pdf = PdfDecoder()
    zip_decoder = ZipDecoder()
    tar = TarDecoder()
    wordperfect = WordPerfectDecoder()

    decoders: Dict[str, Decoder] = {
        ct.TEXT_PLAIN: TextDecoder(),
        ct.TEXT_HTML: html,
        ct.XHTML: html,
        ct.PDF: pdf,
        ct.PDF_LEGACY: pdf,
        ct.ZIP: zip_decoder,
        ct.JAR: zip_decoder,
        ct.TAR: tar,
        ct.GZIP: tar,
        ct.GZIP_LEGACY: tar,
        ct.DOCX: DocxDecoder(),
    }
    for wp_type in ct.WORDPERFECT_TYPES:
        decoders[wp_type] = wordperfect
    return decoders


@dataclass
class AutoDetectDecoder:
    """
    Decoder that picks a format decoder per stream.

    The content type comes from the Content-Type metadata when declared,
    otherwise it is detected and recorded in the metadata.
    """

    decoders: Dict[str, Decoder] = field(default_factory=default_decoders)
    text_fallback: Decoder = field(default_factory=TextDecoder)

    def decode(
        self,
        stream: BinaryIO,
        sink: TextIO,
        metadata: Metadata,
        context: DecodeContext,
    ) -> None:
        if not stream.seekable():
            stream = io.BytesIO(stream.read())

        content_type = ct.normalize(metadata.get(CONTENT_TYPE))
        if not content_type:
            content_type = ct.detect_stream(stream, metadata.get(RESOURCE_NAME))
            metadata.set(CONTENT_TYPE, content_type)

        decoder = self.decoder_for(content_type)
        if decoder is None:
            logger.debug(f"{ENGINE} No decoder for {content_type!r}, no text extracted")
            return

        logger.debug(f"{ENGINE} Decoding {content_type!r} with {type(decoder).__name__}")
        decoder.decode(stream, sink, metadata, context)

    def decoder_for(self, content_type: Optional[str]) -> Optional[Decoder]:
        content_type = ct.normalize(content_type)
        if not content_type:
            return None
        decoder = self.decoders.get(content_type)
        if decoder is None and content_type.startswith("text/"):
            return self.text_fallback
        return decoder

    @property
    def supported_types(self) -> List[str]:
        return sorted(self.decoders.keys())


__all__ = ["AutoDetectDecoder", "default_decoders"]
