# docextract/engine/decoders/pdf.py
"""
PDF decoder using pypdf.

Writes the text of every page, reports the document information dictionary
and the page count, and hands each file attachment to the embedded resolver
under its attachment name.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import BinaryIO, TextIO

from pypdf import PdfReader

from docextract.core.metadata import Metadata
from docextract.engine.base import RESOURCE_NAME, DecodeContext
from docextract.logging.logger import get_logger
from docextract.logging.tags import ENGINE

logger = get_logger(__name__)

PAGE_COUNT = "page-count"

# pypdf DocumentInformation attribute -> metadata field
_INFO_FIELDS = {
    "title": "title",
    "author": "author",
    "subject": "subject",
    "creator": "creator",
    "producer": "producer",
}


@dataclass
class PdfDecoder:
    """Decoder for application/pdf."""

    extract_attachments: bool = True

    def decode(
        self,
        stream: BinaryIO,
        sink: TextIO,
        metadata: Metadata,
        context: DecodeContext,
    ) -> None:
        reader = PdfReader(stream)
        if reader.is_encrypted:
            # Most "encrypted" PDFs only carry an owner password
            reader.decrypt("")

        self._add_info(reader, metadata)
        metadata.set(PAGE_COUNT, str(len(reader.pages)))

        for page in reader.pages:
            text = page.extract_text() or ""
            if text.strip():
                sink.write(text.rstrip())
                sink.write("\n")

        if self.extract_attachments:
            self._decode_attachments(reader, sink, context)

    def _add_info(self, reader: PdfReader, metadata: Metadata) -> None:
        info = reader.metadata
        if info is None:
            return
        for attr, name in _INFO_FIELDS.items():
            value = getattr(info, attr, None)
            if value:
                metadata.add(name, str(value))

    def _decode_attachments(self, reader: PdfReader, sink: TextIO, context: DecodeContext) -> None:
        for name, contents in reader.attachments.items():
            for data in contents:
                logger.debug(f"{ENGINE} PDF attachment {name!r} ({len(data)} bytes)")
                item_meta = Metadata()
                item_meta.set(RESOURCE_NAME, name)
                with io.BytesIO(data) as item_stream:
                    context.decode_embedded(item_stream, sink, item_meta)


__all__ = ["PdfDecoder", "PAGE_COUNT"]
