# docextract/engine/decoders/docx.py
"""
DOCX decoder using python-docx.

Writes paragraph text then table rows (cells separated by tabs) and reports
the core properties. Parts embedded in the main document are handed to the
embedded resolver:

- embedded packages and OLE objects, under their part file name
  (e.g. an Excel workbook inside a Word document)
- images, with only their content type (they have no meaningful name)
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import BinaryIO, TextIO

import docx

from docextract.core.metadata import Metadata
from docextract.engine.base import CONTENT_TYPE, RESOURCE_NAME, DecodeContext
from docextract.logging.logger import get_logger
from docextract.logging.tags import ENGINE

logger = get_logger(__name__)

_NAMED_PART_SUFFIXES = ("/package", "/oleObject")
_IMAGE_SUFFIX = "/image"

_CORE_FIELDS = ("title", "author", "subject", "keywords", "last_modified_by")


@dataclass
class DocxDecoder:
    """Decoder for Word 2007+ documents."""

    extract_images: bool = True

    def decode(
        self,
        stream: BinaryIO,
        sink: TextIO,
        metadata: Metadata,
        context: DecodeContext,
    ) -> None:
        document = docx.Document(stream)
        self._add_core_properties(document, metadata)

        for paragraph in document.paragraphs:
            if paragraph.text.strip():
                sink.write(paragraph.text)
                sink.write("\n")

        for table in document.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells]
                if any(cells):
                    sink.write("\t".join(cells))
                    sink.write("\n")

        self._decode_embedded_parts(document, sink, context)

    def _add_core_properties(self, document, metadata: Metadata) -> None:
        props = document.core_properties
        for name in _CORE_FIELDS:
            value = getattr(props, name, None)
            if value:
                metadata.add(name, str(value))

    def _decode_embedded_parts(self, document, sink: TextIO, context: DecodeContext) -> None:
        for rel in list(document.part.rels.values()):
            if rel.is_external:
                continue

            item_meta = Metadata()
            if rel.reltype.endswith(_NAMED_PART_SUFFIXES):
                item_meta.set(RESOURCE_NAME, rel.target_part.partname.filename)
            elif self.extract_images and rel.reltype.endswith(_IMAGE_SUFFIX):
                item_meta.set(CONTENT_TYPE, rel.target_part.content_type)
            else:
                continue

            logger.debug(f"{ENGINE} DOCX part {rel.target_part.partname}")
            with io.BytesIO(rel.target_part.blob) as item_stream:
                context.decode_embedded(item_stream, sink, item_meta)


__all__ = ["DocxDecoder"]
