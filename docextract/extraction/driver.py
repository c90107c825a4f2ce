# docextract/extraction/driver.py
"""
EngineExtractor - one top-level extraction through the decoding engine.

Every embedded item the engine reports while decoding the document is
routed to an EmbeddedMaterializer injected as the engine's resolver, which
merges it into the document or splits it into its own Document.

Usage:
    extractor = EngineExtractor(split_embedded=True)
    embedded = extractor.extract(document, output)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, TextIO

from docextract.core.document import Document
from docextract.core.exceptions import ExtractionError
from docextract.core.metadata import Metadata
from docextract.core.streams import CachedStreamFactory
from docextract.engine.autodetect import AutoDetectDecoder
from docextract.engine.base import (
    CONTENT_ENCODING,
    CONTENT_TYPE,
    RESOURCE_NAME,
    DecodeContext,
    Decoder,
)
from docextract.extraction.materializer import (
    EmbeddedMaterializer,
    EmbeddedMode,
    merge_engine_metadata,
)
from docextract.logging.logger import get_logger
from docextract.logging.tags import EXTRACT

logger = get_logger(__name__)


@dataclass
class EngineExtractor:
    """
    Extractor backed by the decoding engine.

    ``decoder`` handles the top-level document. Embedded items decoded in
    merge mode always go through ``embedded_decoder`` (auto-detecting by
    default), whatever the format of their parent.
    """

    plugin_name: str = field(default="engine", repr=False)
    decoder: Decoder = field(default_factory=AutoDetectDecoder)
    embedded_decoder: Decoder = field(default_factory=AutoDetectDecoder, repr=False)
    split_embedded: bool = False
    stream_factory: CachedStreamFactory = field(default_factory=CachedStreamFactory, repr=False)

    def extract(self, document: Document, output: TextIO) -> Optional[List[Document]]:
        """
        Extract a document and, depending on the mode, its embedded items.

        Returns:
            Embedded documents in split mode (possibly empty), None in merge mode.

        Raises:
            ExtractionError: If decoding or buffering fails anywhere in the tree.
        """
        engine_meta = self._engine_metadata(document)
        materializer = EmbeddedMaterializer(
            mode=EmbeddedMode.from_flag(self.split_embedded),
            document=document,
            output=output,
            decoder=self.decoder,
            embedded_decoder=self.embedded_decoder,
            stream_factory=self.stream_factory,
        )
        context = DecodeContext(embedded_decoder=materializer)

        logger.debug(
            f"{EXTRACT} {self.plugin_name}: {document.reference!r} "
            f"({materializer.mode.value} mode)"
        )
        try:
            materializer.decode(document.content, output, engine_meta, context)
        except ExtractionError:
            materializer.discard()
            raise
        except Exception as e:
            materializer.discard()
            raise ExtractionError(
                f"Extractor '{self.plugin_name}' failed on {document.reference!r}: {e}",
                reference=document.reference,
                cause=e,
            ) from e

        merge_engine_metadata(engine_meta, document.metadata)
        if not document.content_type and engine_meta.get(CONTENT_TYPE):
            document.set_content_type(engine_meta.get(CONTENT_TYPE))

        if materializer.embedded_documents:
            logger.info(
                f"{EXTRACT} {document.reference!r}: "
                f"{len(materializer.embedded_documents)} embedded document(s)"
            )
        return materializer.embedded_documents

    @staticmethod
    def _engine_metadata(document: Document) -> Metadata:
        meta = Metadata()
        meta.set(CONTENT_TYPE, document.content_type)
        meta.set(RESOURCE_NAME, document.reference)
        meta.set(CONTENT_ENCODING, document.content_encoding)
        return meta


__all__ = ["EngineExtractor"]
