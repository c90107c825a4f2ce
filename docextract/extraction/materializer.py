# docextract/extraction/materializer.py
"""
Embedded-document materializer.

The materializer is the resolver injected into the decoding engine for one
top-level extraction call. The engine hands it the primary document first,
then every embedded item it meets, recursively. What happens to embedded
items depends on the mode chosen for the call:

- MERGE: decode the item into the same output, fold its metadata into the
  parent document. No embedded documents are produced.
- SPLIT: copy the item's bytes into a cached stream and wrap it in a new
  Document named after the parent ("parent!name") with lineage metadata.
  The item is not decoded here; it can be submitted to the pipeline later.

All state (embed counter, collected documents) belongs to one call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import BinaryIO, List, Optional, TextIO

from docextract.core import content_type as ct
from docextract.core.document import REFERENCE_SEPARATOR, Document
from docextract.core.metadata import Metadata
from docextract.core.streams import CachedStreamFactory
from docextract.engine.base import CONTENT_TYPE, RESOURCE_NAME, DecodeContext, Decoder
from docextract.extraction.naming import name_embedded_item
from docextract.logging.logger import get_logger
from docextract.logging.tags import EXTRACT

logger = get_logger(__name__)

# Engine field never copied into document metadata
ENGINE_ONLY_FIELDS = (RESOURCE_NAME,)


class EmbeddedMode(str, Enum):
    MERGE = "merge"
    SPLIT = "split"

    @classmethod
    def from_flag(cls, split_embedded: bool) -> "EmbeddedMode":
        return cls.SPLIT if split_embedded else cls.MERGE


def merge_engine_metadata(engine_metadata: Metadata, metadata: Metadata) -> None:
    """Fold engine-reported fields into document metadata, without duplicates."""
    metadata.merge_from(engine_metadata, skip=ENGINE_ONLY_FIELDS)


@dataclass
class EmbeddedMaterializer:
    """
    Resolver for one extraction call.

    Args:
        mode: Merge or split, fixed for the whole call.
        document: The document being extracted (the parent of every item).
        output: Text sink of the primary document.
        decoder: Decodes the primary document.
        embedded_decoder: Decodes embedded items in merge mode.
        stream_factory: Caches embedded content in split mode.
    """

    mode: EmbeddedMode
    document: Document
    output: TextIO
    decoder: Decoder
    embedded_decoder: Decoder
    stream_factory: CachedStreamFactory = field(default_factory=CachedStreamFactory)
    embed_count: int = field(default=0, init=False)
    embedded_documents: Optional[List[Document]] = field(default=None, init=False)
    _primary_done: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.mode is EmbeddedMode.SPLIT:
            self.embedded_documents = []

    def discard(self) -> None:
        """Close the documents split so far; used when the call fails."""
        for document in self.embedded_documents or []:
            document.close()
        if self.embedded_documents is not None:
            self.embedded_documents = []

    def decode(
        self,
        stream: BinaryIO,
        sink: TextIO,
        metadata: Metadata,
        context: DecodeContext,
    ) -> None:
        """Engine entry point: primary document first, embedded items after."""
        if not self._primary_done:
            self._primary_done = True
            self.decoder.decode(stream, self.output, metadata, context)
            return

        self.embed_count += 1
        if self.mode is EmbeddedMode.MERGE:
            self._merge(stream, metadata, context)
        else:
            self._split(stream, metadata)

    # -------------------------------------------------------------------------
    # Strategies
    # -------------------------------------------------------------------------

    def _merge(self, stream: BinaryIO, metadata: Metadata, context: DecodeContext) -> None:
        self.embedded_decoder.decode(stream, self.output, metadata, context)
        merge_engine_metadata(metadata, self.document.metadata)

    def _split(self, stream: BinaryIO, metadata: Metadata) -> None:
        reference = self.document.reference
        embed_meta = Metadata()
        resolved = name_embedded_item(metadata, embed_meta, self.embed_count)
        embed_ref = f"{reference}{REFERENCE_SEPARATOR}{resolved.name}"

        # The engine may close the stream once this call returns
        cached = self.stream_factory.copy_to_cache(stream)

        embed_meta.reference = embed_ref
        embed_meta.embedded_parent_reference = reference
        root_ref = self.document.metadata.embedded_parent_root_reference or reference
        embed_meta.embedded_parent_root_reference = root_ref

        embedded = Document(
            reference=embed_ref,
            content=cached,
            content_type=ct.normalize(metadata.get(CONTENT_TYPE)),
            metadata=embed_meta,
        )
        self.embedded_documents.append(embedded)
        logger.debug(f"{EXTRACT} Split {embed_ref!r} ({resolved.type.value})")


__all__ = ["EmbeddedMode", "EmbeddedMaterializer", "merge_engine_metadata"]
