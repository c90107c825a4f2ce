# docextract/engine/base.py
"""
Decoder protocol for format-aware decoding.

Decoders turn a binary stream into text written to a sink, and report what
they learn about the stream as engine Metadata. Container formats (archives,
PDF attachments, objects embedded in office documents) report each embedded
item through DecodeContext.decode_embedded(), one synchronous call per item,
in document order.

Flow: stream → Decoder.decode() → text sink + Metadata
                      │
                      └─ embedded item → DecodeContext.embedded_decoder
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Optional, Protocol, TextIO, runtime_checkable

from docextract.core.metadata import Metadata
from docextract.logging.logger import get_logger
from docextract.logging.tags import ENGINE

logger = get_logger(__name__)

# =============================================================================
# Engine Metadata Keys
# =============================================================================

CONTENT_TYPE = "Content-Type"
CONTENT_ENCODING = "Content-Encoding"
RESOURCE_NAME = "resourceName"
EMBEDDED_RELATIONSHIP_ID = "embeddedRelationshipId"


@runtime_checkable
class Decoder(Protocol):
    """
    Protocol for format decoders.

    Implementations:
    - AutoDetectDecoder: detects the format and routes to a format decoder
    - TextDecoder, HtmlDecoder, PdfDecoder, ZipDecoder, TarDecoder, DocxDecoder
    """

    def decode(
        self,
        stream: BinaryIO,
        sink: TextIO,
        metadata: Metadata,
        context: "DecodeContext",
    ) -> None:
        """
        Decode a stream.

        Args:
            stream: Binary content. Only valid for the duration of the call.
            sink: Text output.
            metadata: Engine metadata; declared hints in, discovered fields out.
            context: Carries the resolver for embedded items.
        """
        ...


@dataclass
class DecodeContext:
    """
    Per-call decoding context.

    ``embedded_decoder`` is the resolver every embedded item is handed to.
    When unset, embedded items are skipped.
    """

    embedded_decoder: Optional[Decoder] = None

    def decode_embedded(self, stream: BinaryIO, sink: TextIO, metadata: Metadata) -> None:
        """Route one embedded item through the resolver."""
        if self.embedded_decoder is None:
            logger.debug(
                f"{ENGINE} No embedded resolver, skipping "
                f"{metadata.get(RESOURCE_NAME) or metadata.get(CONTENT_TYPE)!r}"
            )
            return
        self.embedded_decoder.decode(stream, sink, metadata, self)


__all__ = [
    "Decoder",
    "DecodeContext",
    "CONTENT_TYPE",
    "CONTENT_ENCODING",
    "RESOURCE_NAME",
    "EMBEDDED_RELATIONSHIP_ID",
]
