# docextract/engine/__init__.py
"""
Format-aware decoding engine.

Decoders turn binary streams into text and raw metadata, and report embedded
items through the resolver injected in the DecodeContext.
"""

from docextract.engine.autodetect import AutoDetectDecoder, default_decoders
from docextract.engine.base import (
    CONTENT_ENCODING,
    CONTENT_TYPE,
    EMBEDDED_RELATIONSHIP_ID,
    RESOURCE_NAME,
    DecodeContext,
    Decoder,
)

__all__ = [
    "AutoDetectDecoder",
    "default_decoders",
    "Decoder",
    "DecodeContext",
    "CONTENT_TYPE",
    "CONTENT_ENCODING",
    "RESOURCE_NAME",
    "EMBEDDED_RELATIONSHIP_ID",
]
