# docextract/engine/decoders/wordperfect.py
"""
WordPerfect decoder.

Lets the engine decode WordPerfect files found inside containers, using the
same line scanner as the standalone WordPerfect extractor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, TextIO

from docextract.core.metadata import Metadata
from docextract.engine.base import DecodeContext


@dataclass
class WordPerfectDecoder:
    """Decoder for the WordPerfect content types."""

    def decode(
        self,
        stream: BinaryIO,
        sink: TextIO,
        metadata: Metadata,
        context: DecodeContext,
    ) -> None:
        # Imported lazily: the extraction package imports the engine
        from docextract.extraction.plugins.wordperfect import extract_text

        text = extract_text(stream).strip()
        if text:
            sink.write(text)
            sink.write("\n")


__all__ = ["WordPerfectDecoder"]
