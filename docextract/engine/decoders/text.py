# docextract/engine/decoders/text.py
"""
Plain text decoder.

Tries the declared encoding first, then UTF-8, then Latin-1 (which never
fails). The encoding actually used is reported as Content-Encoding.
Non-empty output always ends with a line terminator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, List, Optional, TextIO, Tuple

from docextract.core.metadata import Metadata
from docextract.engine.base import CONTENT_ENCODING, DecodeContext


@dataclass
class TextDecoder:
    """Decoder for text/* content."""

    fallback_encodings: Tuple[str, ...] = ("utf-8", "latin-1")

    def decode(
        self,
        stream: BinaryIO,
        sink: TextIO,
        metadata: Metadata,
        context: DecodeContext,
    ) -> None:
        data = stream.read()
        text, encoding = self._decode_bytes(data, metadata.get(CONTENT_ENCODING))
        metadata.set(CONTENT_ENCODING, encoding)
        if text:
            sink.write(text)
            if not text.endswith("\n"):
                sink.write("\n")

    def _decode_bytes(self, data: bytes, declared: Optional[str]) -> Tuple[str, str]:
        candidates: List[str] = []
        if declared:
            candidates.append(declared)
        candidates.extend(e for e in self.fallback_encodings if e not in candidates)

        last_error: Optional[Exception] = None
        for encoding in candidates:
            try:
                return data.decode(encoding), encoding
            except (LookupError, UnicodeDecodeError) as e:
                last_error = e
        raise UnicodeError(f"Cannot decode text content: {last_error}")


__all__ = ["TextDecoder"]
