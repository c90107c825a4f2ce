# docextract/engine/decoders/html.py
"""
HTML decoder using BeautifulSoup.

Scripts and styles are dropped; the remaining text is written one block per
line. The document title, when present, is reported as "title".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, TextIO

from bs4 import BeautifulSoup

from docextract.core.metadata import Metadata
from docextract.engine.base import CONTENT_ENCODING, DecodeContext

TITLE = "title"


@dataclass
class HtmlDecoder:
    """Decoder for text/html and application/xhtml+xml."""

    features: str = "html.parser"

    def decode(
        self,
        stream: BinaryIO,
        sink: TextIO,
        metadata: Metadata,
        context: DecodeContext,
    ) -> None:
        soup = BeautifulSoup(
            stream.read(),
            self.features,
            from_encoding=metadata.get(CONTENT_ENCODING),
        )
        if soup.original_encoding:
            metadata.set(CONTENT_ENCODING, soup.original_encoding)

        if soup.title and soup.title.string:
            metadata.add(TITLE, soup.title.string.strip())

        for tag in soup(["script", "style", "noscript"]):
            tag.decompose()

        body = soup.body or soup
        lines = (line.strip() for line in body.get_text("\n").splitlines())
        for line in lines:
            if line:
                sink.write(line)
                sink.write("\n")


__all__ = ["HtmlDecoder"]
