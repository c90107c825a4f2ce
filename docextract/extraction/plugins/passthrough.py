# docextract/extraction/plugins/passthrough.py
"""
Pass-through extractor.

Fallback of a registry built without the default extractors: documents go
through untouched, with no text and no embedded documents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TextIO

from docextract.core.document import Document


@dataclass
class PassThroughExtractor:
    plugin_name: str = field(default="passthrough", repr=False)

    def extract(self, document: Document, output: TextIO) -> None:
        return None


__all__ = ["PassThroughExtractor"]
