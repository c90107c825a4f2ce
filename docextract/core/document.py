# docextract/core/document.py
"""
Core document types for the extraction pipeline.

A Document is what flows through the pipeline: a content stream plus a
reference, a content type, an encoding and Metadata. Extractors turn one
Document into text and, in split mode, into more Documents.

Flow: Document → Registry.select() → Extractor.extract() → ExtractionResult
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, List, Optional

from docextract.core import content_type as ct
from docextract.core.metadata import DOC_CONTENT_ENCODING, DOC_CONTENT_TYPE, Metadata

REFERENCE_SEPARATOR = "!"


@dataclass
class Document:
    """
    A document to extract.

    Embedded documents carry a hierarchical reference: the parent reference,
    a "!" and the embedded item name (e.g. "archive.zip!docs/a.pdf").
    """

    reference: str
    content: BinaryIO
    content_type: Optional[str] = None
    content_encoding: Optional[str] = None
    metadata: Metadata = field(default_factory=Metadata)

    def __post_init__(self) -> None:
        self.content_type = ct.normalize(self.content_type)
        if self.metadata.reference is None:
            self.metadata.reference = self.reference
        if self.content_type:
            self.metadata.set(DOC_CONTENT_TYPE, self.content_type)
        if self.content_encoding:
            self.metadata.set(DOC_CONTENT_ENCODING, self.content_encoding)

    @classmethod
    def from_bytes(
        cls,
        reference: str,
        data: bytes,
        content_type: Optional[str] = None,
        content_encoding: Optional[str] = None,
        metadata: Optional[Metadata] = None,
    ) -> "Document":
        return cls(
            reference=reference,
            content=io.BytesIO(data),
            content_type=content_type,
            content_encoding=content_encoding,
            metadata=metadata if metadata is not None else Metadata(),
        )

    @classmethod
    def from_path(cls, path: Path, content_type: Optional[str] = None) -> "Document":
        """Open a file as a top-level document referenced by its path."""
        path = Path(path)
        return cls(
            reference=str(path),
            content=path.open("rb"),
            content_type=content_type,
        )

    @property
    def leaf_name(self) -> str:
        """Last segment of the reference."""
        return self.reference.rsplit(REFERENCE_SEPARATOR, 1)[-1]

    @property
    def is_embedded(self) -> bool:
        return self.metadata.embedded_parent_reference is not None

    def set_content_type(self, value: Optional[str]) -> None:
        self.content_type = ct.normalize(value)
        self.metadata.set(DOC_CONTENT_TYPE, self.content_type)

    def detect_content_type(self) -> str:
        """Detect (and remember) the content type when none was declared."""
        if not self.content_type:
            self.set_content_type(ct.detect_stream(self.content, self.leaf_name))
        return self.content_type

    def close(self) -> None:
        self.content.close()

    def __repr__(self) -> str:
        return f"Document({self.reference!r}, {self.content_type!r})"


@dataclass
class ExtractionResult:
    """
    Result of one top-level extraction call.

    ``embedded_documents`` is None in merge mode (everything was folded into
    the primary document) and a list in split mode, possibly empty.
    """

    text: str
    embedded_documents: Optional[List[Document]] = None

    @property
    def embedded_count(self) -> int:
        return len(self.embedded_documents or [])


__all__ = ["Document", "ExtractionResult", "REFERENCE_SEPARATOR"]
