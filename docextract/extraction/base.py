# docextract/extraction/base.py
"""
Extractor protocols.

Each extractor must implement:
- plugin_name: str - The extractor identifier (e.g., "pdf", "wordperfect")
- extract(document, output) -> Optional[List[Document]]

Extractors able to split embedded items into their own documents also
expose a ``split_embedded`` flag; the registry keeps it in sync with its
own mode.

Flow: Document → Extractor.extract() → text in output + embedded Documents
"""

from __future__ import annotations

import io
from typing import List, Optional, Protocol, TextIO, runtime_checkable

from docextract.core.document import Document, ExtractionResult


@runtime_checkable
class Extractor(Protocol):
    """
    Protocol for document extractors.

    Example implementations:
    - GenericExtractor: any format the engine can detect
    - PdfExtractor, HtmlExtractor: engine bound to one format
    - WordPerfectExtractor: heuristic text recovery, no engine
    """

    plugin_name: str

    def extract(self, document: Document, output: TextIO) -> Optional[List[Document]]:
        """
        Extract a document.

        Args:
            document: Document to extract. Its metadata receives what the
                extraction learns about it.
            output: Text sink for the recovered text.

        Returns:
            The embedded documents in split mode, None otherwise.

        Raises:
            ExtractionError: If extraction fails. Nothing partial is returned.
        """
        ...


@runtime_checkable
class SplittableExtractor(Protocol):
    """Capability of extractors that can split embedded documents."""

    split_embedded: bool


def extract_to_result(extractor: Extractor, document: Document) -> ExtractionResult:
    """Run an extractor with an in-memory sink."""
    output = io.StringIO()
    embedded = extractor.extract(document, output)
    return ExtractionResult(text=output.getvalue(), embedded_documents=embedded)


__all__ = ["Extractor", "SplittableExtractor", "extract_to_result"]
