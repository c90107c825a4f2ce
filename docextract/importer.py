# docextract/importer.py
"""
DocumentImporter - extracts a document and everything embedded in it.

Each document is dispatched through the ExtractorRegistry. In split mode
the embedded documents an extraction produces are submitted again, depth
first, so every node of the container tree comes out as its own
ImportedDocument. In merge mode there is a single node.

Usage:
    importer = DocumentImporter(ExtractorRegistry(split_embedded=True))
    for imported in importer.import_document(Document.from_path(path)):
        print(imported.document.reference, len(imported.text))
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from docextract.core.document import Document
from docextract.extraction.registry import ExtractorRegistry
from docextract.logging.logger import get_logger
from docextract.logging.tags import IMPORT

logger = get_logger(__name__)


@dataclass
class ImportedDocument:
    """One extracted node of a document tree."""

    document: Document
    text: str
    extractor: Optional[str] = None  # plugin name, None when skipped
    depth: int = 0  # 0 for the submitted document, 1 for its children, ...
    embedded_references: List[str] = field(default_factory=list)

    @property
    def skipped(self) -> bool:
        return self.extractor is None


@dataclass
class DocumentImporter:
    registry: ExtractorRegistry = field(default_factory=ExtractorRegistry)

    def import_document(self, document: Document) -> Iterator[ImportedDocument]:
        """
        Extract a document, then its embedded documents, depth first.

        Embedded documents that are never yielded (extraction failed or the
        iteration stopped early) are closed. The submitted document is left
        open for the caller.

        Raises:
            ExtractionError: On the first node that fails to extract.
        """
        pending: List[Tuple[Document, int]] = [(document, 0)]
        try:
            while pending:
                current, depth = pending.pop()
                try:
                    imported, children = self._import_one(current, depth)
                except Exception:
                    if current is not document:
                        current.close()
                    raise
                yield imported
                # reversed so that children come out in document order
                pending.extend((child, depth + 1) for child in reversed(children))
        finally:
            for remaining, _ in pending:
                remaining.close()

    def _import_one(
        self, document: Document, depth: int
    ) -> Tuple[ImportedDocument, List[Document]]:
        content_type = document.detect_content_type()
        extractor = self.registry.select(document.reference, content_type)
        if extractor is None:
            logger.info(f"{IMPORT} Skipped {document.reference!r} ({content_type})")
            return ImportedDocument(document=document, text="", depth=depth), []

        output = io.StringIO()
        children = extractor.extract(document, output) or []
        logger.info(
            f"{IMPORT} {document.reference!r} -> {extractor.plugin_name} "
            f"({content_type}, {len(children)} embedded)"
        )
        imported = ImportedDocument(
            document=document,
            text=output.getvalue(),
            extractor=extractor.plugin_name,
            depth=depth,
            embedded_references=[child.reference for child in children],
        )
        return imported, children


__all__ = ["DocumentImporter", "ImportedDocument"]
