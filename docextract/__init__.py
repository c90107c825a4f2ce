"""
docextract - Text and metadata extraction with recursive container support.

Documents in heterogeneous formats (PDF, HTML, office files, archives,
WordPerfect) are turned into plain text plus multi-valued metadata. Items
embedded in a document (archive entries, attachments, embedded objects) are
either merged into the parent or split into documents of their own that
carry parent/root lineage.

Quick Start:
    >>> from docextract import Document, ExtractorRegistry, extract_to_result
    >>> registry = ExtractorRegistry(split_embedded=True)
    >>> doc = Document.from_path("bundle.zip")
    >>> result = extract_to_result(registry.select(doc.reference, doc.detect_content_type()), doc)
    >>> [child.reference for child in result.embedded_documents]
    ['bundle.zip!a.pdf', 'bundle.zip!notes.txt']

Architecture:
    docextract/
    ├── core/         # Document, Metadata, content types, cached streams
    ├── engine/       # Format decoders + auto-detection
    ├── extraction/   # Extractors, merge/split materializer, registry
    ├── config/       # YAML config with pydantic validation
    ├── importer.py   # Recursive resubmission of embedded documents
    └── cli/          # docextract command
"""

from docextract.core import (
    CachedStreamFactory,
    Document,
    ExtractionError,
    ExtractionResult,
    Metadata,
    RegistryError,
)
from docextract.extraction import (
    EmbeddedMode,
    EmbeddedType,
    EngineExtractor,
    ExtractorRegistry,
    extract_to_result,
)
from docextract.importer import DocumentImporter, ImportedDocument

__version__ = "0.1.0"

__all__ = [
    "CachedStreamFactory",
    "Document",
    "DocumentImporter",
    "EmbeddedMode",
    "EmbeddedType",
    "EngineExtractor",
    "ExtractionError",
    "ExtractionResult",
    "ExtractorRegistry",
    "ImportedDocument",
    "Metadata",
    "RegistryError",
    "extract_to_result",
]
