# docextract/core/__init__.py
"""
Core types shared by the engine, the extractors and the importer.
"""

from docextract.core.document import REFERENCE_SEPARATOR, Document, ExtractionResult
from docextract.core.exceptions import DocExtractError, ExtractionError, RegistryError
from docextract.core.metadata import Metadata
from docextract.core.streams import CachedStreamFactory

__all__ = [
    "Document",
    "ExtractionResult",
    "REFERENCE_SEPARATOR",
    "Metadata",
    "CachedStreamFactory",
    "DocExtractError",
    "ExtractionError",
    "RegistryError",
]
