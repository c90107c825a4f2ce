# docextract/extraction/__init__.py
"""
Extractors and the registry that selects them.

Extractors turn a Document into text and, in split mode, into embedded
Documents carrying parent/root lineage.
"""

from docextract.extraction.base import Extractor, SplittableExtractor, extract_to_result
from docextract.extraction.driver import EngineExtractor
from docextract.extraction.materializer import EmbeddedMaterializer, EmbeddedMode
from docextract.extraction.naming import EmbeddedType, resolve_name
from docextract.extraction.registry import ExtractorRegistry

__all__ = [
    "Extractor",
    "SplittableExtractor",
    "extract_to_result",
    "EngineExtractor",
    "EmbeddedMaterializer",
    "EmbeddedMode",
    "EmbeddedType",
    "resolve_name",
    "ExtractorRegistry",
]
