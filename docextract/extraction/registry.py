# docextract/extraction/registry.py
"""
ExtractorRegistry - Maps content types to extractors.

Architecture:
    ┌─────────────────────────────────────┐
    │          ExtractorRegistry          │
    │   ignore pattern → exact type →     │
    │           fallback                  │
    └─────────────────────────────────────┘
                    │
       ┌────────────┼────────────┬──────────────┐
       ▼            ▼            ▼              ▼
  HtmlExtractor PdfExtractor WordPerfect   GenericExtractor
   (text/html)  (app/pdf)    Extractor       (fallback)

The split/merge mode is applied to every extractor that supports it when
the extractor is registered and whenever the mode changes.

Usage:
    registry = ExtractorRegistry.from_config(config)
    extractor = registry.select(document.reference, document.content_type)
    if extractor is None:
        ...  # ignored content type, pass the document through
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Pattern

from docextract.config.schema import ExtractionConfig
from docextract.core import content_type as ct
from docextract.core.exceptions import RegistryError
from docextract.core.streams import CachedStreamFactory
from docextract.extraction.base import Extractor, SplittableExtractor
from docextract.extraction.plugins import (
    GenericExtractor,
    HtmlExtractor,
    PassThroughExtractor,
    PdfExtractor,
    WordPerfectExtractor,
)
from docextract.logging.logger import get_logger
from docextract.logging.tags import REGISTRY

logger = get_logger(__name__)


class ExtractorRegistry:
    """
    Selects the extractor for a content type.

    Priority order:
    1. Ignored content type (regex, full match) -> None, skip extraction
    2. Extractor registered for the exact content type
    3. Fallback extractor
    """

    def __init__(
        self,
        split_embedded: bool = False,
        ignored_content_types: Optional[str] = None,
        stream_factory: Optional[CachedStreamFactory] = None,
        load_defaults: bool = True,
    ) -> None:
        """
        Args:
            split_embedded: Split embedded documents instead of merging them.
            ignored_content_types: Regex of content types not to extract.
            stream_factory: Buffers embedded content of default extractors.
            load_defaults: Register the built-in extractors. Without them
                the fallback passes documents through untouched.
        """
        self._extractors: Dict[str, Extractor] = {}
        self._fallback: Extractor = PassThroughExtractor()
        self._split_embedded = split_embedded
        self._ignored_pattern: Optional[Pattern[str]] = None
        self._ignored_content_types: Optional[str] = None
        self.stream_factory = stream_factory or CachedStreamFactory()

        self.ignored_content_types = ignored_content_types
        if load_defaults:
            self._register_defaults()

    @classmethod
    def from_config(cls, config: ExtractionConfig) -> "ExtractorRegistry":
        return cls(
            split_embedded=config.split_embedded,
            ignored_content_types=config.ignored_content_types,
            stream_factory=CachedStreamFactory(max_memory_size=config.max_memory_size),
        )

    def _register_defaults(self) -> None:
        factory = self.stream_factory

        self.register(ct.TEXT_HTML, HtmlExtractor(stream_factory=factory))

        pdf = PdfExtractor(stream_factory=factory)
        self.register(ct.PDF, pdf)
        self.register(ct.PDF_LEGACY, pdf)

        wordperfect = WordPerfectExtractor()
        for wp_type in ct.WORDPERFECT_TYPES:
            self.register(wp_type, wordperfect)

        self.register_fallback(GenericExtractor(stream_factory=factory))

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def split_embedded(self) -> bool:
        return self._split_embedded

    @split_embedded.setter
    def split_embedded(self, value: bool) -> None:
        self._split_embedded = value
        self.apply_split_mode()

    @property
    def ignored_content_types(self) -> Optional[str]:
        return self._ignored_content_types

    @ignored_content_types.setter
    def ignored_content_types(self, pattern: Optional[str]) -> None:
        if pattern is None or not pattern.strip():
            self._ignored_content_types = None
            self._ignored_pattern = None
            return
        try:
            self._ignored_pattern = re.compile(pattern)
        except re.error as e:
            raise RegistryError(f"Invalid ignored content types pattern {pattern!r}: {e}") from e
        self._ignored_content_types = pattern

    def register(self, content_type: str, extractor: Extractor) -> None:
        """Register an extractor for an exact content type."""
        normalized = ct.normalize(content_type)
        if not normalized:
            raise RegistryError("Cannot register an extractor without a content type")
        if extractor is None:
            raise RegistryError(f"Cannot register a null extractor for {normalized!r}")

        self._extractors[normalized] = extractor
        self._apply_split_mode(extractor)
        logger.debug(f"{REGISTRY} Registered '{extractor.plugin_name}' for {normalized}")

    def register_fallback(self, extractor: Extractor) -> None:
        """Register the extractor used when no content type matches."""
        if extractor is None:
            raise RegistryError("The fallback extractor cannot be null")

        self._fallback = extractor
        self._apply_split_mode(extractor)
        logger.debug(f"{REGISTRY} Registered '{extractor.plugin_name}' as fallback")

    def apply_split_mode(self) -> None:
        """Push the current split/merge mode to every splittable extractor."""
        for extractor in self._all_extractors():
            self._apply_split_mode(extractor)

    def _apply_split_mode(self, extractor: Extractor) -> None:
        if isinstance(extractor, SplittableExtractor):
            extractor.split_embedded = self._split_embedded

    def _all_extractors(self) -> List[Extractor]:
        unique: Dict[int, Extractor] = {}
        for extractor in [*self._extractors.values(), self._fallback]:
            unique.setdefault(id(extractor), extractor)
        return list(unique.values())

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    def is_ignored(self, content_type: Optional[str]) -> bool:
        normalized = ct.normalize(content_type)
        if normalized is None or self._ignored_pattern is None:
            return False
        return self._ignored_pattern.fullmatch(normalized) is not None

    def select(self, reference: str, content_type: Optional[str]) -> Optional[Extractor]:
        """
        Get the extractor for a document.

        Args:
            reference: Document reference (only used for logging).
            content_type: Document content type.

        Returns:
            The extractor, or None when the content type is ignored.
        """
        if self.is_ignored(content_type):
            logger.debug(f"{REGISTRY} Ignoring {reference!r} ({content_type})")
            return None

        normalized = ct.normalize(content_type)
        extractor = self._extractors.get(normalized) if normalized else None
        if extractor is None:
            return self._fallback
        return extractor

    @property
    def fallback(self) -> Extractor:
        return self._fallback

    @property
    def registered_types(self) -> List[str]:
        return sorted(self._extractors.keys())

    def __repr__(self) -> str:
        types = ", ".join(self.registered_types[:5])
        if len(self.registered_types) > 5:
            types += f", ... ({len(self.registered_types)} total)"
        mode = "split" if self._split_embedded else "merge"
        return f"ExtractorRegistry(types=[{types}], fallback={self._fallback.plugin_name!r}, {mode})"


__all__ = ["ExtractorRegistry"]
