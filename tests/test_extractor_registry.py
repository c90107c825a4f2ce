# tests/test_extractor_registry.py
"""
Tests for ExtractorRegistry.

Verifies:
1. Default extractors are registered for their content types
2. Ignored content types (full match) select no extractor
3. Unknown content types go to the fallback
4. The split/merge mode reaches every splittable extractor
5. Invalid registrations raise RegistryError
"""

from dataclasses import dataclass

import pytest

from docextract.config.schema import ExtractionConfig
from docextract.core.exceptions import RegistryError
from docextract.extraction.plugins import (
    GenericExtractor,
    HtmlExtractor,
    PassThroughExtractor,
    PdfExtractor,
    WordPerfectExtractor,
)
from docextract.extraction.registry import ExtractorRegistry

pytestmark = pytest.mark.tier1


@dataclass
class MockSplittableExtractor:
    plugin_name: str = "mock"
    split_embedded: bool = False

    def extract(self, document, output):
        return [] if self.split_embedded else None


@dataclass
class MockPlainExtractor:
    plugin_name: str = "plain"

    def extract(self, document, output):
        return None


class TestDefaults:
    def test_default_extractors(self):
        registry = ExtractorRegistry()

        assert isinstance(registry.select("a.html", "text/html"), HtmlExtractor)
        assert isinstance(registry.select("a.pdf", "application/pdf"), PdfExtractor)
        assert isinstance(registry.fallback, GenericExtractor)

    def test_pdf_types_share_one_instance(self):
        registry = ExtractorRegistry()
        assert registry.select("a", "application/pdf") is registry.select("a", "application/x-pdf")

    @pytest.mark.parametrize(
        "content_type",
        [
            "application/wordperfect",
            "application/vnd.wordperfect",
            "application/wordperfect6.0",
            "application/wordperfect6.1",
        ],
    )
    def test_wordperfect_types(self, content_type):
        registry = ExtractorRegistry()
        assert isinstance(registry.select("a.wpd", content_type), WordPerfectExtractor)

    def test_selection_normalizes_content_type(self):
        registry = ExtractorRegistry()
        assert isinstance(registry.select("a", "Text/HTML; charset=utf-8"), HtmlExtractor)

    def test_no_defaults_falls_back_to_passthrough(self):
        registry = ExtractorRegistry(load_defaults=False)

        assert registry.registered_types == []
        assert isinstance(registry.select("a.html", "text/html"), PassThroughExtractor)

    def test_from_config(self):
        config = ExtractionConfig(
            split_embedded=True, ignored_content_types="image/.*", max_memory_size=1024
        )

        registry = ExtractorRegistry.from_config(config)

        assert registry.split_embedded is True
        assert registry.fallback.split_embedded is True
        assert registry.select("a.png", "image/png") is None
        assert registry.stream_factory.max_memory_size == 1024


class TestSelection:
    def test_unknown_type_uses_fallback(self):
        registry = ExtractorRegistry()
        assert registry.select("a.xyz", "application/x-unknown") is registry.fallback

    def test_missing_type_uses_fallback(self):
        registry = ExtractorRegistry()
        assert registry.select("a", None) is registry.fallback

    def test_ignore_pattern_is_full_match(self):
        registry = ExtractorRegistry(ignored_content_types="image/.*|audio/mpeg")

        assert registry.select("a.png", "image/png") is None
        assert registry.select("a.mp3", "audio/mpeg") is None
        # partial matches do not count
        assert registry.select("a.mp3", "audio/mpeg3") is not None
        assert registry.select("a.svg", "application/image/svg") is not None

    def test_ignore_wins_over_registration(self):
        registry = ExtractorRegistry(ignored_content_types="text/html")
        assert registry.select("a.html", "text/html") is None

    def test_blank_ignore_pattern_disables_ignoring(self):
        registry = ExtractorRegistry(ignored_content_types="  ")
        assert registry.ignored_content_types is None
        assert not registry.is_ignored("image/png")

    def test_invalid_ignore_pattern(self):
        with pytest.raises(RegistryError, match="Invalid ignored content types"):
            ExtractorRegistry(ignored_content_types="image/(")


class TestSplitMode:
    def test_mode_applied_on_register(self):
        registry = ExtractorRegistry(split_embedded=True, load_defaults=False)
        extractor = MockSplittableExtractor()

        registry.register("application/x-mock", extractor)

        assert extractor.split_embedded is True

    def test_mode_change_reaches_all_extractors(self):
        registry = ExtractorRegistry()
        mock = MockSplittableExtractor()
        registry.register("application/x-mock", mock)

        registry.split_embedded = True

        assert mock.split_embedded is True
        assert registry.fallback.split_embedded is True
        assert registry.select("a", "text/html").split_embedded is True

    def test_apply_is_idempotent(self):
        registry = ExtractorRegistry(split_embedded=True)
        registry.apply_split_mode()
        registry.apply_split_mode()

        assert registry.fallback.split_embedded is True
        assert registry.select("a", "application/pdf").split_embedded is True

    def test_non_splittable_extractors_untouched(self):
        registry = ExtractorRegistry(split_embedded=True, load_defaults=False)
        plain = MockPlainExtractor()

        registry.register("application/x-plain", plain)

        assert not hasattr(plain, "split_embedded")


class TestRegistrationErrors:
    def test_null_extractor(self):
        registry = ExtractorRegistry()
        with pytest.raises(RegistryError):
            registry.register("text/plain", None)

    def test_null_fallback(self):
        registry = ExtractorRegistry()
        with pytest.raises(RegistryError):
            registry.register_fallback(None)

    def test_empty_content_type(self):
        registry = ExtractorRegistry()
        with pytest.raises(RegistryError):
            registry.register("  ", MockPlainExtractor())

    def test_register_replaces(self):
        registry = ExtractorRegistry()
        mock = MockPlainExtractor()

        registry.register("text/html", mock)

        assert registry.select("a.html", "text/html") is mock
