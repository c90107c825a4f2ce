# docextract/extraction/plugins/html.py
"""
HTML extractor.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from docextract.engine.base import Decoder
from docextract.engine.decoders.html import HtmlDecoder
from docextract.extraction.driver import EngineExtractor


@dataclass
class HtmlExtractor(EngineExtractor):
    plugin_name: str = field(default="html", repr=False)
    decoder: Decoder = field(default_factory=HtmlDecoder)


__all__ = ["HtmlExtractor"]
