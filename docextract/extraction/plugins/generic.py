# docextract/extraction/plugins/generic.py
"""
Generic extractor: any format the decoding engine can detect.

This is the registry's default fallback. Content types the engine has no
decoder for yield no text rather than an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from docextract.engine.autodetect import AutoDetectDecoder
from docextract.engine.base import Decoder
from docextract.extraction.driver import EngineExtractor


@dataclass
class GenericExtractor(EngineExtractor):
    plugin_name: str = field(default="generic", repr=False)
    decoder: Decoder = field(default_factory=AutoDetectDecoder)


__all__ = ["GenericExtractor"]
