# docextract/extraction/plugins/__init__.py
"""
Built-in extractors.
"""

from docextract.extraction.plugins.generic import GenericExtractor
from docextract.extraction.plugins.html import HtmlExtractor
from docextract.extraction.plugins.passthrough import PassThroughExtractor
from docextract.extraction.plugins.pdf import PdfExtractor
from docextract.extraction.plugins.wordperfect import WordPerfectExtractor

__all__ = [
    "GenericExtractor",
    "HtmlExtractor",
    "PassThroughExtractor",
    "PdfExtractor",
    "WordPerfectExtractor",
]
