# docextract/core/exceptions.py
"""
Core exceptions for document extraction.

ExtractionError is the single failure signal of an extraction call. Whatever
goes wrong underneath (malformed stream, unsupported encoding, I/O failure
while buffering an embedded item) surfaces as an ExtractionError carrying the
original cause.
"""

from __future__ import annotations

from typing import Optional


class DocExtractError(Exception):
    """Base exception for all docextract errors."""

    pass


class ExtractionError(DocExtractError):
    """
    Raised when a document cannot be extracted.

    No partial result accompanies this error: the whole top-level
    extraction call failed.

    Examples:
        >>> try:
        ...     extractor.extract(document, output)
        ... except ExtractionError as e:
        ...     print(f"{e.reference}: {e.cause!r}")
    """

    def __init__(
        self,
        message: str,
        reference: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.reference = reference
        self.cause = cause


class RegistryError(DocExtractError):
    """Raised when the extractor registry is configured incorrectly."""

    pass


__all__ = ["DocExtractError", "ExtractionError", "RegistryError"]
