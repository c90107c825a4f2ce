# docextract/core/content_type.py
"""
Content type helpers.

- normalize(): canonical form of a content-type string
- extension_for(): file extension for a content type (None when unknown)
- detect(): best-effort content type from a name hint and leading bytes
"""

from __future__ import annotations

import mimetypes
from pathlib import PurePosixPath
from typing import BinaryIO, Optional

# =============================================================================
# Well-known Types
# =============================================================================

TEXT_PLAIN = "text/plain"
TEXT_HTML = "text/html"
XHTML = "application/xhtml+xml"
PDF = "application/pdf"
PDF_LEGACY = "application/x-pdf"
ZIP = "application/zip"
JAR = "application/java-archive"
TAR = "application/x-tar"
GZIP = "application/gzip"
GZIP_LEGACY = "application/x-gzip"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
WORDPERFECT = "application/wordperfect"
WORDPERFECT_TYPES = (
    WORDPERFECT,
    "application/vnd.wordperfect",
    "application/wordperfect6.0",
    "application/wordperfect6.1",
)
OCTET_STREAM = "application/octet-stream"

# Types whose extension mimetypes does not know or gets wrong
_EXTENSIONS = {
    TEXT_PLAIN: "txt",
    TEXT_HTML: "html",
    XHTML: "xhtml",
    PDF: "pdf",
    PDF_LEGACY: "pdf",
    ZIP: "zip",
    JAR: "jar",
    TAR: "tar",
    GZIP: "gz",
    GZIP_LEGACY: "gz",
    DOCX: "docx",
    "application/msword": "doc",
    "application/vnd.ms-excel": "xls",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": "xlsx",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation": "pptx",
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/x-emf": "emf",
    "image/x-wmf": "wmf",
    OCTET_STREAM: "bin",
}
for _wp_type in WORDPERFECT_TYPES:
    _EXTENSIONS[_wp_type] = "wpd"

# Name suffixes checked before falling back to mimetypes
_SUFFIXES = {
    ".wpd": WORDPERFECT,
    ".wp": WORDPERFECT,
    ".wp5": WORDPERFECT,
    ".wp6": WORDPERFECT,
    ".docx": DOCX,
    ".tgz": GZIP,
}

MAGIC_LENGTH = 512


def normalize(content_type: Optional[str]) -> Optional[str]:
    """Lower-case a content type and strip its parameters."""
    if content_type is None:
        return None
    value = content_type.split(";", 1)[0].strip().lower()
    return value or None


def extension_for(content_type: Optional[str]) -> Optional[str]:
    """
    Get the usual file extension of a content type, without the dot.

    Returns:
        The extension, or None when the content type is unknown.
    """
    ct = normalize(content_type)
    if not ct:
        return None
    if ct in _EXTENSIONS:
        return _EXTENSIONS[ct]
    guessed = mimetypes.guess_extension(ct)
    if guessed:
        return guessed.lstrip(".")
    return None


def detect(name: Optional[str] = None, head: bytes = b"") -> str:
    """
    Detect a content type from a name hint and the first bytes of content.

    Magic bytes win over the name; the name wins over text sniffing.
    """
    if head.startswith(b"%PDF"):
        return PDF
    if head.startswith(b"\xffWPC"):
        return WORDPERFECT
    if head.startswith(b"\x1f\x8b"):
        return GZIP
    if len(head) > 262 and head[257:262] == b"ustar":
        return TAR

    by_name = _detect_by_name(name)

    if head.startswith(b"PK\x03\x04") or head.startswith(b"PK\x05\x06"):
        if by_name and by_name != OCTET_STREAM and by_name.startswith("application/"):
            # OOXML, ODF and JAR are all zip containers; trust the name
            return by_name
        return ZIP

    if by_name:
        return by_name

    lowered = head[:MAGIC_LENGTH].lstrip().lower()
    if lowered.startswith(b"<!doctype html") or lowered.startswith(b"<html"):
        return TEXT_HTML
    if _looks_like_text(head):
        return TEXT_PLAIN
    return OCTET_STREAM


def detect_stream(stream: BinaryIO, name: Optional[str] = None) -> str:
    """Detect the content type of a seekable stream without consuming it."""
    position = stream.tell()
    head = stream.read(MAGIC_LENGTH)
    stream.seek(position)
    return detect(name, head)


def _detect_by_name(name: Optional[str]) -> Optional[str]:
    if not name:
        return None
    leaf = PurePosixPath(name.replace("\\", "/").split("!")[-1]).name
    suffix = PurePosixPath(leaf).suffix.lower()
    if suffix in _SUFFIXES:
        return _SUFFIXES[suffix]
    guessed, _ = mimetypes.guess_type(leaf, strict=False)
    return guessed


def _looks_like_text(head: bytes) -> bool:
    if not head:
        return True
    if b"\x00" in head:
        return False
    try:
        head.decode("utf-8")
        return True
    except UnicodeDecodeError:
        # truncated multi-byte sequence at the end of the sample
        try:
            head[:-3].decode("utf-8")
            return True
        except UnicodeDecodeError:
            return False


__all__ = [
    "normalize",
    "extension_for",
    "detect",
    "detect_stream",
    "TEXT_PLAIN",
    "TEXT_HTML",
    "XHTML",
    "PDF",
    "PDF_LEGACY",
    "ZIP",
    "JAR",
    "TAR",
    "GZIP",
    "GZIP_LEGACY",
    "DOCX",
    "WORDPERFECT",
    "WORDPERFECT_TYPES",
    "OCTET_STREAM",
]
