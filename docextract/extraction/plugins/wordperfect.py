# docextract/extraction/plugins/wordperfect.py
"""
WordPerfect extractor.

WordPerfect files are recovered heuristically: the byte stream is cut into
candidate lines at every non-text byte, and each line is kept or dropped
based on what it looks like. Only body text is produced; no metadata, no
embedded documents.

Line rules (thresholds are empirically tuned, keep them as they are):
- lines of 2 characters or fewer are dropped
- a line needs at least one "normal" word to be kept
- a line equal to a start marker ("doc init", "tech init") discards all
  text gathered so far; the body starts after it
- lines equal to, starting with, ending with or containing a known
  formatting label are dropped

A "normal" word (one trailing period or comma ignored) has at least 3
letters and nothing else, is all upper case, capitalized or all lower case,
and has no character making up half or more of its letters.

Note: the trailing line of a stream is only kept if a non-text byte ends it.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import BinaryIO, List, Optional, TextIO

from docextract.core.document import Document
from docextract.core.exceptions import ExtractionError
from docextract.logging.logger import get_logger
from docextract.logging.tags import EXTRACT

logger = get_logger(__name__)

END_OF_LINE = "\n"
READ_CHUNK_SIZE = 64 * 1024

# WordPerfect 5.1+ prefix: magic, then a little-endian pointer to the text
WPC_MAGIC = b"\xffWPC"
WPC_PREFIX_LENGTH = 16

EXACT_START_LINES = ("doc init", "tech init")

EXACT_EXCLUDES = (
    "nlus.", "usjp", "initialize technical style", "document style",
    "pleading", "times", "and", "where", "left", "right", "over",
    "(k over", "document", "header", "footer", "itemize", "page number",
    "pages", "body text", "word", "sjablone", "d printer",
)

START_EXCLUDES = (
    "wpc", "monotype sorts", "section", "columns", "aligned ",
    "standard", "default ", "biblio", "footnote", "gfootnote",
    "endnote", "heading", "header for ", "underlined heading",
    "centered heading", "technical", "object #", "microsoft word",
)

END_EXCLUDES = ("aligned paragraph numbers", "heading", "bullet list")

CONTAIN_EXCLUDES = ("left (", "right )", "right ]", "right par", "default paragraph")


def _byte_to_char(value: int) -> str:
    # Windows-1252 gives 0x91/0x92 their typographic quote meaning
    try:
        return bytes([value]).decode("cp1252")
    except UnicodeDecodeError:
        return chr(value)


_CHARS = tuple(_byte_to_char(b) for b in range(256))


# =============================================================================
# Classification
# =============================================================================


def is_text_byte(value: int) -> bool:
    """Whether a byte is readable text."""
    return (
        32 <= value <= 126  # printable ASCII
        or 128 <= value <= 168  # accented letters, currency symbols
        or value == 0x09  # tab
        or 0xC0 <= value <= 0xFF  # accented ANSI
        or value == 0x91  # backquote
        or value == 0x92  # quote
    )


def _has_admissible_case(letters: str) -> bool:
    if letters[0].isupper():
        rest = letters[1:]
        return all(c.isupper() for c in rest) or not any(c.isupper() for c in rest)
    return not any(c.isupper() for c in letters)


def is_normal_word(word: str) -> bool:
    """Whether a token looks like a word of running text."""
    length = len(word)
    if length and word[-1] in ".,":
        length -= 1
    if length < 3:
        return False

    letters = word[:length]
    if not all(c.isalpha() for c in letters):
        return False
    if not _has_admissible_case(letters):
        return False

    most_common = Counter(letters).most_common(1)[0][1]
    return most_common * 2 < length


def post_process_line(line: str) -> Optional[str]:
    """Trim a candidate line; None when it should be dropped."""
    line = line.strip()
    if len(line) <= 2:
        return None
    if not any(is_normal_word(token) for token in line.split(" ") if token):
        return None
    return line


def is_start_line(line_lower: str) -> bool:
    return line_lower in EXACT_START_LINES


def is_valid_line(line_lower: str) -> bool:
    if line_lower in EXACT_EXCLUDES:
        return False
    if line_lower.startswith(START_EXCLUDES):
        return False
    if line_lower.endswith(END_EXCLUDES):
        return False
    # substring search last, it is the most expensive
    return not any(exclude in line_lower for exclude in CONTAIN_EXCLUDES)


# =============================================================================
# Scanning
# =============================================================================


def _skip_prefix(stream: BinaryIO) -> BinaryIO:
    """Position a stream on the text area when it starts with a WPC prefix."""
    if not stream.seekable():
        return stream
    start = stream.tell()
    prefix = stream.read(WPC_PREFIX_LENGTH)
    if len(prefix) == WPC_PREFIX_LENGTH and prefix.startswith(WPC_MAGIC):
        pointer = int.from_bytes(prefix[4:8], "little")
        stream.seek(start + max(pointer, WPC_PREFIX_LENGTH))
    else:
        stream.seek(start)
    return stream


def extract_text(stream: BinaryIO) -> str:
    """
    Recover body text from a WordPerfect stream.

    Returns:
        Kept lines, each followed by a line terminator.
    """
    stream = _skip_prefix(stream)
    line: List[str] = []
    text: List[str] = []

    for chunk in iter(lambda: stream.read(READ_CHUNK_SIZE), b""):
        for value in chunk:
            if is_text_byte(value):
                line.append(_CHARS[value])
                continue
            if not line:
                continue

            candidate = post_process_line("".join(line))
            line.clear()
            if candidate is None:
                continue

            candidate_lower = candidate.lower()
            if is_start_line(candidate_lower):
                text.clear()
            elif is_valid_line(candidate_lower):
                text.append(candidate)
                text.append(END_OF_LINE)

    return "".join(text)


@dataclass
class WordPerfectExtractor:
    """
    Extractor for WordPerfect documents.

    Example:
        extractor = WordPerfectExtractor()
        extractor.extract(document, output)  # always returns None
    """

    plugin_name: str = field(default="wordperfect", repr=False)

    def extract(self, document: Document, output: TextIO) -> None:
        try:
            output.write(extract_text(document.content).strip())
        except (OSError, ValueError) as e:
            raise ExtractionError(
                f"Failed to read WordPerfect document: {e}",
                reference=document.reference,
                cause=e,
            ) from e
        logger.debug(f"{EXTRACT} wordperfect: {document.reference!r}")
        return None


__all__ = [
    "WordPerfectExtractor",
    "extract_text",
    "is_normal_word",
    "is_text_byte",
    "is_valid_line",
    "post_process_line",
]
