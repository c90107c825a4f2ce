# tests/conftest.py
"""
Shared fixtures.

Test Tiers:
- tier1: pure logic, no I/O
         Run: pytest -m tier1
- tier2: file I/O and third-party format libraries (zip, pdf, docx, html)
         Run: pytest -m "tier1 or tier2"

Scripted engine:
    ScriptedDecoder stands in for the decoding engine. Each stream's bytes
    name a ScriptedItem; decoding it writes the item's text and reports its
    children as embedded items, so tests can shape container trees freely.
"""

from __future__ import annotations

import io
import zipfile
from dataclasses import dataclass, field
from typing import BinaryIO, Dict, List, Optional, TextIO

import pytest

from docextract.core.metadata import Metadata
from docextract.engine.base import DecodeContext


@dataclass
class ScriptedItem:
    """One node of a scripted container tree."""

    key: str
    text: str = ""
    hints: Dict[str, str] = field(default_factory=dict)
    children: List["ScriptedItem"] = field(default_factory=list)
    fail: bool = False

    @property
    def data(self) -> bytes:
        return self.key.encode("utf-8")


@dataclass
class ScriptedDecoder:
    """Decoder replaying a tree of ScriptedItems."""

    root: ScriptedItem
    close_after_call: bool = True
    calls: List[str] = field(default_factory=list)

    def _index(self) -> Dict[bytes, ScriptedItem]:
        items: Dict[bytes, ScriptedItem] = {}
        pending = [self.root]
        while pending:
            item = pending.pop()
            items[item.data] = item
            pending.extend(item.children)
        return items

    def decode(
        self,
        stream: BinaryIO,
        sink: TextIO,
        metadata: Metadata,
        context: DecodeContext,
    ) -> None:
        item = self._index()[stream.read()]
        self.calls.append(item.key)
        if item.fail:
            raise RuntimeError(f"cannot decode {item.key}")
        sink.write(item.text)
        for child in item.children:
            child_stream = io.BytesIO(child.data)
            context.decode_embedded(child_stream, sink, Metadata(dict(child.hints)))
            if self.close_after_call:
                child_stream.close()


def make_zip(entries: Dict[str, bytes]) -> bytes:
    """Zip archive bytes with the given entries, in order."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, data in entries.items():
            archive.writestr(name, data)
    return buffer.getvalue()


@pytest.fixture
def bundle_zip(tmp_path):
    """
    A zip with a text file, an HTML page and a nested zip:

        bundle.zip
        ├── notes.txt
        ├── page.html
        └── inner.zip
            └── deep.txt
    """
    inner = make_zip({"deep.txt": b"deep down text"})
    data = make_zip(
        {
            "notes.txt": b"hello from notes",
            "page.html": (
                b"<html><head><title>Page Title</title></head>"
                b"<body><p>page body</p><script>var x = 1;</script></body></html>"
            ),
            "inner.zip": inner,
        }
    )
    path = tmp_path / "bundle.zip"
    path.write_bytes(data)
    return path


def find(documents, suffix: str) -> Optional[object]:
    """First item whose reference ends with suffix."""
    for doc in documents:
        reference = getattr(doc, "reference", None) or doc.document.reference
        if reference.endswith(suffix):
            return doc
    return None
