# docextract/core/streams.py
"""
Reusable buffered streams for document content.

The decoding engine may close or reuse the stream of an embedded item as soon
as it is done with it. Anything that must outlive that call is copied into a
cached stream first.

Cached streams live in memory up to ``max_memory_size`` bytes and spill to a
temporary file beyond that.
"""

from __future__ import annotations

import shutil
import tempfile
from dataclasses import dataclass
from typing import BinaryIO

DEFAULT_MAX_MEMORY_SIZE = 10 * 1024 * 1024
COPY_CHUNK_SIZE = 64 * 1024


@dataclass
class CachedStreamFactory:
    """
    Creates cached output streams that can be re-read once written.

    Example:
        factory = CachedStreamFactory(max_memory_size=1024)
        cached = factory.copy_to_cache(source_stream)
        data = cached.read()
    """

    max_memory_size: int = DEFAULT_MAX_MEMORY_SIZE

    def new_output_stream(self) -> BinaryIO:
        """A fresh, empty, writable and readable stream."""
        return tempfile.SpooledTemporaryFile(max_size=self.max_memory_size, mode="w+b")

    def copy_to_cache(self, stream: BinaryIO) -> BinaryIO:
        """
        Drain a stream into a new cached stream.

        Returns:
            The cached stream, rewound to its first byte.
        """
        cached = self.new_output_stream()
        shutil.copyfileobj(stream, cached, COPY_CHUNK_SIZE)
        cached.seek(0)
        return cached


__all__ = ["CachedStreamFactory", "DEFAULT_MAX_MEMORY_SIZE"]
