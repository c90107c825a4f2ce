# docextract/engine/decoders/archive.py
"""
Archive decoders (ZIP, TAR, GZIP).

Each archive entry is written to the text as its own line (the entry path)
and handed to the embedded resolver. Entries carry their path both as the
package relationship id and as the resource name.

Entry streams are closed as soon as the resolver returns.
"""

from __future__ import annotations

import gzip
import tarfile
import zipfile
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import BinaryIO, TextIO

from docextract.core.metadata import Metadata
from docextract.engine.base import (
    EMBEDDED_RELATIONSHIP_ID,
    RESOURCE_NAME,
    DecodeContext,
)
from docextract.logging.logger import get_logger
from docextract.logging.tags import ENGINE

logger = get_logger(__name__)


def _entry_metadata(name: str) -> Metadata:
    meta = Metadata()
    meta.set(EMBEDDED_RELATIONSHIP_ID, name)
    meta.set(RESOURCE_NAME, name)
    return meta


@dataclass
class ZipDecoder:
    """Decoder for application/zip and zip-based packages (JAR)."""

    def decode(
        self,
        stream: BinaryIO,
        sink: TextIO,
        metadata: Metadata,
        context: DecodeContext,
    ) -> None:
        with zipfile.ZipFile(stream) as archive:
            for info in archive.infolist():
                if info.is_dir():
                    continue
                sink.write(f"{info.filename}\n")
                logger.debug(f"{ENGINE} ZIP entry {info.filename!r}")
                with archive.open(info) as entry:
                    context.decode_embedded(entry, sink, _entry_metadata(info.filename))


@dataclass
class TarDecoder:
    """
    Decoder for application/x-tar and compressed tarballs.

    A gzip stream that is not a tarball is treated as a single compressed
    entry named after the container minus its ".gz" suffix.
    """

    def decode(
        self,
        stream: BinaryIO,
        sink: TextIO,
        metadata: Metadata,
        context: DecodeContext,
    ) -> None:
        start = stream.tell()
        try:
            archive = tarfile.open(fileobj=stream, mode="r:*")
        except tarfile.ReadError:
            stream.seek(start)
            self._decode_gzip_member(stream, sink, metadata, context)
            return

        with archive:
            for member in archive:
                if not member.isfile():
                    continue
                entry = archive.extractfile(member)
                if entry is None:
                    continue
                sink.write(f"{member.name}\n")
                logger.debug(f"{ENGINE} TAR entry {member.name!r}")
                with entry:
                    context.decode_embedded(entry, sink, _entry_metadata(member.name))

    def _decode_gzip_member(
        self,
        stream: BinaryIO,
        sink: TextIO,
        metadata: Metadata,
        context: DecodeContext,
    ) -> None:
        container = metadata.get(RESOURCE_NAME) or ""
        leaf = PurePosixPath(container.split("!")[-1]).name
        name = leaf[: -len(".gz")] if leaf.lower().endswith(".gz") else ""

        item_meta = Metadata()
        if name:
            item_meta.set(RESOURCE_NAME, name)
        with gzip.GzipFile(fileobj=stream, mode="rb") as member:
            context.decode_embedded(member, sink, item_meta)


__all__ = ["ZipDecoder", "TarDecoder"]
