# docextract/extraction/naming.py
"""
Names for embedded items.

An embedded item is named from the best hint the engine reported for it,
in strict priority order:

1. package relationship id  -> the id itself            ("package-file")
2. resource name            -> the name itself          ("file-file")
3. known content type       -> embedded-<n>.<extension> ("file-object")
4. nothing usable           -> embedded-<n>.unknown     ("unknown")

<n> is the per-parent embed counter, so names are stable within one
extraction run. They may differ across runs if the engine visits embedded
items in a different order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from docextract.core import content_type as ct
from docextract.core.metadata import Metadata
from docextract.engine.base import CONTENT_TYPE, EMBEDDED_RELATIONSHIP_ID, RESOURCE_NAME


class EmbeddedType(str, Enum):
    """Classification of an embedded item."""

    PACKAGE_FILE = "package-file"  # Entry of an archive/package
    FILE_FILE = "file-file"  # Named file inside a document (e.g. attachment)
    FILE_OBJECT = "file-object"  # Unnamed object with a known type (e.g. image)
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ResolvedName:
    name: str
    type: EmbeddedType


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def resolve_name(
    relationship_id: Optional[str],
    resource_name: Optional[str],
    content_type: Optional[str],
    counter: int,
) -> ResolvedName:
    """Pick a name and type for an embedded item from its hints."""
    if not _is_blank(relationship_id):
        return ResolvedName(relationship_id, EmbeddedType.PACKAGE_FILE)

    if not _is_blank(resource_name):
        return ResolvedName(resource_name, EmbeddedType.FILE_FILE)

    if not _is_blank(content_type):
        extension = ct.extension_for(content_type)
        if extension:
            return ResolvedName(f"embedded-{counter}.{extension}", EmbeddedType.FILE_OBJECT)

    return ResolvedName(f"embedded-{counter}.unknown", EmbeddedType.UNKNOWN)


def name_embedded_item(
    engine_metadata: Metadata, item_metadata: Metadata, counter: int
) -> ResolvedName:
    """
    Resolve an embedded item name from engine metadata.

    Writes embedded-reference and embedded-type onto ``item_metadata``;
    ``engine_metadata`` is only read.
    """
    resolved = resolve_name(
        engine_metadata.get(EMBEDDED_RELATIONSHIP_ID),
        engine_metadata.get(RESOURCE_NAME),
        engine_metadata.get(CONTENT_TYPE),
        counter,
    )
    item_metadata.embedded_reference = resolved.name
    item_metadata.embedded_type = resolved.type.value
    return resolved


__all__ = ["EmbeddedType", "ResolvedName", "resolve_name", "name_embedded_item"]
