# docextract/core/metadata.py
"""
Multi-valued document metadata.

Metadata maps a field name to an ordered list of string values. Insertion
order is preserved both for fields and for the values of each field.

The same type is used for the metadata a Document carries through the
pipeline and for the raw metadata the decoding engine reports while it
decodes a stream.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional

# =============================================================================
# Reserved Field Names
# =============================================================================

DOC_REFERENCE = "document.reference"
DOC_CONTENT_TYPE = "document.contentType"
DOC_CONTENT_ENCODING = "document.contentEncoding"

EMBEDDED_REFERENCE = "embedded-reference"
EMBEDDED_TYPE = "embedded-type"
EMBEDDED_PARENT_REFERENCE = "embedded-parent-reference"
EMBEDDED_PARENT_ROOT_REFERENCE = "embedded-parent-root-reference"


class Metadata:
    """
    Ordered multi-valued mapping of field name to string values.

    Example:
        meta = Metadata()
        meta.add("author", "Jane")
        meta.add("author", "John")
        meta.get("author")      # "Jane"
        meta.get_all("author")  # ["Jane", "John"]
    """

    def __init__(self, initial: Optional[Dict[str, Iterable[str]]] = None) -> None:
        self._fields: Dict[str, List[str]] = {}
        if initial:
            for name, values in initial.items():
                if isinstance(values, str):
                    values = [values]
                for value in values:
                    self.add(name, value)

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """First value of a field, or default."""
        values = self._fields.get(name)
        if not values:
            return default
        return values[0]

    def get_all(self, name: str) -> List[str]:
        """All values of a field (a copy, empty when absent)."""
        return list(self._fields.get(name, []))

    def names(self) -> List[str]:
        return list(self._fields.keys())

    def to_dict(self) -> Dict[str, List[str]]:
        return {name: list(values) for name, values in self._fields.items()}

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add(self, name: str, value: Optional[str]) -> None:
        """Append a value to a field. None values are ignored."""
        if value is None:
            return
        self._fields.setdefault(name, []).append(str(value))

    def set(self, name: str, value: Optional[str]) -> None:
        """Replace all values of a field. Setting None removes the field."""
        if value is None:
            self._fields.pop(name, None)
            return
        self._fields[name] = [str(value)]

    def remove(self, name: str) -> None:
        self._fields.pop(name, None)

    def merge_from(self, other: "Metadata", skip: Iterable[str] = ()) -> None:
        """
        Merge another metadata object into this one.

        Values already present on a field are not added twice. Fields
        listed in ``skip`` are left untouched.
        """
        skipped = set(skip)
        for name in other.names():
            if name in skipped:
                continue
            existing = self._fields.setdefault(name, [])
            for value in other.get_all(name):
                if value not in existing:
                    existing.append(value)

    # -------------------------------------------------------------------------
    # Reserved fields
    # -------------------------------------------------------------------------

    @property
    def reference(self) -> Optional[str]:
        return self.get(DOC_REFERENCE)

    @reference.setter
    def reference(self, value: Optional[str]) -> None:
        self.set(DOC_REFERENCE, value)

    @property
    def embedded_reference(self) -> Optional[str]:
        return self.get(EMBEDDED_REFERENCE)

    @embedded_reference.setter
    def embedded_reference(self, value: Optional[str]) -> None:
        self.set(EMBEDDED_REFERENCE, value)

    @property
    def embedded_type(self) -> Optional[str]:
        return self.get(EMBEDDED_TYPE)

    @embedded_type.setter
    def embedded_type(self, value: Optional[str]) -> None:
        self.set(EMBEDDED_TYPE, value)

    @property
    def embedded_parent_reference(self) -> Optional[str]:
        return self.get(EMBEDDED_PARENT_REFERENCE)

    @embedded_parent_reference.setter
    def embedded_parent_reference(self, value: Optional[str]) -> None:
        self.set(EMBEDDED_PARENT_REFERENCE, value)

    @property
    def embedded_parent_root_reference(self) -> Optional[str]:
        return self.get(EMBEDDED_PARENT_ROOT_REFERENCE)

    @embedded_parent_root_reference.setter
    def embedded_parent_root_reference(self, value: Optional[str]) -> None:
        current = self.get(EMBEDDED_PARENT_ROOT_REFERENCE)
        if current and current != value:
            raise ValueError(
                f"{EMBEDDED_PARENT_ROOT_REFERENCE} is already set to {current!r}"
            )
        self.set(EMBEDDED_PARENT_ROOT_REFERENCE, value)

    # -------------------------------------------------------------------------
    # Dunder
    # -------------------------------------------------------------------------

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._fields.keys()))

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Metadata):
            return NotImplemented
        return self._fields == other._fields

    def __repr__(self) -> str:
        return f"Metadata({self._fields!r})"


__all__ = [
    "Metadata",
    "DOC_REFERENCE",
    "DOC_CONTENT_TYPE",
    "DOC_CONTENT_ENCODING",
    "EMBEDDED_REFERENCE",
    "EMBEDDED_TYPE",
    "EMBEDDED_PARENT_REFERENCE",
    "EMBEDDED_PARENT_ROOT_REFERENCE",
]
