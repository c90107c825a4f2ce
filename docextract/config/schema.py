# docextract/config/schema.py
"""
Configuration schema for extraction.

Example YAML:
    extraction:
      split_embedded: true
      ignored_content_types: "image/.*|audio/.*"
      max_memory_size: 10485760
"""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from docextract.core.streams import DEFAULT_MAX_MEMORY_SIZE


class ExtractionConfig(BaseModel):
    """
    Extraction settings consumed by the extractor registry.

    Attributes:
        split_embedded: Materialize embedded items as their own documents
            instead of merging them into the parent.
        ignored_content_types: Regular expression over content types for
            which no extraction happens at all.
        max_memory_size: Bytes an embedded item may occupy in memory before
            its cached copy spills to disk.
    """

    split_embedded: bool = Field(
        default=False, description="Split embedded documents into their own documents"
    )
    ignored_content_types: Optional[str] = Field(
        default=None, description="Regex of content types to skip"
    )
    max_memory_size: int = Field(
        default=DEFAULT_MAX_MEMORY_SIZE,
        gt=0,
        description="In-memory limit for cached embedded content (bytes)",
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("ignored_content_types")
    @classmethod
    def _validate_regex(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"Invalid ignored_content_types pattern: {e}") from e
        return value


__all__ = ["ExtractionConfig"]
