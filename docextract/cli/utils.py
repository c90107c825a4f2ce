# docextract/cli/utils.py
"""
Helpers shared by CLI commands.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional, Set

from docextract.config.loader import load_config
from docextract.config.schema import ExtractionConfig
from docextract.extraction.registry import ExtractorRegistry

_UNSAFE_CHARS = re.compile(r"[\\/:*?\"<>|]+")


def resolve_config(
    config_path: Optional[Path] = None,
    split: Optional[bool] = None,
    ignore: Optional[str] = None,
) -> ExtractionConfig:
    """Config file (or defaults) with command-line overrides applied."""
    config = load_config(config_path)
    overrides = {}
    if split is not None:
        overrides["split_embedded"] = split
    if ignore is not None:
        overrides["ignored_content_types"] = ignore
    if overrides:
        config = ExtractionConfig(**{**config.model_dump(), **overrides})
    return config


def build_registry(config: ExtractionConfig) -> ExtractorRegistry:
    return ExtractorRegistry.from_config(config)


def output_file_name(reference: str, root_reference: str, root_name: str) -> str:
    """
    File name for the text of a document of the tree.

    Examples:
        >>> output_file_name("/tmp/a.zip!docs/b.pdf", "/tmp/a.zip", "a.zip")
        'a.zip!docs_b.pdf.txt'
    """
    if reference.startswith(root_reference):
        reference = root_name + reference[len(root_reference):]
    return _UNSAFE_CHARS.sub("_", reference) + ".txt"


def unique_file_name(name: str, used: Set[str]) -> str:
    """
    Reserve a file name, adding a numeric suffix when it is already taken.

    Examples:
        >>> used = set()
        >>> unique_file_name("a.txt", used), unique_file_name("a.txt", used)
        ('a.txt', 'a-2.txt')
    """
    stem, dot, suffix = name.rpartition(".")
    if not dot:
        stem, suffix = name, ""
    candidate = name
    counter = 1
    while candidate in used:
        counter += 1
        candidate = f"{stem}-{counter}.{suffix}" if suffix else f"{stem}-{counter}"
    used.add(candidate)
    return candidate


__all__ = ["resolve_config", "build_registry", "output_file_name", "unique_file_name"]
