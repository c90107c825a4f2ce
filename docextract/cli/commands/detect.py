# docextract/cli/commands/detect.py
"""
Detect command.

Usage:
    docextract detect file.wpd
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from docextract.cli.ui import ui
from docextract.cli.utils import build_registry, resolve_config
from docextract.config.loader import ConfigError
from docextract.core.document import Document


def command(path: Path, config: Optional[Path] = None) -> None:
    try:
        settings = resolve_config(config)
    except ConfigError as e:
        ui.error(f"Invalid configuration: {e}")
        raise typer.Exit(code=1)

    registry = build_registry(settings)
    document = Document.from_path(path)
    try:
        content_type = document.detect_content_type()
    finally:
        document.close()

    extractor = registry.select(document.reference, content_type)
    ui.header("docextract detect", path.name)
    ui.print(f"Content type: {content_type}")
    ui.print(f"Extractor: {extractor.plugin_name if extractor else '(ignored)'}")
