# docextract/cli/commands/extract.py
"""
Extract command.

Usage:
    docextract extract report.pdf              # Text to stdout
    docextract extract bundle.zip --split      # One section per embedded document
    docextract extract bundle.zip -o out/      # One .txt file per document
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Set

import typer

from docextract.cli.ui import ui
from docextract.cli.utils import (
    build_registry,
    output_file_name,
    resolve_config,
    unique_file_name,
)
from docextract.config.loader import ConfigError
from docextract.core.document import Document
from docextract.core.exceptions import ExtractionError
from docextract.importer import DocumentImporter, ImportedDocument
from docextract.logging.logger import configure_logging, get_logger
from docextract.logging.tags import CLI

logger = get_logger(__name__)


def _emit(imported: ImportedDocument, multiple: bool) -> None:
    if multiple:
        label = imported.extractor or "skipped"
        typer.echo(f"==> {imported.document.reference} [{label}] <==")
    if imported.text:
        typer.echo(imported.text.rstrip("\n"))
    if multiple:
        typer.echo("")


def _write(
    imported: ImportedDocument,
    output_dir: Path,
    root: Document,
    root_name: str,
    used: Set[str],
) -> Path:
    name = output_file_name(imported.document.reference, root.reference, root_name)
    target = output_dir / unique_file_name(name, used)
    if target.name != name:
        logger.warning(f"{CLI} {name!r} already written, using {target.name!r}")
    target.write_text(imported.text, encoding="utf-8")
    return target


def command(
    path: Path,
    split: Optional[bool] = None,
    ignore: Optional[str] = None,
    config: Optional[Path] = None,
    output_dir: Optional[Path] = None,
    verbose: bool = False,
) -> None:
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        settings = resolve_config(config, split=split, ignore=ignore)
    except (ConfigError, ValueError) as e:
        ui.error(f"Invalid configuration: {e}")
        raise typer.Exit(code=1)

    importer = DocumentImporter(build_registry(settings))
    document = Document.from_path(path)
    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)

    count = 0
    used_names: Set[str] = set()
    try:
        for imported in importer.import_document(document):
            count += 1
            if output_dir is not None:
                target = _write(imported, output_dir, document, path.name, used_names)
                logger.debug(f"{CLI} Wrote {target}")
            else:
                _emit(imported, multiple=settings.split_embedded)
            if imported.document is not document:
                imported.document.close()
    except ExtractionError as e:
        ui.error(f"Extraction failed for {e.reference}: {e}")
        raise typer.Exit(code=1)
    finally:
        document.close()

    if output_dir is not None:
        ui.success(f"Extracted {count} document(s) to {output_dir}")
