# docextract/cli/cli.py
"""
docextract CLI - Main application.

Commands:
    docextract extract   Extract text from a document and its embedded items
    docextract detect    Show the detected content type and extractor
    docextract config    Show (or save) the effective configuration

NOTE: Commands use lazy loading - imports only happen when a command is invoked.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="docextract",
    help="Extract text and metadata from documents, including embedded documents.",
    no_args_is_help=True,
    add_completion=False,
)


@app.command("extract")
def extract(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Document to extract."),
    split: Optional[bool] = typer.Option(
        None, "--split/--merge", help="Split embedded documents or merge them (default: config)."
    ),
    ignore: Optional[str] = typer.Option(None, "--ignore", "-i", help="Regex of content types to skip."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file."),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Write one .txt file per document here."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """Extract a document (and every embedded document)."""
    from docextract.cli.commands import extract as mod

    mod.command(
        path=path,
        split=split,
        ignore=ignore,
        config=config,
        output_dir=output_dir,
        verbose=verbose,
    )


@app.command("detect")
def detect(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Document to inspect."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file."),
) -> None:
    """Show the content type and the extractor a document would get."""
    from docextract.cli.commands import detect as mod

    mod.command(path=path, config=config)


@app.command("config")
def config_cmd(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file."),
    save: Optional[Path] = typer.Option(None, "--save", "-s", help="Write the effective config here."),
) -> None:
    """Show the effective configuration."""
    from docextract.cli.commands import config as mod

    mod.command(config=config, save=save)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
