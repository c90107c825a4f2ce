# docextract/cli/commands/config.py
"""
Configuration command.

Usage:
    docextract config                      # Show the effective config
    docextract config -c my.yaml           # Defaults + my.yaml
    docextract config --save out.yaml      # Write the effective config
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from docextract.cli.ui import ui
from docextract.config.loader import ConfigError, load_config, save_config


def command(config: Optional[Path] = None, save: Optional[Path] = None) -> None:
    try:
        settings = load_config(config)
    except ConfigError as e:
        ui.error(str(e))
        raise typer.Exit(code=1)

    ui.header("docextract config", str(config) if config else "package defaults")
    ui.table(
        "Extraction",
        ["Setting", "Value"],
        [[name, repr(value)] for name, value in settings.model_dump().items()],
    )

    if save is not None:
        target = save_config(settings, save)
        ui.success(f"Saved to {target}")
