# docextract/cli/__init__.py
from docextract.cli.cli import app, main

__all__ = ["app", "main"]
