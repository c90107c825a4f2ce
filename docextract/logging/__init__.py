# docextract/logging/__init__.py
from docextract.logging.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
