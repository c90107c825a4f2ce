# docextract/logging/logger.py
"""
Unified logging setup for docextract.

All modules use:
    from docextract.logging.logger import get_logger
    logger = get_logger(__name__)

Configuration happens once, in configure_logging() (e.g. the CLI entrypoint).
"""

import logging
import sys

DEFAULT_FORMAT = "[%(levelname)s] %(name)s - %(message)s"


def configure_logging(
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream=sys.stderr,
):
    """
    Configure the root logging handler.

    Safe to call multiple times: a handler is installed only once.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Modules call this to get a logger.

    Do NOT configure logging here; configuration happens in configure_logging().
    """
    return logging.getLogger(name)
