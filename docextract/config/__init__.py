# docextract/config/__init__.py
from docextract.config.loader import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    load_config,
    save_config,
)
from docextract.config.schema import ExtractionConfig

__all__ = [
    "ExtractionConfig",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "load_config",
    "save_config",
]
