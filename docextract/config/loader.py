# docextract/config/loader.py
"""
Layered configuration loading.

Merge strategy:
    1. Package defaults (docextract/config/defaults/default.yaml) - always loaded
    2. User config file - overrides defaults

Usage:
    from docextract.config.loader import load_config

    config = load_config()                   # defaults only
    config = load_config("docextract.yaml")  # defaults + user overrides
    config.split_embedded
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from docextract.config.schema import ExtractionConfig
from docextract.logging.logger import get_logger

logger = get_logger(__name__)

DEFAULTS_PATH = Path(__file__).parent / "defaults" / "default.yaml"
ROOT_KEY = "extraction"


# =============================================================================
# Errors
# =============================================================================


class ConfigError(Exception):
    """Base error for configuration issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match schema."""

    pass


# =============================================================================
# Deep Merge
# =============================================================================


def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Values from `override` take precedence over `base`. Nested dicts are
    merged recursively, everything else is replaced.

    Examples:
        >>> deep_merge({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 10}})
        {'a': 1, 'b': {'c': 10, 'd': 3}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


# =============================================================================
# Loading Functions
# =============================================================================


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file and return it as a dictionary.

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e
    except OSError as e:
        raise ConfigParseError(f"Failed to read config: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    logger.debug(f"Loaded config from {p}")
    return data


def load_config_dict(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load defaults merged with an optional user file.

    User files may nest settings under ``extraction:`` or keep them flat.

    Returns:
        The flat extraction settings dictionary.
    """
    defaults = load_yaml(DEFAULTS_PATH).get(ROOT_KEY, {})
    if path is None:
        return dict(defaults)

    user = load_yaml(path)
    if ROOT_KEY in user:
        user = user[ROOT_KEY] or {}
        if not isinstance(user, dict):
            raise ConfigParseError(f"'{ROOT_KEY}' must be a mapping", path=Path(path))

    return deep_merge(defaults, user)


def load_config(path: Optional[Union[str, Path]] = None) -> ExtractionConfig:
    """
    Load and validate the extraction configuration.

    Raises:
        ConfigNotFoundError: If the user file doesn't exist
        ConfigParseError: If YAML is invalid
        ConfigValidationError: If settings don't match the schema
    """
    data = load_config_dict(path)
    try:
        return ExtractionConfig(**data)
    except ValidationError as e:
        raise ConfigValidationError(
            f"Invalid extraction config: {e}",
            path=Path(path) if path else DEFAULTS_PATH,
        ) from e


def save_config(config: ExtractionConfig, path: Union[str, Path]) -> Path:
    """Write a config to YAML, nested under ``extraction:``."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        yaml.safe_dump({ROOT_KEY: config.model_dump()}, f, sort_keys=False)
    logger.debug(f"Saved config to {p}")
    return p


__all__ = [
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "deep_merge",
    "load_yaml",
    "load_config_dict",
    "load_config",
    "save_config",
]
