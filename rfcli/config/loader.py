# rfcli/config/loader.py
"""
Layered configuration loading.

Merge strategy:
    1. Package defaults (rfcli/config/default.yaml) - always loaded
    2. User config ($RFCLI_CONFIG or ~/.config/rfcli/config.yaml) - overrides defaults

The result is validated into RfcliConfig, so every value is guaranteed to
exist and CLI code never needs fallback logic.

Usage:
    from rfcli.config.loader import load_config

    config = load_config()
    config.tldr.backends[config.tldr.backend].model
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from rfcli.config.schema import RfcliConfig
from rfcli.core.paths import user_config_path
from rfcli.logging.logger import get_logger
from rfcli.logging.tags import CONFIG

logger = get_logger(__name__)

DEFAULTS_PATH = Path(__file__).parent / "default.yaml"


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
    """Raised when a required config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match the schema."""

    pass


# =============================================================================
# Loading
# =============================================================================


def load_yaml(path: str | Path) -> dict[str, Any]:
    """
    Load a YAML file and return it as a dictionary.

    Raises:
        ConfigNotFoundError: If the file doesn't exist
        ConfigParseError: If YAML is invalid or the root is not a mapping
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

    logger.debug(f"{CONFIG} Loaded config from {p}")
    return data


def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Values from `override` take precedence over `base`.
    Nested dicts are merged recursively; lists are replaced entirely.

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


def load_config_dict(user_path: Optional[Path] = None) -> dict[str, Any]:
    """Return package defaults merged with the user file, if there is one."""
    defaults = load_yaml(DEFAULTS_PATH)

    path = user_path or user_config_path()
    if not path.exists():
        logger.debug(f"{CONFIG} No user config at {path}, using defaults")
        return defaults

    return deep_merge(defaults, load_yaml(path))


def load_config(user_path: Optional[Path] = None) -> RfcliConfig:
    """
    Load and validate the complete configuration.

    Raises:
        ConfigError: If a file cannot be parsed or the result fails validation
    """
    path = user_path or user_config_path()
    data = load_config_dict(path)

    try:
        return RfcliConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration: {e}", path=path) from e


__all__ = [
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "deep_merge",
    "load_config",
    "load_config_dict",
    "load_yaml",
]
