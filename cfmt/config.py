"""
Configuration loading.

Settings come from an optional `cfmt.yaml` in the working directory:

    locale: de-DE
    vars:
      name: Ann
      total: 1234.5

The CFMT_LOCALE environment variable overrides the configured locale.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigError
from .numeric.locale import LOCALE_ENV

logger = logging.getLogger(__name__)

CONFIG_FILE = "cfmt.yaml"

_yaml = YAML(typ="safe")

_KNOWN_KEYS = {"locale", "vars"}


@dataclass(frozen=True)
class Settings:
    locale: Optional[str] = None
    vars: Dict[str, Any] = field(default_factory=dict)


def _read_yaml_map(path: Path) -> dict:
    """Reads a YAML file that must contain a mapping (an empty file is an empty mapping)."""
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8"))
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read {path}: {e}") from e
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return raw


def _stringify_keys(data: dict, path: Path) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for key, value in data.items():
        if not isinstance(key, (str, int, float)) or isinstance(key, bool):
            raise ConfigError(f"{path}: variable names must be scalars, got {key!r}")
        result[str(key)] = value
    return result


def load_vars_file(path: Path) -> Dict[str, Any]:
    """
    Loads a YAML mapping of substitution values.

    Keys are converted to strings (YAML `1: x` becomes "1").
    """
    if not path.is_file():
        raise ConfigError(f"Variables file not found: {path}")
    return _stringify_keys(_read_yaml_map(path), path)


def load_settings(root: Path) -> Settings:
    """
    Loads settings from <root>/cfmt.yaml and the environment.

    Args:
        root: Directory to look for the configuration file in

    Returns:
        Settings, empty when there is no configuration file
    """
    path = root / CONFIG_FILE
    raw: dict = {}
    if path.is_file():
        raw = _read_yaml_map(path)
        unknown = set(raw) - _KNOWN_KEYS
        if unknown:
            raise ConfigError(
                f"{path}: unknown keys {', '.join(sorted(map(str, unknown)))}. "
                f"Allowed: {', '.join(sorted(_KNOWN_KEYS))}"
            )
        logger.debug("Loaded configuration from %s", path)

    locale = raw.get("locale")
    if locale is not None and not isinstance(locale, str):
        raise ConfigError(f"{path}: 'locale' must be a string, got {locale!r}")

    raw_vars = raw.get("vars") or {}
    if not isinstance(raw_vars, dict):
        raise ConfigError(f"{path}: 'vars' must be a mapping")

    env_locale = os.environ.get(LOCALE_ENV)
    if env_locale:
        logger.debug("Locale overridden by %s=%s", LOCALE_ENV, env_locale)
        locale = env_locale

    return Settings(locale=locale, vars=_stringify_keys(raw_vars, path))


__all__ = ["CONFIG_FILE", "Settings", "load_settings", "load_vars_file"]
