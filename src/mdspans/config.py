#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading.

Style themes and parser limits can be kept in a configuration file instead
of being passed on the command line. Supported locations, searched from the
current directory up to the filesystem root and then in the home directory:

- ``.mdspans.toml``
- ``.mdspans.yaml`` / ``.mdspans.yml``
- ``.mdspans.json``
- ``pyproject.toml`` with a ``[tool.mdspans]`` table

Example ``.mdspans.toml``::

    classed_headers = true
    header_styles = ["bold magenta", "bold cyan", "bold"]

    [class_styles]
    red = "bold red"
    muted = "dim"

    [parser]
    max_input_length = 100000
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import fields
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from mdspans.constants import CONFIG_FILENAMES, PYPROJECT_SECTION
from mdspans.exceptions import ConfigurationError
from mdspans.options import MarkdownRuleOptions, ParserOptions

logger = logging.getLogger(__name__)

_DEDICATED_FILENAMES = [name for name in CONFIG_FILENAMES if name != "pyproject.toml"]


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.mdspans]`` table from pyproject.toml, or an empty dict."""
    with open(pyproject_path, "rb") as f:
        data = tomllib.load(f)

    config = data.get("tool", {}).get(PYPROJECT_SECTION, {})
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"[tool.{PYPROJECT_SECTION}] section must be a table, got {type(config).__name__}",
            config_path=str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file in ``start_dir`` or one of its parents.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

    Returns
    -------
    Path or None
        The first configuration file found, or None

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in _DEDICATED_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except (tomllib.TOMLDecodeError, ConfigurationError) as e:
                logger.debug("Ignoring unusable %s: %s", pyproject_path, e)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Search parent directories, then the home directory, for a config file."""
    found = find_config_in_parents(start_dir)
    if found:
        return found

    home = Path.home()
    for filename in _DEDICATED_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load a configuration dictionary from JSON, TOML, YAML or pyproject.toml.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary

    Raises
    ------
    ConfigurationError
        If the file is missing, unreadable, malformed, or not a mapping

    """
    config_path = Path(config_path)
    if not config_path.is_file():
        raise ConfigurationError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))

    ext = config_path.suffix.lower()
    try:
        if config_path.name.lower() == "pyproject.toml":
            config: Any = _load_pyproject_section(config_path)
        elif ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ConfigurationError(
                f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml",
                config_path=str(config_path),
            )
    except ConfigurationError:
        raise
    except (OSError, tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Error reading config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a mapping, got {type(config).__name__}",
            config_path=str(config_path),
        )
    logger.debug("Loaded configuration from %s", config_path)
    return config


def options_from_config(config: Dict[str, Any]) -> tuple[MarkdownRuleOptions, ParserOptions]:
    """Build option objects from a configuration dictionary.

    Top-level keys map to :class:`MarkdownRuleOptions` fields; the optional
    ``parser`` table maps to :class:`ParserOptions` fields.

    Parameters
    ----------
    config : dict
        Configuration as returned by :func:`load_config_file`

    Returns
    -------
    tuple of (MarkdownRuleOptions, ParserOptions)
        Rule and engine options

    Raises
    ------
    ConfigurationError
        If a key names no option, or a value is rejected by option validation

    """
    config = dict(config)
    parser_config = config.pop("parser", {}) or {}
    if not isinstance(parser_config, dict):
        raise ConfigurationError(f"'parser' must be a table, got {type(parser_config).__name__}")

    rule_fields = {field.name for field in fields(MarkdownRuleOptions)}
    parser_fields = {field.name for field in fields(ParserOptions)}
    unknown = sorted(set(config) - rule_fields) + sorted(f"parser.{key}" for key in set(parser_config) - parser_fields)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    header_styles = config.get("header_styles")
    if header_styles is not None and not isinstance(header_styles, (list, tuple)):
        raise ConfigurationError(f"'header_styles' must be a list, got {type(header_styles).__name__}")

    try:
        if header_styles is not None:
            config["header_styles"] = tuple(header_styles)
        return MarkdownRuleOptions(**config), ParserOptions(**parser_config)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}", original_error=e) from e
