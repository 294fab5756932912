#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the json-md-bridge CLI.

A configuration file holds one table per conversion direction, keyed by
option field names::

    # .json-md-bridge.toml
    [to_markdown]
    indent_size = 4
    arrays_as_tables = true

    [to_json]
    camel_case_keys = true

The same tables may live under ``[tool.json-md-bridge]`` in ``pyproject.toml``.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from json_md_bridge.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION

CONFIG_SECTIONS = ("to_markdown", "to_json")


def _read_toml(config_path: Path) -> Any:
    with open(config_path, "rb") as f:
        return tomllib.load(f)


def _read_yaml(config_path: Path) -> Any:
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _read_json(config_path: Path) -> Any:
    with open(config_path, "r", encoding="utf-8") as f:
        return json.load(f)


_READERS: Dict[str, Callable[[Path], Any]] = {
    ".toml": _read_toml,
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".json": _read_json,
}


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.json-md-bridge]`` table from a pyproject.toml file.

    Returns
    -------
    dict
        The table contents, or an empty dict when the section is absent

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be parsed or the section is not a table

    """
    try:
        data = _read_toml(pyproject_path)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by walking up from ``start_dir``.

    Each directory is checked for the dedicated config files in
    ``CONFIG_FILENAMES`` order, then for a ``pyproject.toml`` that has a
    ``[tool.json-md-bridge]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

    Returns
    -------
    Path or None
        First configuration file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                # Unreadable pyproject.toml files are not ours to report
                pass

        if current.parent == current:
            return None
        current = current.parent


def discover_config_file() -> Optional[Path]:
    """Discover a configuration file from the cwd upwards, then in the home directory."""
    found = find_config_in_parents()
    if found:
        return found

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration mapping with ``to_markdown`` / ``to_json`` tables

    Raises
    ------
    argparse.ArgumentTypeError
        If the file is missing, unreadable, malformed or of an unsupported type

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    if config_path.name.lower() == "pyproject.toml":
        config: Any = _load_pyproject_section(config_path)
    else:
        ext = config_path.suffix.lower()
        reader = _READERS.get(ext)
        if reader is None:
            raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")
        try:
            config = reader(config_path)
        except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise argparse.ArgumentTypeError(f"Invalid configuration in {config_path}: {e}") from e
        except OSError as e:
            raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"Config file must contain a mapping, got {type(config).__name__}")

    for section in CONFIG_SECTIONS:
        if section in config and not isinstance(config[section], dict):
            raise argparse.ArgumentTypeError(f"Config section '{section}' must be a table in {config_path}")

    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries, recursing into nested tables.

    Examples
    --------
    >>> merge_configs({"to_json": {"parse_tables": False}}, {"to_json": {"camel_case_keys": True}})
    {'to_json': {'parse_tables': False, 'camel_case_keys': True}}

    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (``--config``)
    2. Environment variable config path (``JSON_MD_BRIDGE_CONFIG``)
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration (empty dict if no config found)

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        return load_config_file(discovered_path)

    return {}
