"""
Loaders for the files given on the command line.

- properties: Java-properties style `key=value` / `key: value` lines
- variables: a JSON object whose entries seed the variable environment
- global config: a JSON object shown when the shell starts
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from stellar_shell.core.exceptions import ConfigError

STELLAR_PROPERTIES_FILENAME = "stellar.properties"
DEFAULT_PROPERTIES_FILE = Path.home() / ".stellar" / STELLAR_PROPERTIES_FILENAME


def load_properties(path: Optional[Path | str] = None) -> dict[str, str]:
    """Load Stellar properties.

    Args:
        path: Properties file. If None, ~/.stellar/stellar.properties is
            used when it exists.

    Returns:
        Mapping of property name to string value (empty if no file).

    Raises:
        ConfigError: If the file is not UTF-8 text.
    """
    if path is None:
        if not DEFAULT_PROPERTIES_FILE.exists():
            return {}
        path = DEFAULT_PROPERTIES_FILE

    properties: dict[str, str] = {}
    for raw in _read_text(path, "properties").splitlines():
        line = raw.strip()
        if not line or line.startswith(("#", "!")):
            continue
        key, value = _split_property(line)
        properties[key] = value
    return properties


def _split_property(line: str) -> tuple[str, str]:
    """Split on the first unescaped '=' or ':'; a bare key maps to ''."""
    for i, ch in enumerate(line):
        if ch in "=:" and (i == 0 or line[i - 1] != "\\"):
            return line[:i].strip(), line[i + 1:].strip()
    return line, ""


def _read_text(path: Path | str, what: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigError(f"Invalid {what} file {path}: not UTF-8 text ({e.reason})") from e


def _load_json_object(path: Path | str, what: str) -> dict[str, Any]:
    text = _read_text(path, what)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid {what} file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid {what} file {path}: expected a JSON object")
    return data


def load_variables(path: Path | str) -> dict[str, Any]:
    """Load a JSON map of variables."""
    return _load_json_object(path, "variables")


def load_global_config(path: Path | str) -> dict[str, Any]:
    """Load the global configuration JSON."""
    return _load_json_object(path, "global config")


def validate_options(
    variables_file: Optional[str] = None,
    properties_file: Optional[str] = None,
    global_config_file: Optional[str] = None,
) -> None:
    """Check that every file given on the command line exists.

    Raises:
        ConfigError: Naming the first missing file.
    """
    for option, value in (
        ("variables", variables_file),
        ("properties", properties_file),
        ("global config", global_config_file),
    ):
        if value and not Path(value).is_file():
            raise ConfigError(f"{option} file does not exist: {value}")
