"""
Configuration management for stellar-shell.

Provides a configuration file at ~/.stellar/config.json for default settings.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field


# Default values - single source of truth
DEFAULTS = {
    "no_ansi": False,
    "simple": False,
    "verbose": False,
}


class Config(BaseModel):
    """Configuration settings for stellar-shell.

    All settings are optional. Use DEFAULTS for default values.
    """

    model_config = {"extra": "ignore"}  # Ignore unknown fields like _comment

    # REPL settings
    no_ansi: Optional[bool] = Field(
        default=None,
        description="Make the input prompt not use ANSI colors"
    )
    simple: Optional[bool] = Field(
        default=None,
        description="Use simple REPL (no prompt_toolkit)"
    )
    verbose: Optional[bool] = Field(
        default=None,
        description="Log debug output to stderr"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Also write logs to this file"
    )

    # Session inputs
    properties_file: Optional[str] = Field(
        default=None,
        description="File containing Stellar properties"
    )
    variables_file: Optional[str] = Field(
        default=None,
        description="File containing a JSON map of variables"
    )
    global_config_file: Optional[str] = Field(
        default=None,
        description="File containing the global configuration as JSON"
    )

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value with fallback to DEFAULTS, then to provided default."""
        value = getattr(self, key, None)
        if value is not None:
            return value
        return DEFAULTS.get(key, default)


class ConfigManager:
    """Manages loading and saving configuration."""

    CONFIG_DIR = Path.home() / ".stellar"
    CONFIG_FILE = CONFIG_DIR / "config.json"

    def __init__(self):
        self._config: Optional[Config] = None

    def _ensure_dir(self) -> None:
        """Ensure config directory exists."""
        self.CONFIG_DIR.mkdir(parents=True, exist_ok=True)

    @property
    def config(self) -> Config:
        """Get the current config, loading if necessary."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def load(self) -> Config:
        """Load configuration from file.

        Returns:
            Config object with loaded settings, or defaults if the file is
            missing or invalid.
        """
        if not self.CONFIG_FILE.exists():
            return Config()

        try:
            data = json.loads(self.CONFIG_FILE.read_text())
            return Config.model_validate(data)
        except (json.JSONDecodeError, ValueError) as e:
            # Invalid config file, return defaults
            print(f"Warning: Invalid config file ({e}), using defaults")
            return Config()

    def save(self, config: Optional[Config] = None) -> Path:
        """Save configuration to file, preserving unknown keys.

        Args:
            config: Config to save. If None, saves current config.

        Returns:
            Path to saved config file.
        """
        self._ensure_dir()
        if config is not None:
            self._config = config

        if self._config is None:
            self._config = Config()

        existing_data = self._read_raw()

        # Update only non-None config values, preserving everything else
        for key, value in self._config.model_dump().items():
            if value is not None:
                existing_data[key] = value

        self.CONFIG_FILE.write_text(json.dumps(existing_data, indent=2) + "\n")
        return self.CONFIG_FILE

    def set(self, key: str, value: Any) -> None:
        """Set a config value and save.

        Raises:
            ValueError: If the key is unknown or the value has the wrong type.
        """
        # Always reload from file to get latest values
        current = self.load()

        if key not in Config.model_fields:
            raise ValueError(f"Unknown config key: {key}")

        data = current.model_dump()
        data[key] = value
        self._config = Config.model_validate(data)
        self.save()

    def unset(self, key: str) -> None:
        """Remove a config value (reset to default)."""
        if key not in Config.model_fields:
            raise ValueError(f"Unknown config key: {key}")

        self._config = self.load().model_copy(update={key: None})

        existing_data = self._read_raw()
        if key in existing_data:
            existing_data[key] = None

        self._ensure_dir()
        self.CONFIG_FILE.write_text(json.dumps(existing_data, indent=2) + "\n")

    def list_settings(self) -> dict[str, Any]:
        """List user-customized settings (values that differ from defaults)."""
        result = {}
        for k, v in self.config.model_dump().items():
            if v is None:
                continue
            if k not in DEFAULTS or v != DEFAULTS[k]:
                result[k] = v
        return result

    def _read_raw(self) -> dict[str, Any]:
        if not self.CONFIG_FILE.exists():
            return {}
        try:
            data = json.loads(self.CONFIG_FILE.read_text())
        except json.JSONDecodeError:
            return {}
        return data if isinstance(data, dict) else {}


# Singleton instance
_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the singleton ConfigManager instance."""
    global _manager
    if _manager is None:
        _manager = ConfigManager()
    return _manager


def get_config() -> Config:
    """Get the current configuration."""
    return get_config_manager().config
