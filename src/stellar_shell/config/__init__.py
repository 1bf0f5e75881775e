"""Configuration management for stellar-shell."""

from stellar_shell.config.config import (
    DEFAULTS,
    Config,
    ConfigManager,
    get_config,
    get_config_manager,
)
from stellar_shell.config.loaders import (
    STELLAR_PROPERTIES_FILENAME,
    load_global_config,
    load_properties,
    load_variables,
    validate_options,
)

__all__ = [
    "DEFAULTS",
    "Config",
    "ConfigManager",
    "get_config",
    "get_config_manager",
    "STELLAR_PROPERTIES_FILENAME",
    "load_global_config",
    "load_properties",
    "load_variables",
    "validate_options",
]
