"""
Exception classes for the Stellar shell.
"""


class StellarError(Exception):
    """Base exception for shell-related errors."""


class ParseError(StellarError):
    """Expression could not be parsed."""


class EvaluationError(StellarError):
    """Expression failed to evaluate."""


class FunctionNotFoundError(StellarError):
    """Function not found in registry (or not loaded yet)."""


class FunctionRegistrationError(StellarError):
    """Function could not be added to the registry."""


class ConfigError(StellarError):
    """Invalid startup configuration."""
