"""Utility modules for stellar-shell."""

from stellar_shell.utils.logging import close_logging, configure_logging, log_exception

__all__ = ["configure_logging", "close_logging", "log_exception"]
