"""Logging configuration for the Stellar shell.

Diagnostics go to stderr in grey so they stay distinct from shell output;
an optional log file receives the same records with timestamps.
"""
from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path
from typing import Optional

ROOT_LOGGER = "stellar_shell"

GREY = "\033[90m"
RESET = "\033[0m"

# Module-level state
_handlers: list[logging.Handler] = []


def configure_logging(
    verbose: bool = False,
    log_file: Optional[Path | str] = None,
    ansi: bool = True,
) -> logging.Logger:
    """Configure the package logger.

    Args:
        verbose: Show DEBUG records on stderr (default: WARNING and above)
        log_file: Optional file that receives DEBUG and above
        ansi: Colour stderr records grey

    Returns:
        The configured package logger
    """
    close_logging()
    logger = logging.getLogger(ROOT_LOGGER)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    fmt = f"{GREY}%(message)s{RESET}" if ansi else "%(message)s"
    stream_handler.setFormatter(logging.Formatter(fmt))
    _handlers.append(stream_handler)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        _handlers.append(file_handler)

    for handler in _handlers:
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if (verbose or log_file) else logging.WARNING)
    logger.propagate = False
    return logger


def close_logging() -> None:
    """Remove and close handlers installed by configure_logging."""
    logger = logging.getLogger(ROOT_LOGGER)
    while _handlers:
        handler = _handlers.pop()
        logger.removeHandler(handler)
        handler.close()


def log_exception(
    error: BaseException,
    context: str = "",
    logger: Optional[logging.Logger] = None,
) -> str:
    """Log an exception with its traceback at DEBUG level.

    Args:
        error: The exception to log
        context: What was happening (e.g. the expression being evaluated)
        logger: Logger to use (default: the package logger)

    Returns:
        The message to show the user (no traceback)
    """
    logger = logger or logging.getLogger(ROOT_LOGGER)
    error_type = type(error).__name__
    error_msg = str(error) or error_type

    tb_str = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    if context:
        logger.debug(f"{context}\n{error_type}: {error_msg}\n\nTraceback:\n{tb_str}")
    else:
        logger.debug(f"{error_type}: {error_msg}\n\nTraceback:\n{tb_str}")

    return error_msg
