"""
Magic command system for the Stellar shell.

Magic commands are % prefixed introspection directives (%functions, %vars).
"""

from __future__ import annotations

from stellar_shell.cli.magic.registry import MagicEntry, MagicRegistry, magic_registry
from stellar_shell.cli.magic import builtins  # noqa: F401  (registers built-ins)

__all__ = ["MagicEntry", "MagicRegistry", "magic_registry"]
