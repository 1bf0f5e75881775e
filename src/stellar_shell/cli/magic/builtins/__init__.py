"""
Built-in magic commands package.

Each magic command lives in its own subdirectory whose __init__.py registers
the command using @magic_registry.register().
"""

from stellar_shell.cli.magic.builtins import functions as _functions  # noqa: F401
from stellar_shell.cli.magic.builtins import vars as _vars  # noqa: F401
