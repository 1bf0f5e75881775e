"""
CLI module for the stellar_shell package.

Provides input classification, dispatch, completion and the interactive
REPL front ends.
"""

from stellar_shell.cli.classifier import classify
from stellar_shell.cli.completion import CompletionEngine
from stellar_shell.cli.dispatcher import Dispatcher, format_function_info
from stellar_shell.cli.output import ConsoleOutput, Output
from stellar_shell.cli.shell import StellarShell, main

__all__ = [
    "classify",
    "CompletionEngine",
    "Dispatcher",
    "format_function_info",
    "ConsoleOutput",
    "Output",
    "StellarShell",
    "main",
]
