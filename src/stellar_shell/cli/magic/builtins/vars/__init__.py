"""Vars magic command - list variable bindings."""
from __future__ import annotations

from typing import TYPE_CHECKING

from stellar_shell.cli.magic.registry import magic_registry
from stellar_shell.core.helpers import format_value

if TYPE_CHECKING:
    from stellar_shell.cli.output import Output
    from stellar_shell.engine import Executor


@magic_registry.register("vars", "List all variables")
def magic_vars(executor: "Executor", output: "Output") -> None:
    """Write one `name = value` line per binding, in assignment order."""
    for name, value in executor.get_variables().items():
        output.write_line(f"{name} = {format_value(value)}")
