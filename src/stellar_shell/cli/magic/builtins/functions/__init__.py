"""Functions magic command - list every function known to the registry."""
from __future__ import annotations

from typing import TYPE_CHECKING

from stellar_shell.cli.magic.registry import magic_registry

if TYPE_CHECKING:
    from stellar_shell.cli.output import Output
    from stellar_shell.engine import Executor


@magic_registry.register("functions", "List all functions loaded so far")
def magic_functions(executor: "Executor", output: "Output") -> None:
    """Write the sorted, comma-separated function names as one line."""
    names = sorted(info.name for info in executor.function_registry.function_info())
    output.write_line(", ".join(names))
