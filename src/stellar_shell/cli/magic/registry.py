"""
Magic command registry for the Stellar shell.

Magic commands are registered with a name, handler function, and metadata.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from stellar_shell.cli.output import Output
    from stellar_shell.engine import Executor


MagicHandler = Callable[["Executor", "Output"], None]


@dataclass
class MagicEntry:
    """Entry for a registered magic command."""

    name: str
    handler: MagicHandler
    description: str


class MagicRegistry:
    """Registry for magic commands."""

    def __init__(self):
        self._commands: dict[str, MagicEntry] = {}

    def register(self, name: str, description: str) -> Callable:
        """Decorator to register a magic command.

        Magic commands take no arguments.

        Args:
            name: Command name without the % prefix (e.g., "vars")
            description: Short description for completion

        Returns:
            Decorator function

        Example:
            @magic_registry.register("vars", "List all variables")
            def magic_vars(executor, output):
                for name, value in executor.get_variables().items():
                    output.write_line(f"{name} = {value}")
        """
        def decorator(func: MagicHandler) -> MagicHandler:
            self._commands[name] = MagicEntry(
                name=name,
                handler=func,
                description=description,
            )
            return func
        return decorator

    def get(self, name: str) -> MagicEntry | None:
        """Get a magic command by name, with or without the % prefix."""
        return self._commands.get(name[1:] if name.startswith("%") else name)

    def get_completions(self) -> dict[str, str]:
        """Get %-prefixed command names and descriptions for completion."""
        return {f"%{entry.name}": entry.description for entry in self._commands.values()}


# Global magic registry
magic_registry = MagicRegistry()
