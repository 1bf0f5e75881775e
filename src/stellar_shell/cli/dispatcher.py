"""
Dispatcher: routes each classified input line to its handler.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

from stellar_shell.cli.classifier import (
    ERROR_PROMPT,
    AssignmentCommand,
    Blank,
    Comment,
    Doc,
    Expression,
    Magic,
    Quit,
    UnknownMagic,
    classify,
)
from stellar_shell.cli.magic import MagicRegistry, magic_registry
from stellar_shell.core.helpers import format_value
from stellar_shell.utils.logging import log_exception

if TYPE_CHECKING:
    from stellar_shell.cli.output import Output
    from stellar_shell.core.datamodels import FunctionInfo
    from stellar_shell.engine import Executor

logger = logging.getLogger(__name__)


def format_function_info(info: "FunctionInfo") -> str:
    """Format a function descriptor as the documentation block shown by `?name`."""
    lines = [info.name, f"Description: {info.description}", ""]
    if info.params:
        lines.append("Arguments:")
        lines.extend(f"\t{param}" for param in info.params)
        lines.append("")
    lines.append(f"Returns: {info.returns}")
    return "\n".join(lines) + "\n"


class Dispatcher:
    """Handles one submitted line at a time.

    Nothing raised while handling a line escapes `dispatch`; failures are
    written to the output with the error prefix.
    """

    def __init__(
        self,
        executor: "Executor",
        output: "Output",
        on_stop: Optional[Callable[[], None]] = None,
        magic: Optional[MagicRegistry] = None,
    ):
        self.executor = executor
        self.output = output
        self.on_stop = on_stop
        self.magic = magic or magic_registry

    def dispatch(self, raw_line: str) -> None:
        """Classify a raw line and run the matching handler."""
        command = classify(raw_line)

        if isinstance(command, (Blank, Comment)):
            return
        if isinstance(command, Magic):
            self.handle_magic(command.name)
        elif isinstance(command, UnknownMagic):
            self.output.write_error(f"{ERROR_PROMPT}undefined magic command: {command.text}")
        elif isinstance(command, Doc):
            self.handle_doc(command.name)
        elif isinstance(command, Quit):
            self.handle_quit()
        elif isinstance(command, AssignmentCommand):
            self.handle_stellar(command.statement, command.variable)
        elif isinstance(command, Expression):
            self.handle_stellar(command.statement)

    def handle_stellar(self, statement: str, variable: Optional[str] = None) -> None:
        """Evaluate a statement and print or bind the result."""
        try:
            result = self.executor.execute(statement)
        except Exception as e:
            message = log_exception(e, context=f"Evaluating: {statement}", logger=logger)
            if variable is not None:
                self.output.write_error(f"{ERROR_PROMPT} ERROR: Variable {variable} not assigned")
            self.output.write_error(f"{ERROR_PROMPT}{message}")
            return

        try:
            if variable is not None:
                # A null result is still bound
                self.executor.assign(variable, statement, result)
            elif result is not None:
                self.output.write_line(format_value(result))
        except Exception as e:
            message = log_exception(e, context=f"Rendering: {statement}", logger=logger)
            self.output.write_error(f"{ERROR_PROMPT}{message}")

    def handle_magic(self, name: str) -> None:
        """Run a registered magic command."""
        entry = self.magic.get(name)
        if entry is None:
            self.output.write_error(f"{ERROR_PROMPT}undefined magic command: {name}")
            return
        try:
            entry.handler(self.executor, self.output)
        except Exception as e:
            message = log_exception(e, context=f"Magic command: {name}", logger=logger)
            self.output.write_error(f"{ERROR_PROMPT}{message}")

    def handle_doc(self, name: str) -> None:
        """Write documentation for every function named exactly `name`."""
        for info in self.executor.function_registry.function_info():
            if info.name == name:
                self.output.write(format_function_info(info))

    def handle_quit(self) -> None:
        """Ask the line editor to stop; a failure is reported, not raised."""
        if self.on_stop is None:
            return
        try:
            self.on_stop()
        except Exception as e:
            message = log_exception(e, context="Stopping shell", logger=logger)
            self.output.write_error(f"{ERROR_PROMPT}{message}")
