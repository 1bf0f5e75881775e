"""
Output sink used by the dispatcher.

The dispatcher only ever writes through this interface, so it does not
depend on a terminal implementation.
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO, runtime_checkable

RED = "\033[91m"
RESET = "\033[0m"

PLAIN_PROMPT = "[Stellar]>>> "


@runtime_checkable
class Output(Protocol):
    """Where the shell writes results."""

    def write(self, text: str) -> None:
        """Write text as-is."""

    def write_line(self, line: str) -> None:
        """Write one line."""

    def write_error(self, line: str) -> None:
        """Write one error line."""


class ConsoleOutput:
    """Writes to a text stream (stdout by default), colouring errors red."""

    def __init__(self, stream: TextIO | None = None, ansi: bool = True):
        self._stream = stream
        self.ansi = ansi

    @property
    def stream(self) -> TextIO:
        # Resolve lazily so redirected sys.stdout is honoured
        return self._stream or sys.stdout

    def write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def write_line(self, line: str) -> None:
        self.write(f"{line}\n")

    def write_error(self, line: str) -> None:
        if self.ansi:
            self.write_line(f"{RED}{line}{RESET}")
        else:
            self.write_line(line)
