"""
Simple REPL implementation using input() and readline.

Used with --simple, or when prompt_toolkit is not wanted.
"""

from __future__ import annotations

import readline
from typing import TYPE_CHECKING

from stellar_shell.cli.output import PLAIN_PROMPT

if TYPE_CHECKING:
    from stellar_shell.cli.completion import CompletionEngine
    from stellar_shell.cli.shell import StellarShell


class ReadlineCompleter:
    """readline completer backed by the CompletionEngine."""

    def __init__(self, engine: "CompletionEngine"):
        self.engine = engine
        self.matches: list[str] = []

    def complete(self, text: str, state: int) -> str | None:
        """Return the state-th completion for text."""
        if state == 0:
            # readline replaces only `text`; the engine returns whole buffers
            line = readline.get_line_buffer()[:readline.get_endidx()]
            head = line[:len(line) - len(text)]
            self.matches = [
                replacement[len(head):]
                for replacement in self.engine.complete(line)
                if replacement.startswith(head)
            ]

        if state < len(self.matches):
            return self.matches[state]
        return None


def setup_readline(engine: "CompletionEngine") -> None:
    """Configure readline for in-session history and completion."""
    readline.set_history_length(1000)

    completer = ReadlineCompleter(engine)
    readline.set_completer(completer.complete)
    # Only split words on spaces, so %, ? and . stay part of the token
    readline.set_completer_delims(" ")
    readline.parse_and_bind("tab: complete")


def repl(shell: "StellarShell") -> None:
    """Run the simple REPL until the shell is stopped or Ctrl+D.

    Args:
        shell: The StellarShell whose dispatcher handles each line.
    """
    setup_readline(shell.completion)

    while shell.running:
        try:
            line = input(PLAIN_PROMPT)
        except EOFError:
            print()
            shell.stop()
            break
        except KeyboardInterrupt:
            # Ctrl+C during prompt - just continue
            print()
            continue

        shell.dispatcher.dispatch(line)
