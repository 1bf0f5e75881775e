"""
Feature-rich REPL (Read-Eval-Print Loop) implementation using prompt_toolkit.

Provides in-session history, tab completion and a coloured prompt.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.styles import Style

from stellar_shell.cli.output import PLAIN_PROMPT

if TYPE_CHECKING:
    from stellar_shell.cli.completion import CompletionEngine
    from stellar_shell.cli.shell import StellarShell


class StellarCompleter(Completer):
    """Adapts the CompletionEngine to prompt_toolkit.

    The engine returns whole-buffer replacements, so each completion
    replaces everything before the cursor.
    """

    def __init__(self, engine: "CompletionEngine"):
        self.engine = engine

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        for replacement in self.engine.complete(text):
            yield Completion(
                replacement,
                start_position=-len(text),
                display=replacement.split(" ")[-1] or replacement,
            )


def get_style() -> Style:
    """Get the prompt style."""
    return Style.from_dict({
        "bracket": "ansired",
        "name": "ansigreen bold",
        "arrows": "ansigreen underline",
    })


def get_prompt(ansi: bool = True):
    """The `[Stellar]>>> ` prompt, styled unless ANSI is disabled."""
    if not ansi:
        return PLAIN_PROMPT
    return FormattedText([
        ("class:bracket", "["),
        ("class:name", "Stellar"),
        ("class:bracket", "]"),
        ("class:arrows", ">>>"),
        ("", " "),
    ])


def repl(shell: "StellarShell") -> None:
    """Run the interactive REPL until the shell is stopped or Ctrl+D.

    Features:
        - Command history for this session (Up/Down, Ctrl+R)
        - Tab completion for functions, %magic and ?doc lookups
        - Ctrl+C clears the current line, Ctrl+D exits

    Args:
        shell: The StellarShell whose dispatcher handles each line.
    """
    bindings = KeyBindings()

    @bindings.add("c-c")
    def _(event):
        """Handle Ctrl+C - cancel current input."""
        event.app.current_buffer.reset()

    session: PromptSession = PromptSession(
        history=InMemoryHistory(),
        completer=StellarCompleter(shell.completion),
        style=get_style(),
        key_bindings=bindings,
        complete_while_typing=False,
        enable_history_search=True,
    )

    prompt = get_prompt(shell.ansi)
    while shell.running:
        try:
            line = session.prompt(prompt)
        except EOFError:
            shell.stop()
            break
        except KeyboardInterrupt:
            continue

        shell.dispatcher.dispatch(line)
