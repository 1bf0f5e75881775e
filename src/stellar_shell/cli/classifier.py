"""
Input classification for the Stellar shell.

Turns a raw input line into one of a small set of command variants. The
result depends only on the text and the fixed markers below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from stellar_shell.core.helpers import parse_assignment

ERROR_PROMPT = "[!] "
MAGIC_PREFIX = "%"
MAGIC_FUNCTIONS = MAGIC_PREFIX + "functions"
MAGIC_VARS = MAGIC_PREFIX + "vars"
DOC_PREFIX = "?"
COMMENT_PREFIX = "#"
QUIT_KEYWORD = "quit"

BUILTIN_MAGIC = (MAGIC_FUNCTIONS, MAGIC_VARS)


@dataclass(frozen=True)
class Blank:
    """Empty or whitespace-only line."""


@dataclass(frozen=True)
class Comment:
    text: str


@dataclass(frozen=True)
class Quit:
    """Request to end the session."""


@dataclass(frozen=True)
class Magic:
    """A built-in magic command, e.g. %functions."""
    name: str


@dataclass(frozen=True)
class UnknownMagic:
    text: str


@dataclass(frozen=True)
class Doc:
    """Documentation lookup for the function called `name`."""
    name: str


@dataclass(frozen=True)
class Expression:
    statement: str


@dataclass(frozen=True)
class AssignmentCommand:
    variable: str
    statement: str


Command = Union[
    Blank, Comment, Quit, Magic, UnknownMagic, Doc, Expression, AssignmentCommand
]


def is_magic(text: str) -> bool:
    """Is a given expression a built-in magic?"""
    return text.startswith(MAGIC_PREFIX)


def is_doc(text: str) -> bool:
    """Is a given expression asking for function documentation?"""
    return text.startswith(DOC_PREFIX)


def classify(line: str) -> Command:
    """Classify one input line; the first matching rule wins."""
    text = (line or "").strip()
    if not text:
        return Blank()
    if is_magic(text):
        if text in BUILTIN_MAGIC:
            return Magic(text)
        return UnknownMagic(text)
    if is_doc(text):
        return Doc(text[len(DOC_PREFIX):])
    if text == QUIT_KEYWORD:
        return Quit()
    if text.startswith(COMMENT_PREFIX):
        return Comment(text)

    assignment = parse_assignment(text)
    if assignment is not None:
        return AssignmentCommand(assignment.variable, assignment.statement)
    return Expression(text)
