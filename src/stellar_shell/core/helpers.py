"""
Helper functions for parsing shell input.
"""

from __future__ import annotations

import re
from typing import Any

from stellar_shell.core.datamodels import Assignment

ASSIGNMENT_OPERATOR = ":="

# <identifier> := <rest>; the identifier carries no operator characters
_ASSIGNMENT_RE = re.compile(r"^\s*([A-Za-z_][A-Za-z0-9_.]*)\s*:=(.*)$", re.DOTALL)


def is_assignment(statement: str) -> bool:
    """Check whether a statement has the form `<identifier> := <rest>`."""
    return bool(statement) and _ASSIGNMENT_RE.match(statement) is not None


def parse_assignment(statement: str) -> Assignment | None:
    """Split an assignment into variable and statement, or None if it is not one."""
    match = _ASSIGNMENT_RE.match(statement or "")
    if match is None:
        return None
    return Assignment(variable=match.group(1), statement=match.group(2).strip())


def format_value(value: Any) -> str:
    """Render a Stellar value the way the shell prints it.

    Nested values use the same rules: `[1, null, true]`, `{a=1, b=null}`.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_value(v) for v in value) + "]"
    if isinstance(value, dict):
        return "{" + ", ".join(
            f"{format_value(k)}={format_value(v)}" for k, v in value.items()
        ) + "}"
    return str(value)
