"""Type conversion functions."""

from __future__ import annotations

from stellar_shell.core import format_value, stellar_function


@stellar_function(
    name="TO_STRING",
    description="Transforms the first argument to a string.",
    params=["input - Object"],
    returns="String",
)
def to_string(value):
    return None if value is None else format_value(value)


@stellar_function(
    name="TO_INTEGER",
    description="Transforms the first argument to an integer.",
    params=["input - Object of string or numeric type"],
    returns="Integer version of the first argument",
)
def to_integer(value):
    if value is None:
        return None
    if isinstance(value, str):
        return int(float(value.strip()))
    return int(value)


@stellar_function(
    name="TO_FLOAT",
    description="Transforms the first argument to a float.",
    params=["input - Object of string or numeric type"],
    returns="Float version of the first argument",
)
def to_float(value):
    return None if value is None else float(value)


@stellar_function(
    name="TO_BOOLEAN",
    description="Transforms the first argument to a boolean.",
    params=["input - Object"],
    returns="True if the argument is true (case-insensitive for strings) and false if otherwise",
)
def to_boolean(value):
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)
