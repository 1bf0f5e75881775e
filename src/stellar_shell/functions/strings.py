"""String functions."""

from __future__ import annotations

from stellar_shell.core import stellar_function


@stellar_function(
    name="TO_UPPER",
    description="Transforms the first argument to an uppercase string.",
    params=["input - String"],
    returns="Uppercase string",
)
def to_upper(value):
    return None if value is None else str(value).upper()


@stellar_function(
    name="TO_LOWER",
    description="Transforms the first argument to a lowercase string.",
    params=["input - String"],
    returns="Lowercase string",
)
def to_lower(value):
    return None if value is None else str(value).lower()


@stellar_function(
    name="TRIM",
    description="Trims whitespace from both sides of a string.",
    params=["input - String"],
    returns="String",
)
def trim(value):
    return None if value is None else str(value).strip()


@stellar_function(
    name="JOIN",
    description="Joins the components of the list with the specified delimiter.",
    params=["list - List of strings", "delim - String delimiter"],
    returns="String",
)
def join(items, delim):
    if items is None:
        return None
    return str(delim).join(str(i) for i in items if i is not None)


@stellar_function(
    name="SPLIT",
    description="Splits the string by the delimiter.",
    params=["input - String to split", "delim - String delimiter"],
    returns="List of strings",
)
def split(value, delim):
    if value is None:
        return None
    return str(value).split(str(delim))


@stellar_function(
    name="STARTS_WITH",
    description="Determines whether a string starts with a prefix.",
    params=["string - The string to test", "prefix"],
    returns="True if the string starts with the specified prefix and false if otherwise",
)
def starts_with(value, prefix):
    if value is None or prefix is None:
        return False
    return str(value).startswith(str(prefix))


@stellar_function(
    name="ENDS_WITH",
    description="Determines whether a string ends with a suffix.",
    params=["string - The string to test", "suffix - The proposed suffix"],
    returns="True if the string ends with the specified suffix and false if otherwise",
)
def ends_with(value, suffix):
    if value is None or suffix is None:
        return False
    return str(value).endswith(str(suffix))


@stellar_function(
    name="FORMAT",
    description="Returns a formatted string using the specified format string and arguments.",
    params=["format - string", "arguments... - object(s)"],
    returns="A formatted string",
)
def format_string(fmt, *args):
    return str(fmt).format(*args)
