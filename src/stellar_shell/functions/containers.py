"""List and map functions."""

from __future__ import annotations

from stellar_shell.core import stellar_function


@stellar_function(
    name="LENGTH",
    description="Returns the length of a string, list or map.",
    params=["input - Object of string, list or map type"],
    returns="Integer",
)
def length(value):
    if value is None:
        return 0
    return len(value)


@stellar_function(
    name="IS_EMPTY",
    description="Returns true if string, list or map is empty or null and false if otherwise.",
    params=["input - Object of string, list or map type"],
    returns="True if the string, list or map is empty or null and false if otherwise",
)
def is_empty(value):
    return value is None or len(value) == 0


@stellar_function(
    name="GET",
    description="Returns the i'th element of the list.",
    params=["input - List", "i - The index (0-based)"],
    returns="First element of the list",
)
def get(items, index):
    if items is None or index is None:
        return None
    try:
        return items[int(index)]
    except IndexError:
        return None


@stellar_function(
    name="GET_FIRST",
    description="Returns the first element of the list.",
    params=["input - List"],
    returns="First element of the list",
)
def get_first(items):
    return items[0] if items else None


@stellar_function(
    name="GET_LAST",
    description="Returns the last element of the list.",
    params=["input - List"],
    returns="Last element of the list",
)
def get_last(items):
    return items[-1] if items else None


@stellar_function(
    name="LIST_ADD",
    description="Adds an element to a list.",
    params=["list - List to add element to.", "element - Element to add to list"],
    returns="Resulting list with the item added at the end.",
)
def list_add(items, element):
    result = list(items or [])
    result.append(element)
    return result


@stellar_function(
    name="MAP_GET",
    description="Gets the value associated with a key from a map.",
    params=["key - The key", "map - The map", "default - Optionally the default value to return if the key is not in the map."],
    returns="The object associated with the key in the map. If no value is associated with the key and default is specified, then default is returned. If no value is associated with the key or default, then null is returned.",
)
def map_get(key, mapping, default=None):
    if mapping is None:
        return default
    return mapping.get(key, default)


@stellar_function(
    name="MAP_EXISTS",
    description="Checks for existence of a key in a map.",
    params=["key - The key to check for existence", "map - The map to check for existence of the key"],
    returns="True if the key is found in the map and false if otherwise.",
)
def map_exists(key, mapping):
    return mapping is not None and key in mapping
