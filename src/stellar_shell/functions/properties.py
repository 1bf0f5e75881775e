"""Stellar property functions."""

from __future__ import annotations

from stellar_shell.core import stellar_function
from stellar_shell.engine.context import get_properties


@stellar_function(
    name="PROPERTY_GET",
    description="Gets the value of a Stellar property.",
    params=["name - The property name", "default - Optionally the value to return if the property is not set."],
    returns="The property value as a string, the default if it is not set, or null.",
)
def property_get(name, default=None):
    return get_properties().get(name, default)


@stellar_function(
    name="PROPERTIES",
    description="Returns all Stellar properties loaded for this session.",
    returns="Map of property name to value",
)
def properties():
    return get_properties()
