"""Numeric functions."""

from __future__ import annotations

import statistics

from stellar_shell.core import stellar_function


@stellar_function(
    name="ABS",
    description="Returns the absolute value of a number.",
    params=["number - The number to take the absolute value of"],
    returns="The absolute value of the number passed in.",
)
def absolute(number):
    return None if number is None else abs(number)


@stellar_function(
    name="ROUND",
    description="Rounds a number to the nearest integer.",
    params=["number - The number to round"],
    returns="The nearest integer.",
)
def round_number(number):
    return None if number is None else round(number)


@stellar_function(
    name="MAX",
    description="Returns the maximum value of a list of input values.",
    params=["input - List of values"],
    returns="The maximum value in the list, or null if the list is empty",
)
def maximum(values):
    values = [v for v in (values or []) if v is not None]
    return max(values) if values else None


@stellar_function(
    name="MIN",
    description="Returns the minimum value of a list of input values.",
    params=["input - List of values"],
    returns="The minimum value in the list, or null if the list is empty",
)
def minimum(values):
    values = [v for v in (values or []) if v is not None]
    return min(values) if values else None


@stellar_function(
    name="STATS.MEAN",
    description="Calculates the mean of the values.",
    params=["values - List of numbers"],
    returns="The mean of the values, or null if there are none",
)
def stats_mean(values):
    values = [v for v in (values or []) if v is not None]
    return statistics.fmean(values) if values else None
