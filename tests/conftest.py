"""
Shared fixtures for the Stellar shell tests.
"""

import logging

import pytest

from stellar_shell.core import FunctionRegistry
from stellar_shell.engine import StellarExecutor
from stellar_shell.utils.logging import ROOT_LOGGER, close_logging


class RecordingOutput:
    """Output sink that records everything written, split into lines."""

    def __init__(self):
        self.text = ""
        self.errors: list[str] = []

    def write(self, text: str) -> None:
        self.text += text

    def write_line(self, line: str) -> None:
        self.write(f"{line}\n")

    def write_error(self, line: str) -> None:
        self.errors.append(line)
        self.write_line(line)

    @property
    def lines(self) -> list[str]:
        return self.text.splitlines()


@pytest.fixture
def output():
    """Recording output sink."""
    return RecordingOutput()


@pytest.fixture
def registry():
    """Registry with a handful of documented functions."""
    registry = FunctionRegistry()

    @registry.register(
        name="TO_UPPER",
        description="Transforms the first argument to an uppercase string.",
        params=["input - String"],
        returns="Uppercase string",
    )
    def to_upper(value):
        return value.upper()

    @registry.register(
        name="TO_LOWER",
        description="Transforms the first argument to a lowercase string.",
        params=["input - String"],
        returns="Lowercase string",
    )
    def to_lower(value):
        return value.lower()

    @registry.register(name="NOW", description="Current time.", returns="Long")
    def now():
        return 1234567890

    @registry.register(name="FAIL", description="Always fails.", returns="Nothing")
    def fail():
        raise RuntimeError("boom")

    return registry


@pytest.fixture
def executor(registry):
    """Executor backed by the test registry."""
    return StellarExecutor(registry)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo configure_logging() so caplog keeps seeing package records."""
    yield
    close_logging()
    logging.getLogger(ROOT_LOGGER).propagate = True
    logging.getLogger(ROOT_LOGGER).setLevel(logging.NOTSET)
