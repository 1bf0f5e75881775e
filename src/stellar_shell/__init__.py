"""
stellar_shell - Interactive shell for the Stellar expression language

Reads one line at a time, classifies it (expression, assignment, %magic,
?doc lookup, comment or quit), dispatches it to an executor and prints the
result. Functions load in the background and are offered for tab
completion as soon as they are known.

Example usage:
    from stellar_shell import FunctionRegistry, StellarExecutor, StellarShell
    from stellar_shell.functions import load_functions_async

    registry = FunctionRegistry()
    load_functions_async(registry)
    shell = StellarShell(StellarExecutor(registry))
    shell.dispatcher.dispatch("x := TO_UPPER('stellar')")
    shell.dispatcher.dispatch("x")
"""

__version__ = "0.1.0"

# Core exports
from stellar_shell.core import (
    EvaluationError,
    FunctionInfo,
    FunctionNotFoundError,
    FunctionRegistry,
    OperationType,
    ParseError,
    StellarError,
    stellar_function,
)
from stellar_shell.engine import Executor, StellarExecutor


# Shell is imported lazily to keep `import stellar_shell` light
def __getattr__(name):
    if name == "StellarShell":
        from stellar_shell.cli.shell import StellarShell
        return StellarShell
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",
    # Core
    "FunctionRegistry",
    "FunctionInfo",
    "OperationType",
    "StellarError",
    "ParseError",
    "EvaluationError",
    "FunctionNotFoundError",
    "stellar_function",
    # Engine
    "Executor",
    "StellarExecutor",
    # Shell (lazy loaded)
    "StellarShell",
]
