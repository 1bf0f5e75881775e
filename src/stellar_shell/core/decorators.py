"""
Decorators for declaring Stellar functions.
"""

from __future__ import annotations

from typing import Callable, Sequence

from stellar_shell.core.datamodels import FunctionInfo

INFO_ATTR = "__stellar_info__"


def stellar_function(
    name: str,
    description: str = "",
    params: Sequence[str] = (),
    returns: str = "",
) -> Callable:
    """
    Decorator that attaches a FunctionInfo to a plain Python function.

    The function is not registered here; the loader collects decorated
    functions from a module and adds them to a FunctionRegistry.

    Usage:
        @stellar_function(
            name="TO_UPPER",
            description="Transforms the first argument to an uppercase string.",
            params=["input - String"],
            returns="Uppercase string",
        )
        def to_upper(value): ...
    """
    def decorator(fn: Callable) -> Callable:
        info = FunctionInfo(
            name=name,
            description=description or "",
            params=tuple(params),
            returns=returns or "",
            callable_fn=fn,
        )
        setattr(fn, INFO_ATTR, info)
        return fn
    return decorator


def get_function_info(fn: Callable) -> FunctionInfo | None:
    """Get the FunctionInfo attached by @stellar_function, if any."""
    return getattr(fn, INFO_ATTR, None)
