"""
Function Registry for Stellar functions.

The registry is filled by a background loader while the shell is already
accepting input, so every read returns a snapshot of what is known at that
moment. Entries are never removed or replaced.
"""

from __future__ import annotations

import threading
from typing import Callable, Iterator, Sequence

from stellar_shell.core.datamodels import FunctionInfo
from stellar_shell.core.decorators import get_function_info
from stellar_shell.core.exceptions import (
    FunctionNotFoundError,
    FunctionRegistrationError,
)


class FunctionRegistry:
    """Thread-safe, append-only registry of Stellar functions."""

    def __init__(self):
        self._functions: dict[str, FunctionInfo] = {}
        self._lock = threading.RLock()
        self._loaded = threading.Event()

    def add(self, info: FunctionInfo) -> FunctionInfo:
        """Add a function descriptor. Names are unique and cannot be replaced."""
        with self._lock:
            if info.name in self._functions:
                raise FunctionRegistrationError(f"Function name collision: {info.name}")
            self._functions[info.name] = info
        return info

    def register(
        self,
        fn: Callable | None = None,
        *,
        name: str | None = None,
        description: str | None = None,
        params: Sequence[str] | None = None,
        returns: str | None = None,
    ) -> Callable:
        """
        Register a function. Can be used as decorator with or without arguments.

        Usage:
            @registry.register
            def TO_UPPER(value): ...

            @registry.register(name="STATS.MEAN", params=["values - List"])
            def stats_mean(values): ...

        Metadata attached with @stellar_function is used when no explicit
        values are given.
        """
        def decorator(func: Callable) -> Callable:
            declared = get_function_info(func)
            info = FunctionInfo(
                name=name or (declared.name if declared else func.__name__),
                description=description if description is not None
                else (declared.description if declared else _first_doc_line(func)),
                params=tuple(params) if params is not None
                else (declared.params if declared else ()),
                returns=returns if returns is not None
                else (declared.returns if declared else ""),
                callable_fn=func,
            )
            self.add(info)
            return func

        # Handle @registry.register vs @registry.register(...)
        if fn is not None:
            return decorator(fn)
        return decorator

    def get(self, name: str) -> FunctionInfo:
        """Resolve a function by exact name."""
        with self._lock:
            info = self._functions.get(name)
        if info is None:
            raise FunctionNotFoundError(f"Unable to resolve function {name}")
        return info

    def function_info(self) -> tuple[FunctionInfo, ...]:
        """Snapshot of all functions known right now, in registration order."""
        with self._lock:
            return tuple(self._functions.values())

    def names(self) -> tuple[str, ...]:
        """Snapshot of all function names known right now, in registration order."""
        with self._lock:
            return tuple(self._functions)

    def mark_loaded(self) -> None:
        """Signal that background loading has finished."""
        self._loaded.set()

    @property
    def is_loaded(self) -> bool:
        return self._loaded.is_set()

    def wait_until_loaded(self, timeout: float | None = None) -> bool:
        """Block until background loading finishes. Not used by the REPL itself."""
        return self._loaded.wait(timeout)

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._functions

    def __iter__(self) -> Iterator[FunctionInfo]:
        return iter(self.function_info())

    def __len__(self) -> int:
        with self._lock:
            return len(self._functions)


def _first_doc_line(fn: Callable) -> str:
    doc = (fn.__doc__ or "").strip()
    return doc.split("\n\n", 1)[0].strip()
