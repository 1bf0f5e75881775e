"""
Executor context for function calls.

Lets Stellar functions reach the executor that is evaluating them, e.g. to
read the Stellar properties given with -p.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from stellar_shell.engine.executor import StellarExecutor

# Context variable to hold the current executor during evaluation
_current_executor: ContextVar["StellarExecutor | None"] = ContextVar("current_executor", default=None)


def get_current_executor() -> "StellarExecutor | None":
    """Get the executor that is evaluating the current expression.

    Returns:
        The current executor, or None outside of evaluation.
    """
    return _current_executor.get()


def set_current_executor(executor: "StellarExecutor | None") -> Any:
    """Set the current executor.

    Returns:
        Token that can be used to reset the context.
    """
    return _current_executor.set(executor)


def reset_current_executor(token: Any) -> None:
    """Reset the executor context to its previous value."""
    _current_executor.reset(token)


def get_properties() -> dict[str, str]:
    """Stellar properties of the current executor (empty outside of evaluation)."""
    executor = get_current_executor()
    if executor is None:
        return {}
    return dict(executor.properties)
