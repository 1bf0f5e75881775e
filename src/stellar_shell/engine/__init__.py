"""
Engine module: expression evaluation and the variable environment.
"""

from stellar_shell.engine.context import get_current_executor, get_properties
from stellar_shell.engine.evaluator import Evaluator
from stellar_shell.engine.executor import Executor, StellarExecutor

__all__ = [
    "Evaluator",
    "Executor",
    "StellarExecutor",
    "get_current_executor",
    "get_properties",
]
