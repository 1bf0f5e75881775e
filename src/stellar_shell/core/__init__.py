"""
Core module for the stellar_shell package.

Provides the Function Registry, data models, and input helpers shared by
the executor and the shell front end.
"""

from stellar_shell.core.datamodels import (
    Assignment,
    CompletionRequest,
    FunctionInfo,
    OperationType,
    VariableResult,
)
from stellar_shell.core.decorators import get_function_info, stellar_function
from stellar_shell.core.exceptions import (
    ConfigError,
    EvaluationError,
    FunctionNotFoundError,
    FunctionRegistrationError,
    ParseError,
    StellarError,
)
from stellar_shell.core.helpers import (
    ASSIGNMENT_OPERATOR,
    format_value,
    is_assignment,
    parse_assignment,
)
from stellar_shell.core.registry import FunctionRegistry

__all__ = [
    # Registry
    "FunctionRegistry",
    # Models
    "Assignment",
    "CompletionRequest",
    "FunctionInfo",
    "OperationType",
    "VariableResult",
    # Exceptions
    "StellarError",
    "ParseError",
    "EvaluationError",
    "FunctionNotFoundError",
    "FunctionRegistrationError",
    "ConfigError",
    # Decorators
    "stellar_function",
    "get_function_info",
    # Helpers
    "ASSIGNMENT_OPERATOR",
    "format_value",
    "is_assignment",
    "parse_assignment",
]
