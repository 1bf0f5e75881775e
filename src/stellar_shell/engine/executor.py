"""
Stellar executor: evaluates expressions and owns the variable environment.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Optional, Protocol, runtime_checkable

from stellar_shell.core.datamodels import OperationType, VariableResult
from stellar_shell.core.exceptions import EvaluationError, StellarError
from stellar_shell.core.registry import FunctionRegistry
from stellar_shell.engine.context import reset_current_executor, set_current_executor
from stellar_shell.engine.evaluator import Evaluator

logger = logging.getLogger(__name__)


@runtime_checkable
class Executor(Protocol):
    """What the shell needs from an expression executor."""

    @property
    def function_registry(self) -> FunctionRegistry: ...

    @property
    def global_config(self) -> Optional[dict[str, Any]]: ...

    def execute(self, expression: str) -> Any: ...

    def assign(self, name: str, expression: Optional[str], value: Any) -> None: ...

    def get_variables(self) -> dict[str, Any]: ...

    def autocomplete(self, token: str, op_type: OperationType) -> Iterable[str]: ...


class StellarExecutor:
    """Default executor backed by the built-in expression evaluator."""

    def __init__(
        self,
        registry: FunctionRegistry | None = None,
        properties: dict[str, str] | None = None,
        global_config: dict[str, Any] | None = None,
    ):
        self._registry = registry if registry is not None else FunctionRegistry()
        self._evaluator = Evaluator(self._registry)
        self._variables: dict[str, VariableResult] = {}
        self.properties: dict[str, str] = dict(properties or {})
        self._global_config = global_config

    @property
    def function_registry(self) -> FunctionRegistry:
        return self._registry

    @property
    def global_config(self) -> Optional[dict[str, Any]]:
        return self._global_config

    @property
    def variables(self) -> dict[str, VariableResult]:
        """Current bindings, including the expression that produced each value."""
        return dict(self._variables)

    def execute(self, expression: str) -> Any:
        """Evaluate an expression against the current variables.

        Raises:
            EvaluationError: If the expression cannot be parsed or evaluated.
        """
        values = self.get_variables()
        token = set_current_executor(self)
        try:
            return self._evaluator.evaluate(expression, values)
        except EvaluationError:
            raise
        except StellarError as e:
            raise EvaluationError(str(e)) from e
        finally:
            reset_current_executor(token)

    def assign(self, name: str, expression: Optional[str], value: Any) -> None:
        """Bind a variable. The value may be None."""
        self._variables[name] = VariableResult(value=value, expression=expression)
        logger.debug(f"Assigned {name} = {value!r}")

    def get_variables(self) -> dict[str, Any]:
        """Variable name -> value, in assignment order."""
        return {name: result.value for name, result in self._variables.items()}

    def autocomplete(self, token: str, op_type: OperationType) -> Iterator[str]:
        """Suggest function names starting with the token.

        Magic command names are not known here; the shell supplies them.
        """
        if op_type is OperationType.MAGIC:
            return
        for name in self._registry.names():
            if name.startswith(token):
                yield name
