"""
Expression evaluator used by the default executor.

Evaluates a small, Python-syntax subset of expressions by walking the
`ast` tree; nothing is ever passed to `eval`. Supported:

    literals          1, 2.5, 'text', [1, 2], {'a': 1}, (1, 2)
    constants         true, false, null (any case)
    variables         x, my_var  (unknown names evaluate to null)
    arithmetic        + - * / // %  and unary - + not
    logic             and, or, == != < <= > >= in, not in
    conditionals      'a' if x > 1 else 'b'
    subscripts        items[0], m['key']
    function calls    TO_UPPER('abc'), STATS.MEAN([1, 2, 3])
"""

from __future__ import annotations

import ast
import operator
from typing import Any, Mapping

from stellar_shell.core.exceptions import (
    EvaluationError,
    FunctionNotFoundError,
    ParseError,
)
from stellar_shell.core.registry import FunctionRegistry

_CONSTANTS = {"true": True, "false": False, "null": None}

_BIN_OPS = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.FloorDiv: operator.floordiv,
    ast.Mod: operator.mod,
}

_UNARY_OPS = {
    ast.USub: operator.neg,
    ast.UAdd: operator.pos,
    ast.Not: operator.not_,
}

_COMPARE_OPS = {
    ast.Eq: operator.eq,
    ast.NotEq: operator.ne,
    ast.Lt: operator.lt,
    ast.LtE: operator.le,
    ast.Gt: operator.gt,
    ast.GtE: operator.ge,
    ast.In: lambda a, b: a in b,
    ast.NotIn: lambda a, b: a not in b,
}


class Evaluator:
    """Walks a parsed expression against variables and registered functions."""

    def __init__(self, registry: FunctionRegistry):
        self.registry = registry

    def parse(self, expression: str) -> ast.expr:
        """Parse an expression into an AST node."""
        try:
            return ast.parse(expression.strip(), mode="eval").body
        except SyntaxError as e:
            raise ParseError(f"Unable to parse: {expression.strip()} ({e.msg})") from e

    def evaluate(self, expression: str, variables: Mapping[str, Any]) -> Any:
        """Evaluate an expression; blank input evaluates to None."""
        if not expression or not expression.strip():
            return None
        node = self.parse(expression)
        return self._eval(node, variables)

    def _eval(self, node: ast.AST, variables: Mapping[str, Any]) -> Any:
        handler = getattr(self, f"_eval_{type(node).__name__}", None)
        if handler is None:
            raise ParseError(f"Unsupported syntax: {type(node).__name__}")
        return handler(node, variables)

    def _eval_Constant(self, node: ast.Constant, variables: Mapping[str, Any]) -> Any:
        return node.value

    def _eval_Name(self, node: ast.Name, variables: Mapping[str, Any]) -> Any:
        if node.id in variables:
            return variables[node.id]
        lowered = node.id.lower()
        if lowered in _CONSTANTS:
            return _CONSTANTS[lowered]
        return None

    def _eval_List(self, node: ast.List, variables: Mapping[str, Any]) -> list:
        return [self._eval(e, variables) for e in node.elts]

    def _eval_Tuple(self, node: ast.Tuple, variables: Mapping[str, Any]) -> tuple:
        return tuple(self._eval(e, variables) for e in node.elts)

    def _eval_Dict(self, node: ast.Dict, variables: Mapping[str, Any]) -> dict:
        if any(k is None for k in node.keys):
            raise ParseError("Unsupported syntax: dict unpacking")
        return {
            self._eval(k, variables): self._eval(v, variables)
            for k, v in zip(node.keys, node.values)
        }

    def _eval_BinOp(self, node: ast.BinOp, variables: Mapping[str, Any]) -> Any:
        op = _BIN_OPS.get(type(node.op))
        if op is None:
            raise ParseError(f"Unsupported operator: {type(node.op).__name__}")
        left = self._eval(node.left, variables)
        right = self._eval(node.right, variables)
        try:
            return op(left, right)
        except Exception as e:
            raise EvaluationError(f"Unable to apply {type(node.op).__name__}: {e}") from e

    def _eval_UnaryOp(self, node: ast.UnaryOp, variables: Mapping[str, Any]) -> Any:
        op = _UNARY_OPS.get(type(node.op))
        if op is None:
            raise ParseError(f"Unsupported operator: {type(node.op).__name__}")
        operand = self._eval(node.operand, variables)
        try:
            return op(operand)
        except Exception as e:
            raise EvaluationError(f"Unable to apply {type(node.op).__name__}: {e}") from e

    def _eval_BoolOp(self, node: ast.BoolOp, variables: Mapping[str, Any]) -> Any:
        is_and = isinstance(node.op, ast.And)
        result: Any = None
        for value in node.values:
            result = self._eval(value, variables)
            if is_and and not result:
                return result
            if not is_and and result:
                return result
        return result

    def _eval_Compare(self, node: ast.Compare, variables: Mapping[str, Any]) -> bool:
        left = self._eval(node.left, variables)
        for op_node, comparator in zip(node.ops, node.comparators):
            op = _COMPARE_OPS.get(type(op_node))
            if op is None:
                raise ParseError(f"Unsupported comparison: {type(op_node).__name__}")
            right = self._eval(comparator, variables)
            try:
                if not op(left, right):
                    return False
            except Exception as e:
                raise EvaluationError(f"Unable to compare: {e}") from e
            left = right
        return True

    def _eval_IfExp(self, node: ast.IfExp, variables: Mapping[str, Any]) -> Any:
        if self._eval(node.test, variables):
            return self._eval(node.body, variables)
        return self._eval(node.orelse, variables)

    def _eval_Subscript(self, node: ast.Subscript, variables: Mapping[str, Any]) -> Any:
        container = self._eval(node.value, variables)
        key = self._eval(node.slice, variables)
        try:
            return container[key]
        except (KeyError, IndexError, TypeError) as e:
            raise EvaluationError(f"Unable to index {type(container).__name__}: {e}") from e

    def _eval_Call(self, node: ast.Call, variables: Mapping[str, Any]) -> Any:
        if node.keywords:
            raise ParseError("Keyword arguments are not supported")
        name = _dotted_name(node.func)
        try:
            info = self.registry.get(name)
        except FunctionNotFoundError as e:
            raise EvaluationError(str(e)) from e
        args = [self._eval(a, variables) for a in node.args]
        try:
            return info(*args)
        except Exception as e:
            raise EvaluationError(f"Unable to execute {name}: {e}") from e


def _dotted_name(node: ast.AST) -> str:
    """Collapse `A.B.C` attribute chains into a dotted function name."""
    if isinstance(node, ast.Name):
        return node.id
    if isinstance(node, ast.Attribute):
        return f"{_dotted_name(node.value)}.{node.attr}"
    raise ParseError("Only named functions can be called")
