"""
Data models for the Stellar shell.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional

from pydantic import BaseModel, Field


class OperationType(str, Enum):
    """Kind of completion being requested."""
    NORMAL = "normal"
    MAGIC = "magic"
    DOC = "doc"


class FunctionInfo(BaseModel):
    """Immutable descriptor of a registered Stellar function."""
    name: str = Field(min_length=1)
    description: str = ""
    params: tuple[str, ...] = ()
    returns: str = ""
    callable_fn: Optional[Callable] = Field(default=None, exclude=True)

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def __call__(self, *args: Any) -> Any:
        if self.callable_fn is None:
            raise TypeError(f"Function {self.name} has no implementation")
        return self.callable_fn(*args)


class VariableResult(BaseModel):
    """A bound variable: its value and, optionally, the expression that produced it."""
    value: Any = None
    expression: Optional[str] = None


class Assignment(BaseModel):
    """A parsed `<variable> := <statement>` pair."""
    variable: str = Field(min_length=1)
    statement: str = ""


class CompletionRequest(BaseModel):
    """A single completion request: the token being typed and its kind."""
    token: str
    op_type: OperationType = OperationType.NORMAL
