"""
Completion engine for the Stellar shell.

Given the whole input buffer, suggests replacement buffers that complete
the token being typed:

    "TO_U"          -> "TO_UPPER"
    "abc %fun"      -> "abc %functions"
    "?TO_L"         -> "TO_LOWER"
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Iterator, Optional

from stellar_shell.cli.classifier import DOC_PREFIX, is_doc, is_magic
from stellar_shell.cli.magic import MagicRegistry, magic_registry
from stellar_shell.core.datamodels import CompletionRequest, OperationType

if TYPE_CHECKING:
    from stellar_shell.engine import Executor

logger = logging.getLogger(__name__)


def last_token(buffer: str) -> Optional[str]:
    """The text after the last single space, or None if it is empty."""
    if not buffer:
        return None
    token = buffer.split(" ")[-1]
    return token or None


def strip_off(buffer: str, last_bit: str) -> str:
    """Everything in the buffer before the last occurrence of `last_bit`."""
    index = buffer.rfind(last_bit)
    if index < 0:
        return buffer
    return buffer[:index]


def build_request(token: str) -> CompletionRequest:
    """Work out what kind of completion a (trimmed) token asks for."""
    if is_doc(token):
        return CompletionRequest(token=token[len(DOC_PREFIX):], op_type=OperationType.DOC)
    if is_magic(token):
        return CompletionRequest(token=token, op_type=OperationType.MAGIC)
    return CompletionRequest(token=token, op_type=OperationType.NORMAL)


class CompletionEngine:
    """Produces full-buffer replacement strings for the token being typed."""

    def __init__(self, executor: "Executor", magic: Optional[MagicRegistry] = None):
        self.executor = executor
        self.magic = magic or magic_registry

    def candidates(self, request: CompletionRequest) -> Iterable[str]:
        """Raw suggestions for a request, in source order."""
        if request.op_type is OperationType.MAGIC:
            return [
                name for name in self.magic.get_completions()
                if name.startswith(request.token)
            ]
        return self.executor.autocomplete(request.token, request.op_type)

    def complete(self, buffer: str) -> Iterator[str]:
        """Yield replacement buffers; yields nothing rather than raising."""
        token = last_token(buffer)
        if token is None:
            return
        last_bit = token.strip()
        if not last_bit:
            return

        request = build_request(last_bit)
        prefix = strip_off(buffer, last_bit)
        try:
            for suggestion in self.candidates(request):
                yield prefix + suggestion
        except Exception as e:
            logger.debug(f"Completion failed for {buffer!r}: {e}")
