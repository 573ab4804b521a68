from __future__ import annotations

from typing import Any


class NodeNotFound(KeyError):
    """
    Raised when an operation requires a node that is not in the store.
    """

    def __init__(self, value: Any) -> None:
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"node not found: {self.value!r}"


class InvariantViolation(AssertionError):
    """
    Internal bookkeeping of a GraphStore is inconsistent.

    This is a defect in the store itself and is never caught by the library.
    """
