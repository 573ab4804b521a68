from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Literal, Tuple, Union


NodeValue = Union["Node", str, int]


@dataclass(frozen=True)
class Node:
    """
    Tagged node label: either text or an integer.

    Equality covers the tag as well as the payload, so the text "1"
    and the integer 1 are distinct nodes.
    """

    kind: Literal["str", "int"]
    label: Union[str, int]

    def __post_init__(self) -> None:
        if self.kind == "str" and isinstance(self.label, str):
            return
        # bool is an int subclass but not a node label
        if (
            self.kind == "int"
            and isinstance(self.label, int)
            and not isinstance(self.label, bool)
        ):
            return
        raise TypeError(f"label {self.label!r} does not match node kind {self.kind!r}")

    @staticmethod
    def text(label: str) -> "Node":
        return Node(kind="str", label=label)

    @staticmethod
    def integer(label: int) -> "Node":
        return Node(kind="int", label=label)

    @staticmethod
    def of(value: NodeValue) -> "Node":
        if isinstance(value, Node):
            return value
        if isinstance(value, bool):
            raise TypeError(f"unsupported node value: {value!r}")
        if isinstance(value, str):
            return Node.text(value)
        if isinstance(value, int):
            return Node.integer(value)
        raise TypeError(f"unsupported node value: {value!r}")

    def __str__(self) -> str:
        return str(self.label)


@dataclass(frozen=True)
class Edge:
    """
    Undirected edge between two node handles.
    """

    u: int
    v: int

    def __iter__(self) -> Iterator[int]:
        yield self.u
        yield self.v

    def as_tuple(self) -> Tuple[int, int]:
        return (self.u, self.v)

    def key(self) -> frozenset:
        return frozenset((self.u, self.v))
