from __future__ import annotations
from typing import Iterator

from bprog import Value
from bprog.errors import StackEmpty


class OperandStack:
    """LIFO operand stack owned by a single evaluation call.

    Every pop is checked; underflow raises StackEmpty instead of IndexError.
    """

    __slots__ = ("items",)

    def __init__(self) -> None:
        self.items: list[Value] = []

    def push(self, value: Value) -> None:
        self.items.append(value)

    def pop(self) -> Value:
        if not self.items:
            raise StackEmpty("Stack underflow")
        return self.items.pop()

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)

    def __iter__(self) -> Iterator[Value]:
        # bottom to top
        return iter(self.items)

    def __repr__(self):
        return f"OperandStack({self.items!r})"
