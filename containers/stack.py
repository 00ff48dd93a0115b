"""
BudgetKit Array Stack
=====================
LIFO stack over a fixed-size Python list that doubles when full.

Empty access is a hard error: pop() and peek() raise EmptyStackError.
"""

from typing import Any, Iterator, List


DEFAULT_CAPACITY = 16


class EmptyStackError(Exception):
    """Raised by pop()/peek() on an empty stack."""
    pass


class ArrayStack:
    """
    Array-backed stack. push() is amortized O(1).

    Slots above the top are kept as None so popped values can be collected.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self._elements: List[Any] = [None] * max(1, capacity)
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._elements)

    def push(self, value: Any) -> None:
        self._ensure_capacity(self._size + 1)
        self._elements[self._size] = value
        self._size += 1

    def pop(self) -> Any:
        if self._size == 0:
            raise EmptyStackError("pop from empty stack")
        self._size -= 1
        value = self._elements[self._size]
        self._elements[self._size] = None
        return value

    def peek(self) -> Any:
        if self._size == 0:
            raise EmptyStackError("peek at empty stack")
        return self._elements[self._size - 1]

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate top to bottom without popping."""
        for i in range(self._size - 1, -1, -1):
            yield self._elements[i]

    def _ensure_capacity(self, needed: int) -> None:
        if needed <= len(self._elements):
            return
        grown: List[Any] = [None] * (len(self._elements) * 2)
        grown[:self._size] = self._elements[:self._size]
        self._elements = grown
