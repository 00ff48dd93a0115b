"""
BudgetKit Array Queue
=====================
FIFO queue backed by a circular buffer.

Layout:
  - head: index of the oldest element
  - tail: index where the next element is written
  - When full, the buffer doubles and the live range is re-based to index 0.

Empty access is soft: dequeue() and peek() return None.
"""

from typing import Any, Iterator, List, Optional

from containers.stack import DEFAULT_CAPACITY


class ArrayQueue:
    """Circular-buffer queue. enqueue() is amortized O(1)."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self._elements: List[Any] = [None] * max(1, capacity)
        self._head = 0
        self._tail = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._elements)

    def enqueue(self, value: Any) -> None:
        self._ensure_capacity(self._size + 1)
        self._elements[self._tail] = value
        self._tail = (self._tail + 1) % len(self._elements)
        self._size += 1

    def dequeue(self) -> Optional[Any]:
        """Remove and return the oldest element, or None if empty."""
        if self._size == 0:
            return None
        value = self._elements[self._head]
        self._elements[self._head] = None
        self._head = (self._head + 1) % len(self._elements)
        self._size -= 1
        return value

    def peek(self) -> Optional[Any]:
        if self._size == 0:
            return None
        return self._elements[self._head]

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate oldest to newest without dequeuing."""
        cap = len(self._elements)
        for i in range(self._size):
            yield self._elements[(self._head + i) % cap]

    def _ensure_capacity(self, needed: int) -> None:
        cap = len(self._elements)
        if needed <= cap:
            return
        grown: List[Any] = [None] * (cap * 2)
        for i in range(self._size):
            grown[i] = self._elements[(self._head + i) % cap]
        self._elements = grown
        self._head = 0
        self._tail = self._size
