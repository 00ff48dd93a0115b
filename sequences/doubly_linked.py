"""
BudgetKit Doubly Linked List
============================
Append-only doubly linked list with a navigation cursor.

The cursor starts on the first element added. next() at the tail and
previous() at the head leave it in place and return the same element.
"""

from typing import Any, Iterable, Iterator, Optional


class Node:
    __slots__ = ('value', 'next', 'prev')

    def __init__(self, value: Any):
        self.value = value
        self.next: Optional['Node'] = None
        self.prev: Optional['Node'] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class DoublyLinkedList:
    """
    Usage:
        history = DoublyLinkedList(["jan", "feb", "mar"])
        history.next()       # "feb"
        history.previous()   # "jan"
        history.previous()   # "jan" (clamped at head)
    """

    def __init__(self, items: Optional[Iterable[Any]] = None):
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._cursor: Optional[Node] = None
        self._size = 0
        if items is not None:
            for item in items:
                self.add_last(item)

    @property
    def head_node(self) -> Optional[Node]:
        return self._head

    @property
    def tail_node(self) -> Optional[Node]:
        return self._tail

    def add_last(self, value: Any) -> None:
        node = Node(value)
        if self._tail is None:
            self._head = self._tail = node
            self._cursor = node
        else:
            self._tail.next = node
            node.prev = self._tail
            self._tail = node
        self._size += 1

    add = add_last

    # ─── Cursor ─────────────────────────────────────────────────────

    def current(self) -> Optional[Any]:
        return self._cursor.value if self._cursor is not None else None

    def next(self) -> Optional[Any]:
        if self._cursor is not None and self._cursor.next is not None:
            self._cursor = self._cursor.next
        return self.current()

    def previous(self) -> Optional[Any]:
        if self._cursor is not None and self._cursor.prev is not None:
            self._cursor = self._cursor.prev
        return self.current()

    def reset(self) -> None:
        self._cursor = self._head

    # ─── Container protocol ─────────────────────────────────────────

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev
