"""
BudgetKit XOR Linked List
=========================
Space-compacted doubly linked list. Nodes live in an arena (parallel lists
indexed by integer handle) and each node keeps a single combined link:

    link[h] = handle_of_prev(h) ^ handle_of_next(h)

Handle 0 is the null handle and slot 0 of the arena is never used, so the
head's link is just its successor and the tail's link is its predecessor.

Decoding a neighbor needs the handle the walk arrived from:

    next_handle = link[current] ^ came_from
    prev_handle = came_from  (then came_from = link[prev_handle] ^ current)

The cursor is tracked as (cursor, cursor_prev) for exactly that reason.
Observable behavior matches DoublyLinkedList.
"""

from typing import Any, Iterable, Iterator, List, Optional

NULL_HANDLE = 0


class XorLinkedList:
    """
    Usage:
        history = XorLinkedList(["jan", "feb", "mar"])
        history.next()        # "feb"
        history.tail_handle   # 3
        history.link(2)       # 1 ^ 3
    """

    def __init__(self, items: Optional[Iterable[Any]] = None):
        self._values: List[Any] = [None]
        self._links: List[int] = [NULL_HANDLE]
        self._head = NULL_HANDLE
        self._tail = NULL_HANDLE
        self._cursor = NULL_HANDLE
        self._cursor_prev = NULL_HANDLE
        if items is not None:
            for item in items:
                self.add(item)

    def add(self, value: Any) -> None:
        """Append value in O(1). The new node becomes tail_handle."""
        handle = len(self._values)
        self._values.append(value)
        self._links.append(self._tail ^ NULL_HANDLE)
        if self._tail == NULL_HANDLE:
            self._head = handle
            self._cursor = handle
            self._cursor_prev = NULL_HANDLE
        else:
            # Old tail's successor changes from null to the new handle.
            self._links[self._tail] ^= handle
        self._tail = handle

    add_last = add

    @property
    def head_handle(self) -> int:
        return self._head

    @property
    def tail_handle(self) -> int:
        return self._tail

    def link(self, handle: int) -> int:
        """Combined link stored for a handle."""
        return self._links[handle]

    # ─── Cursor ─────────────────────────────────────────────────────

    def current(self) -> Optional[Any]:
        if self._cursor == NULL_HANDLE:
            return None
        return self._values[self._cursor]

    def next(self) -> Optional[Any]:
        if self._cursor != NULL_HANDLE:
            following = self._links[self._cursor] ^ self._cursor_prev
            if following != NULL_HANDLE:
                self._cursor_prev = self._cursor
                self._cursor = following
        return self.current()

    def previous(self) -> Optional[Any]:
        if self._cursor != NULL_HANDLE and self._cursor_prev != NULL_HANDLE:
            preceding = self._cursor_prev
            self._cursor_prev = self._links[preceding] ^ self._cursor
            self._cursor = preceding
        return self.current()

    def reset(self) -> None:
        self._cursor = self._head
        self._cursor_prev = NULL_HANDLE

    # ─── Container protocol ─────────────────────────────────────────

    def is_empty(self) -> bool:
        return self._head == NULL_HANDLE

    def __len__(self) -> int:
        return len(self._values) - 1

    def __iter__(self) -> Iterator[Any]:
        return self._walk(self._head)

    def __reversed__(self) -> Iterator[Any]:
        return self._walk(self._tail)

    def _walk(self, start: int) -> Iterator[Any]:
        came_from = NULL_HANDLE
        handle = start
        while handle != NULL_HANDLE:
            yield self._values[handle]
            came_from, handle = handle, self._links[handle] ^ came_from
