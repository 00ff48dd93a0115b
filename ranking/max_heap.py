"""
BudgetKit Max Heap
==================
Complete binary tree stored in a dense list. Invariant: every element's key
is >= the keys of both of its children.

Ordering is an explicit capability: a key callable supplied by the caller
(identity when omitted). Elements themselves are never compared unless the
key is the identity.

  - add(): append, sift up past every ancestor whose key is <= the new key
  - poll(): remove the root, move the last element to the root, sift down
    toward the larger child. Returns None on an empty heap.
"""

from typing import Any, Callable, Iterable, List, Optional

KeyFunc = Optional[Callable[[Any], Any]]


def _identity(value: Any) -> Any:
    return value


# ─── Sift helpers (shared with heap_sort) ───────────────────────────────────

def sift_up(data: List[Any], index: int, key: Callable[[Any], Any]) -> None:
    item = data[index]
    item_key = key(item)
    while index > 0:
        parent = (index - 1) // 2
        if key(data[parent]) <= item_key:
            data[index] = data[parent]
            index = parent
        else:
            break
    data[index] = item


def sift_down(data: List[Any], index: int, size: int,
              key: Callable[[Any], Any]) -> None:
    while True:
        left = 2 * index + 1
        right = left + 1
        largest = index
        if left < size and key(data[left]) > key(data[largest]):
            largest = left
        if right < size and key(data[right]) > key(data[largest]):
            largest = right
        if largest == index:
            return
        data[index], data[largest] = data[largest], data[index]
        index = largest


def heapify(data: List[Any], key: Callable[[Any], Any]) -> None:
    """Bottom-up heap construction in O(n)."""
    for i in range(len(data) // 2 - 1, -1, -1):
        sift_down(data, i, len(data), key)


# ─── Max Heap ───────────────────────────────────────────────────────────────

class MaxHeap:
    """
    Usage:
        heap = MaxHeap(key=lambda e: e.amount)
        heap.add(expense)
        biggest = heap.poll()
    """

    def __init__(self, key: KeyFunc = None):
        self._key = key if key is not None else _identity
        self._data: List[Any] = []

    @classmethod
    def from_iterable(cls, items: Iterable[Any], key: KeyFunc = None) -> 'MaxHeap':
        heap = cls(key)
        heap._data = list(items)
        heapify(heap._data, heap._key)
        return heap

    def add(self, value: Any) -> None:
        self._data.append(value)
        sift_up(self._data, len(self._data) - 1, self._key)

    def peek(self) -> Optional[Any]:
        return self._data[0] if self._data else None

    def poll(self) -> Optional[Any]:
        """Remove and return the maximum element, or None if empty."""
        if not self._data:
            return None
        root = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            sift_down(self._data, 0, len(self._data), self._key)
        return root

    def is_empty(self) -> bool:
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    def verify_heap(self) -> List[str]:
        """Return heap-order violations (empty = healthy)."""
        issues: List[str] = []
        for i in range(1, len(self._data)):
            parent = (i - 1) // 2
            if self._key(self._data[i]) > self._key(self._data[parent]):
                issues.append(f"Index {i}: key exceeds parent at index {parent}")
        return issues


def top_n(n: int, items: Iterable[Any], key: KeyFunc = None) -> List[Any]:
    """
    The n largest items, largest first.
    Builds a heap over all items, then polls min(n, size) times.
    Items with equal keys come out in no guaranteed order.
    """
    heap = MaxHeap.from_iterable(items, key)
    result: List[Any] = []
    for _ in range(min(max(n, 0), len(heap))):
        result.append(heap.poll())
    return result
