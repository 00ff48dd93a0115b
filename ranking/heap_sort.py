"""
BudgetKit Heap Sort
===================
O(n log n) sorts built on the max-heap ordering contract. Neither is stable.

  - sort_descending(): new list, built by repeated extraction from a MaxHeap
  - heapsort(): classic in-place heap sort of a mutable list
"""

from typing import Any, Iterable, List

from ranking.max_heap import KeyFunc, MaxHeap, _identity, heapify, sift_down


def sort_descending(items: Iterable[Any], key: KeyFunc = None) -> List[Any]:
    heap = MaxHeap.from_iterable(items, key)
    result: List[Any] = []
    while not heap.is_empty():
        result.append(heap.poll())
    return result


def heapsort(data: List[Any], key: KeyFunc = None, reverse: bool = False) -> None:
    """
    Sort data in place, ascending (or descending with reverse=True).

    The max is swapped to the end of the shrinking heap region each round,
    which leaves the list ascending; reverse flips it afterwards.
    """
    key = key if key is not None else _identity
    heapify(data, key)
    for end in range(len(data) - 1, 0, -1):
        data[0], data[end] = data[end], data[0]
        sift_down(data, 0, end, key)
    if reverse:
        data.reverse()
