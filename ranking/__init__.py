"""
BudgetKit Ranking
=================
Binary max-heap over a caller-supplied ordering key, plus heap-based sorts.

Components:
  - max_heap: MaxHeap, top_n (poll on empty returns None)
  - heap_sort: sort_descending, heapsort (in place)
"""

from ranking.max_heap import MaxHeap, top_n
from ranking.heap_sort import sort_descending, heapsort

__all__ = ["MaxHeap", "top_n", "sort_descending", "heapsort"]
