"""
BudgetKit Bidirectional Sequences
=================================
Two cursor-based sequences with one external contract:
add()/add_last(), current(), next(), previous().

  - doubly_linked: DoublyLinkedList (explicit next/prev references)
  - xor_linked: XorLinkedList (one XOR-combined link per arena slot)

Cursor movement clamps at the head and tail; it never wraps or raises.
add() returns None on both; XorLinkedList exposes arena handles through
head_handle, tail_handle and link().
"""

from sequences.doubly_linked import DoublyLinkedList, Node
from sequences.xor_linked import XorLinkedList, NULL_HANDLE

__all__ = ["DoublyLinkedList", "Node", "XorLinkedList", "NULL_HANDLE"]
