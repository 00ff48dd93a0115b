"""
BudgetKit Sequence Tests
========================
Cursor navigation for DoublyLinkedList and XorLinkedList, including
boundary clamping and identical behavior across both variants.
"""

import os
import random
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sequences import DoublyLinkedList, XorLinkedList, NULL_HANDLE


VARIANTS = [DoublyLinkedList, XorLinkedList]


# ═══════════════════════════════════════════════════════════════════
# Shared Contract
# ═══════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("cls", VARIANTS)
class TestCursorContract:

    def test_empty(self, cls):
        seq = cls()
        assert seq.current() is None
        assert seq.next() is None
        assert seq.previous() is None
        assert seq.is_empty()
        assert len(seq) == 0

    def test_cursor_starts_at_head(self, cls):
        seq = cls(["a", "b", "c"])
        assert seq.current() == "a"

    def test_forward_and_back(self, cls):
        seq = cls(["a", "b", "c"])
        assert seq.next() == "b"
        assert seq.next() == "c"
        assert seq.previous() == "b"
        assert seq.previous() == "a"

    def test_clamps_at_tail(self, cls):
        seq = cls([1, 2])
        seq.next()
        for _ in range(5):
            assert seq.next() == 2
        assert seq.previous() == 1

    def test_clamps_at_head(self, cls):
        seq = cls([1, 2])
        for _ in range(5):
            assert seq.previous() == 1
        assert seq.next() == 2

    def test_single_element(self, cls):
        seq = cls(["only"])
        assert seq.next() == "only"
        assert seq.previous() == "only"

    def test_append_while_at_tail(self, cls):
        seq = cls()
        seq.add(1)
        assert seq.next() == 1
        seq.add_last(2)
        assert seq.next() == 2
        seq.add(3)
        assert seq.next() == 3
        assert seq.previous() == 2

    def test_iteration(self, cls):
        seq = cls(range(5))
        assert list(seq) == [0, 1, 2, 3, 4]
        assert list(reversed(seq)) == [4, 3, 2, 1, 0]
        assert len(seq) == 5

    def test_add_returns_none(self, cls):
        seq = cls()
        assert seq.add("a") is None
        assert seq.add_last("b") is None

    def test_reset(self, cls):
        seq = cls("xyz")
        seq.next()
        seq.next()
        seq.reset()
        assert seq.current() == "x"


# ═══════════════════════════════════════════════════════════════════
# Variant Equivalence
# ═══════════════════════════════════════════════════════════════════

class TestEquivalence:

    def test_random_operation_sequences(self):
        rng = random.Random(21)
        for _ in range(30):
            std, xor = DoublyLinkedList(), XorLinkedList()
            for step in range(80):
                op = rng.choice(["add", "next", "previous", "current"])
                if op == "add":
                    std.add_last(step)
                    xor.add(step)
                else:
                    assert getattr(std, op)() == getattr(xor, op)()
            assert list(std) == list(xor)


# ═══════════════════════════════════════════════════════════════════
# XOR Encoding
# ═══════════════════════════════════════════════════════════════════

class TestXorLinks:

    def test_links_are_xor_of_neighbors(self):
        seq = XorLinkedList()
        handles = []
        for v in "abcd":
            seq.add(v)
            handles.append(seq.tail_handle)
        a, b, c, d = handles
        assert seq.link(a) == NULL_HANDLE ^ b
        assert seq.link(b) == a ^ c
        assert seq.link(c) == b ^ d
        assert seq.link(d) == c ^ NULL_HANDLE

    def test_handles_never_null(self):
        seq = XorLinkedList()
        assert seq.head_handle == NULL_HANDLE
        seq.add("first")
        assert seq.head_handle != NULL_HANDLE
        assert seq.head_handle == seq.tail_handle


class TestDoublyLinkedNodes:

    def test_head_and_tail_nodes(self):
        seq = DoublyLinkedList([1, 2, 3])
        assert seq.head_node.value == 1
        assert seq.tail_node.value == 3
        assert seq.head_node.next.next is seq.tail_node
        assert seq.tail_node.prev.prev is seq.head_node
        assert seq.head_node.prev is None
