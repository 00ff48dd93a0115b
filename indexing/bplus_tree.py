"""
BudgetKit B+ Tree
=================
In-memory B+ Tree mapping ordered keys to insertion-ordered value lists.
Supports point insert, exact lookup, and inclusive range scans.

Node types:
  - LEAF: sorted unique keys, a parallel list of value lists, and a
    right_sibling link. Leaves form a chain for range scans.
  - INTERNAL: sorted separator keys with len(keys) + 1 children.
    Invariant: left subtree < K, right subtree >= K.

Capacity (t = min_degree):
  - Any node holding more than 2t - 1 keys is split.
  - Leaf split: right half starts at the median, its first key is COPIED up.
  - Internal split: median key is PUSHED up. Non-root internal nodes keep
    between t and 2t children.
  - Height grows only when the root splits.

Duplicate keys:
  put() with an existing key appends to that key's value list, so a range
  scan returns equal-key values in the order they were inserted.

Keys must be mutually comparable (dates, numbers, strings, tuples, ...).
"""

from bisect import bisect_left, bisect_right
from typing import Any, Iterator, List, Optional, Tuple

DEFAULT_MIN_DEGREE = 4

NODE_TYPE_LEAF = 0
NODE_TYPE_INTERNAL = 1


# ─── Node ───────────────────────────────────────────────────────────────────

class BPlusNode:
    __slots__ = ('node_type', 'keys', 'values', 'children', 'right_sibling')

    def __init__(self, node_type: int):
        self.node_type = node_type
        self.keys: List[Any] = []
        self.values: List[List[Any]] = []                # leaf only: parallel to keys
        self.children: List['BPlusNode'] = []            # internal only
        self.right_sibling: Optional['BPlusNode'] = None  # leaf only

    @property
    def key_count(self) -> int:
        return len(self.keys)

    @property
    def is_leaf(self) -> bool:
        return self.node_type == NODE_TYPE_LEAF

    def find_key_pos(self, key: Any) -> int:
        """Position of the first key >= key (search / range scan start)."""
        return bisect_left(self.keys, key)

    def find_child_index(self, key: Any) -> int:
        """Child to descend into. Keys equal to a separator go right."""
        return bisect_right(self.keys, key)


# ─── B+ Tree ────────────────────────────────────────────────────────────────

class BPlusTree:
    """
    Usage:
        tree = BPlusTree()
        tree.put(date(2024, 1, 5), "A")
        tree.put(date(2024, 1, 1), "B")
        tree.range_query(date(2024, 1, 1), date(2024, 1, 5))   # ["B", "A"]
    """

    def __init__(self, min_degree: int = DEFAULT_MIN_DEGREE):
        if min_degree < 2:
            raise ValueError(f"min_degree must be >= 2, got {min_degree}")
        self._min_degree = min_degree
        self._max_keys = 2 * min_degree - 1
        self._root = BPlusNode(NODE_TYPE_LEAF)
        self._entry_count = 0
        self._key_count = 0
        self._tree_height = 1

    @property
    def min_degree(self) -> int:
        return self._min_degree

    @property
    def entry_count(self) -> int:
        return self._entry_count

    @property
    def key_count(self) -> int:
        return self._key_count

    @property
    def height(self) -> int:
        return self._tree_height

    def __len__(self) -> int:
        return self._entry_count

    def __contains__(self, key: Any) -> bool:
        leaf = self._find_leaf(key)
        pos = leaf.find_key_pos(key)
        return pos < len(leaf.keys) and leaf.keys[pos] == key

    # ─── Search ─────────────────────────────────────────────────────

    def get(self, key: Any) -> List[Any]:
        """All values stored under key, in insertion order ([] if absent)."""
        leaf = self._find_leaf(key)
        pos = leaf.find_key_pos(key)
        if pos < len(leaf.keys) and leaf.keys[pos] == key:
            return list(leaf.values[pos])
        return []

    def range_query(self, low: Any = None, high: Any = None) -> List[Any]:
        """
        Values whose key lies in [low, high], ascending by key.
        low > high yields an empty list rather than an error.
        """
        return [v for _, v in self.range_scan(low, high)]

    def range_scan(self, low: Any = None, high: Any = None,
                   low_inclusive: bool = True,
                   high_inclusive: bool = True) -> Iterator[Tuple[Any, Any]]:
        """
        Range scan over the index. Yields (key, value) pairs in order.

        - low=None means unbounded below (start from leftmost leaf).
        - high=None means unbounded above (scan to end).
        """
        if low is not None and high is not None and low > high:
            return

        if low is not None:
            leaf = self._find_leaf(low)
            start = leaf.find_key_pos(low)
        else:
            leaf = self._find_leftmost_leaf()
            start = 0

        while leaf is not None:
            for i in range(start, len(leaf.keys)):
                k = leaf.keys[i]
                if low is not None and not low_inclusive and k == low:
                    continue
                if high is not None:
                    if k > high or (not high_inclusive and k == high):
                        return
                for value in leaf.values[i]:
                    yield k, value
            leaf = leaf.right_sibling
            start = 0

    def items(self) -> Iterator[Tuple[Any, Any]]:
        return self.range_scan()

    def keys(self) -> Iterator[Any]:
        leaf = self._find_leftmost_leaf()
        while leaf is not None:
            yield from leaf.keys
            leaf = leaf.right_sibling

    # ─── Insert ─────────────────────────────────────────────────────

    def put(self, key: Any, value: Any) -> None:
        """
        Insert value under key. Handles node splits and root splits.
        An existing key gets the value appended, never overwritten.
        """
        result = self._insert_recursive(self._root, key, value)
        self._entry_count += 1

        if result is not None:
            # Root was split — create new root
            split_key, new_child = result
            new_root = BPlusNode(NODE_TYPE_INTERNAL)
            new_root.keys.append(split_key)
            new_root.children.append(self._root)
            new_root.children.append(new_child)
            self._root = new_root
            self._tree_height += 1

    def _insert_recursive(self, node: BPlusNode, key: Any,
                          value: Any) -> Optional[Tuple[Any, BPlusNode]]:
        """
        Returns None if no split, or (promoted_key, new_right_node)
        if this node split.
        """
        if node.is_leaf:
            return self._insert_into_leaf(node, key, value)

        child_idx = node.find_child_index(key)
        result = self._insert_recursive(node.children[child_idx], key, value)
        if result is None:
            return None

        # Child was split — insert promoted key into this internal node
        promoted_key, new_child = result
        node.keys.insert(child_idx, promoted_key)
        node.children.insert(child_idx + 1, new_child)
        if len(node.keys) > self._max_keys:
            return self._split_internal(node)
        return None

    def _insert_into_leaf(self, node: BPlusNode, key: Any,
                          value: Any) -> Optional[Tuple[Any, BPlusNode]]:
        pos = node.find_key_pos(key)
        if pos < len(node.keys) and node.keys[pos] == key:
            node.values[pos].append(value)
            return None

        node.keys.insert(pos, key)
        node.values.insert(pos, [value])
        self._key_count += 1

        if len(node.keys) > self._max_keys:
            return self._split_leaf(node)
        return None

    # ─── Split ──────────────────────────────────────────────────────

    def _split_leaf(self, node: BPlusNode) -> Tuple[Any, BPlusNode]:
        """
        Split a leaf at the median.
        Median key is COPIED UP to the parent (the right leaf retains it).
        """
        mid = len(node.keys) // 2

        new_leaf = BPlusNode(NODE_TYPE_LEAF)
        new_leaf.keys = node.keys[mid:]
        new_leaf.values = node.values[mid:]
        # Maintain sibling chain: new.right = old.right; old.right = new
        new_leaf.right_sibling = node.right_sibling

        node.keys = node.keys[:mid]
        node.values = node.values[:mid]
        node.right_sibling = new_leaf

        return new_leaf.keys[0], new_leaf

    def _split_internal(self, node: BPlusNode) -> Tuple[Any, BPlusNode]:
        """
        Split an internal node at the median.
        Median key is PUSHED UP to the parent (removed from this node).

        Before split (t=2): keys=[k0,k1,k2,k3], children=[c0,c1,c2,c3,c4]
        Mid=2: promoted=k2
        Left:  keys=[k0,k1], children=[c0,c1,c2]
        Right: keys=[k3],    children=[c3,c4]
        """
        mid = len(node.keys) // 2
        promoted_key = node.keys[mid]

        new_internal = BPlusNode(NODE_TYPE_INTERNAL)
        new_internal.keys = node.keys[mid + 1:]
        new_internal.children = node.children[mid + 1:]

        node.keys = node.keys[:mid]
        node.children = node.children[:mid + 1]

        return promoted_key, new_internal

    # ─── Navigation ─────────────────────────────────────────────────

    def _find_leaf(self, key: Any) -> BPlusNode:
        """Navigate from root to the leaf that should contain the key."""
        node = self._root
        while not node.is_leaf:
            node = node.children[node.find_child_index(key)]
        return node

    def _find_leftmost_leaf(self) -> BPlusNode:
        node = self._root
        while not node.is_leaf:
            node = node.children[0]
        return node

    # ─── Verification ───────────────────────────────────────────────

    def verify_structure(self) -> List[str]:
        """
        Verify index structural integrity.
        Returns list of issues found (empty = healthy).
        """
        issues: List[str] = []
        leaf_depths: List[int] = []
        self._verify_node(self._root, None, None, issues, 1, leaf_depths)

        if len(set(leaf_depths)) > 1:
            issues.append(f"Leaves at unequal depths: {sorted(set(leaf_depths))}")
        elif leaf_depths and leaf_depths[0] != self._tree_height:
            issues.append(
                f"Height {self._tree_height} does not match leaf depth {leaf_depths[0]}")

        self._verify_leaf_chain(issues)
        return issues

    def _verify_node(self, node: BPlusNode, min_key: Any, max_key: Any,
                     issues: List[str], depth: int,
                     leaf_depths: List[int]) -> None:
        is_root = node is self._root

        for i in range(1, len(node.keys)):
            if not node.keys[i - 1] < node.keys[i]:
                issues.append(f"Depth {depth}: keys not strictly increasing at {i}")

        for k in node.keys:
            if min_key is not None and k < min_key:
                issues.append(f"Depth {depth}: key {k!r} below parent separator")
            if max_key is not None and k >= max_key:
                issues.append(f"Depth {depth}: key {k!r} at/above parent separator")

        if len(node.keys) > self._max_keys:
            issues.append(f"Depth {depth}: {len(node.keys)} keys exceeds capacity")

        if node.is_leaf:
            leaf_depths.append(depth)
            if len(node.values) != len(node.keys):
                issues.append(f"Depth {depth}: values/keys count mismatch")
            if not is_root and len(node.keys) < self._min_degree:
                issues.append(f"Depth {depth}: leaf underfull ({len(node.keys)} keys)")
            return

        if len(node.children) != len(node.keys) + 1:
            issues.append(f"Depth {depth}: children count mismatch")
            return
        if not is_root and not (self._min_degree <= len(node.children)
                                <= 2 * self._min_degree):
            issues.append(
                f"Depth {depth}: {len(node.children)} children outside "
                f"[{self._min_degree}, {2 * self._min_degree}]")

        for i, child in enumerate(node.children):
            lo = node.keys[i - 1] if i > 0 else min_key
            hi = node.keys[i] if i < len(node.keys) else max_key
            self._verify_node(child, lo, hi, issues, depth + 1, leaf_depths)

    def _verify_leaf_chain(self, issues: List[str]) -> None:
        """Verify the leaf sibling chain is ordered and covers every key."""
        leaf = self._find_leftmost_leaf()
        prev_max_key: Any = None
        seen_keys = 0
        seen_values = 0
        visited = set()

        while leaf is not None:
            if id(leaf) in visited:
                issues.append("Leaf chain cycle")
                break
            visited.add(id(leaf))

            if leaf.keys and prev_max_key is not None:
                if not prev_max_key < leaf.keys[0]:
                    issues.append(f"Leaf chain ordering broken at key {leaf.keys[0]!r}")
            if leaf.keys:
                prev_max_key = leaf.keys[-1]
            seen_keys += len(leaf.keys)
            seen_values += sum(len(v) for v in leaf.values)
            leaf = leaf.right_sibling

        if seen_keys != self._key_count:
            issues.append(f"Leaf chain holds {seen_keys} keys, expected {self._key_count}")
        if seen_values != self._entry_count:
            issues.append(
                f"Leaf chain holds {seen_values} values, expected {self._entry_count}")
