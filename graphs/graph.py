"""
BudgetKit Graph
===============
Adjacency-list graph over integer node ids.

  - Directed by default; an undirected graph stores every edge both ways.
  - A node may exist with no outgoing edges (add_node).
  - add_edge() declares both endpoints, so no edge ever dangles.
  - neighbors() on an unknown node returns an empty list.

Parallel edges are kept; traversals skip already-visited targets.
"""

from typing import Dict, Iterable, List, Mapping

from graphs import traversal


class Graph:
    """
    Usage:
        g = Graph()
        g.add_edge(1, 2)
        g.add_edge(2, 3)
        g.bfs(1)   # [1, 2, 3]
    """

    def __init__(self, directed: bool = True):
        self._directed = directed
        self._adjacency: Dict[int, List[int]] = {}
        self._edge_count = 0

    @classmethod
    def from_adjacency(cls, adjacency: Mapping[int, Iterable[int]],
                       directed: bool = True) -> 'Graph':
        """
        Build a graph from a node → successors mapping.
        Successors missing from the mapping become nodes with no out-edges.
        """
        g = cls(directed)
        for node, successors in adjacency.items():
            g.add_node(node)
            for succ in successors:
                g.add_edge(node, succ)
        return g

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def add_node(self, node: int) -> None:
        self._adjacency.setdefault(node, [])

    def add_edge(self, u: int, v: int) -> None:
        self._adjacency.setdefault(u, []).append(v)
        succ = self._adjacency.setdefault(v, [])
        # Undirected: mirror the edge; a self-loop is stored once.
        if not self._directed and u != v:
            succ.append(u)
        self._edge_count += 1

    def has_node(self, node: int) -> bool:
        return node in self._adjacency

    def neighbors(self, node: int) -> List[int]:
        return list(self._adjacency.get(node, ()))

    def nodes(self) -> List[int]:
        """Nodes in declaration order."""
        return list(self._adjacency)

    def adjacency(self) -> Dict[int, List[int]]:
        return {node: list(succ) for node, succ in self._adjacency.items()}

    def transpose(self) -> 'Graph':
        """Graph with every edge reversed. Node declaration order is kept."""
        rev = Graph(self._directed)
        for node in self._adjacency:
            rev.add_node(node)
        for u, succ in self._adjacency.items():
            for v in succ:
                rev._adjacency[v].append(u)
        rev._edge_count = self._edge_count
        return rev

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, node: int) -> bool:
        return node in self._adjacency

    # ─── Traversal ──────────────────────────────────────────────────

    def bfs(self, start: int) -> List[int]:
        return traversal.bfs(self, start)

    def dfs(self, start: int) -> List[int]:
        return traversal.dfs(self, start)
