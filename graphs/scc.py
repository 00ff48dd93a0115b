"""
BudgetKit Strongly Connected Components
=======================================
Kosaraju's two-pass algorithm over a Graph.

  1. DFS over the graph, recording nodes in finish order.
  2. DFS over the transposed graph, taking roots in reverse finish order.
     Each second-pass tree is one strongly connected component.

Both passes use explicit stacks, so graph size is not limited by the
recursion limit. Components come out in topological order of the
condensation (a component is listed before any component it can reach).

Input conventions:
  - Nodes without outgoing edges must be present as keys to be reported.
  - A successor that is not a key is treated as a node with no out-edges.
  - A self-loop does not change component size: {4: [4]} yields {4}.
    Use has_self_loop() when cycle membership matters.
"""

from typing import Dict, Iterable, Iterator, List, Mapping, Set, Tuple, Union

from graphs.graph import Graph

Adjacency = Mapping[int, Iterable[int]]


class ComponentAnalyzer:
    """Partitions a directed graph into its strongly connected components."""

    def find_sccs(self, edges: Union[Adjacency, Graph]) -> List[Set[int]]:
        graph = edges if isinstance(edges, Graph) else Graph.from_adjacency(edges)
        finish_order = self._finish_order(graph)
        return self._collect_components(graph.transpose(), finish_order)

    # ─── Pass 1 ─────────────────────────────────────────────────────

    def _finish_order(self, graph: Graph) -> List[int]:
        order: List[int] = []
        visited: Set[int] = set()
        for root in graph.nodes():
            if root in visited:
                continue
            visited.add(root)
            stack: List[Tuple[int, Iterator[int]]] = [
                (root, iter(graph.neighbors(root)))]
            while stack:
                node, pending = stack[-1]
                for n in pending:
                    if n not in visited:
                        visited.add(n)
                        stack.append((n, iter(graph.neighbors(n))))
                        break
                else:
                    stack.pop()
                    order.append(node)
        return order

    # ─── Pass 2 ─────────────────────────────────────────────────────

    def _collect_components(self, transposed: Graph,
                            finish_order: List[int]) -> List[Set[int]]:
        components: List[Set[int]] = []
        visited: Set[int] = set()
        for root in reversed(finish_order):
            if root in visited:
                continue
            visited.add(root)
            component: Set[int] = set()
            stack = [root]
            while stack:
                node = stack.pop()
                component.add(node)
                for n in transposed.neighbors(node):
                    if n not in visited:
                        visited.add(n)
                        stack.append(n)
            components.append(component)
        return components


def find_sccs(edges: Union[Adjacency, Graph]) -> List[Set[int]]:
    """Strongly connected components of a node → successors mapping."""
    return ComponentAnalyzer().find_sccs(edges)


def component_map(components: Iterable[Set[int]]) -> Dict[int, int]:
    """Map each node to the index of its component."""
    mapping: Dict[int, int] = {}
    for idx, comp in enumerate(components):
        for node in comp:
            mapping[node] = idx
    return mapping


def has_self_loop(edges: Adjacency, node: int) -> bool:
    return node in edges.get(node, ())
