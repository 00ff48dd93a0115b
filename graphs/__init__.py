"""
BudgetKit Graphs
================
Directed/undirected adjacency graph, traversals, and SCC analysis.

Components:
  - graph: Graph (adjacency lists keyed by integer node id)
  - traversal: bfs, dfs (explicit stack), dfs_recursive
  - scc: Kosaraju strongly connected components
"""

from graphs.graph import Graph
from graphs.traversal import bfs, dfs, dfs_recursive
from graphs.scc import ComponentAnalyzer, find_sccs, component_map, has_self_loop

__all__ = [
    "Graph", "bfs", "dfs", "dfs_recursive",
    "ComponentAnalyzer", "find_sccs", "component_map", "has_self_loop",
]
