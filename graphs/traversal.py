"""
BudgetKit Graph Traversal
=========================
Breadth-first and depth-first visitation orders over a Graph.

  - bfs: level order, discovery order recorded, ArrayQueue frontier
  - dfs: preorder using an explicit ArrayStack (no recursion limit)
  - dfs_recursive: recursive preorder, same visitation order as dfs

Every traversal visits each node reachable from start exactly once and
always begins with start itself, even if start is not a declared node.
"""

from typing import TYPE_CHECKING, List, Set

from containers.queue import ArrayQueue
from containers.stack import ArrayStack

if TYPE_CHECKING:
    from graphs.graph import Graph


def bfs(graph: 'Graph', start: int) -> List[int]:
    order: List[int] = []
    visited: Set[int] = {start}
    frontier = ArrayQueue()
    frontier.enqueue(start)
    while not frontier.is_empty():
        node = frontier.dequeue()
        order.append(node)
        for n in graph.neighbors(node):
            if n not in visited:
                visited.add(n)
                frontier.enqueue(n)
    return order


def dfs(graph: 'Graph', start: int) -> List[int]:
    """
    Iterative preorder DFS.
    Neighbors are pushed in reverse so the first neighbor is explored first;
    a node is marked visited when popped, which reproduces the recursive order.
    """
    order: List[int] = []
    visited: Set[int] = set()
    stack = ArrayStack()
    stack.push(start)
    while not stack.is_empty():
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        for n in reversed(graph.neighbors(node)):
            if n not in visited:
                stack.push(n)
    return order


def dfs_recursive(graph: 'Graph', start: int) -> List[int]:
    """Recursive preorder DFS. Depth is bounded by the interpreter's recursion limit."""
    order: List[int] = []
    visited: Set[int] = set()
    _dfs_visit(graph, start, visited, order)
    return order


def _dfs_visit(graph: 'Graph', node: int, visited: Set[int],
               order: List[int]) -> None:
    if node in visited:
        return
    visited.add(node)
    order.append(node)
    for n in graph.neighbors(node):
        _dfs_visit(graph, n, visited, order)
