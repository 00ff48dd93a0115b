"""
BudgetKit Summary Queries
=========================
Each query pushes caller records into the structure that fits it:

  - largest / by_amount_descending: MaxHeap, heap sort on an amount accessor
  - top_categories: MaxHeap over per-category totals
  - search: case-insensitive KMP match on a text accessor
  - between: B+ Tree keyed by date, inclusive range query
  - daily_matrix: SparseMatrix of (row accessor, day of month) → amount
  - budget_matrix: budget limits spread evenly over the days of a month
  - dependency_groups / cyclic_groups: strongly connected components
  - hierarchy_totals / hierarchy_order: undirected category graph, BFS or DFS
  - UndoLog: ArrayStack of record ids
  - PlannedPayments: ArrayQueue of scheduled records released by due date
  - HistoryNavigator: cursor over a bidirectional sequence

Accessors are plain callables (e.g. operator.attrgetter("amount")).
"""

import calendar
import logging
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Set, Tuple

from containers.queue import ArrayQueue
from containers.stack import ArrayStack
from graphs.graph import Graph
from graphs.scc import find_sccs, has_self_loop
from indexing.bplus_tree import BPlusTree
from matrix.sparse import SparseMatrix
from ranking.heap_sort import sort_descending
from ranking.max_heap import MaxHeap, top_n
from sequences.doubly_linked import DoublyLinkedList
from sequences.xor_linked import XorLinkedList
from text.kmp import contains

logger = logging.getLogger(__name__)

Accessor = Callable[[Any], Any]


# ─── Ranking ────────────────────────────────────────────────────────────────

def largest(items: Iterable[Any], n: int, amount: Accessor) -> List[Any]:
    """The n records with the highest amount, highest first."""
    result = top_n(n, items, key=amount)
    logger.debug("largest: requested %d, returned %d", n, len(result))
    return result


def by_amount_descending(items: Iterable[Any], amount: Accessor) -> List[Any]:
    return sort_descending(items, key=amount)


# ─── Date range ─────────────────────────────────────────────────────────────

def between(items: Iterable[Any], start: date, end: date,
            date_of: Accessor) -> List[Any]:
    """
    Records dated within [start, end], oldest first.
    Same-day records keep their input order. start > end returns [].
    """
    tree = BPlusTree()
    for item in items:
        tree.put(date_of(item), item)
    result = tree.range_query(start, end)
    logger.debug("between %s and %s: %d of %d records",
                 start, end, len(result), len(tree))
    return result


# ─── Matrix ─────────────────────────────────────────────────────────────────

def daily_matrix(items: Iterable[Any], row: Accessor, date_of: Accessor,
                 amount: Accessor, zero: Any = 0,
                 month: Optional[Tuple[int, int]] = None) -> SparseMatrix:
    """
    Sum amounts into a (row, day-of-month) matrix.
    When month=(year, month) is given, records outside it are skipped.
    """
    matrix = SparseMatrix(zero=zero)
    skipped = 0
    for item in items:
        d = date_of(item)
        if month is not None and (d.year, d.month) != month:
            skipped += 1
            continue
        matrix.add_to(row(item), d.day, amount(item))
    logger.debug("daily_matrix: %d cells, %d records outside month",
                 len(matrix), skipped)
    return matrix


# ─── Dependencies ───────────────────────────────────────────────────────────

def dependency_groups(edges: Mapping[int, Iterable[int]]) -> List[Set[int]]:
    """Groups of mutually dependent ids (strongly connected components)."""
    groups = find_sccs(edges)
    logger.debug("dependency_groups: %d nodes in %d groups",
                 sum(len(g) for g in groups), len(groups))
    return groups


def cyclic_groups(edges: Mapping[int, Iterable[int]]) -> List[Set[int]]:
    """
    Groups that form a dependency cycle: every multi-member component,
    plus singletons that depend on themselves.
    """
    return [g for g in find_sccs(edges)
            if len(g) > 1 or has_self_loop(edges, next(iter(g)))]


# ─── Category hierarchy ─────────────────────────────────────────────────────

def hierarchy_totals(relations: Iterable[Tuple[int, int]], root: int,
                     items: Iterable[Any], category: Accessor,
                     amount: Accessor, zero: Any = 0) -> Dict[int, Any]:
    """
    Total amount per category for every category connected to root.
    relations are (parent, child) pairs treated as undirected edges.
    Categories without spending are omitted.
    """
    graph = Graph(directed=False)
    for parent, child in relations:
        graph.add_edge(parent, child)
    reachable = set(graph.bfs(root))

    totals: Dict[int, Any] = {}
    for item in items:
        cat = category(item)
        if cat in reachable:
            totals[cat] = totals.get(cat, zero) + amount(item)
    logger.debug("hierarchy_totals: root %d reaches %d categories, %d with spending",
                 root, len(reachable), len(totals))
    return totals


# ─── History navigation ─────────────────────────────────────────────────────

class HistoryNavigator:
    """
    Step backwards and forwards through records in their given order.
    compact=True stores them in an XorLinkedList instead of a
    DoublyLinkedList; navigation behaves identically.
    """

    def __init__(self, items: Iterable[Any], compact: bool = False):
        self._sequence = XorLinkedList(items) if compact else DoublyLinkedList(items)
        self._compact = compact

    @property
    def compact(self) -> bool:
        return self._compact

    def current(self) -> Optional[Any]:
        return self._sequence.current()

    def next(self) -> Optional[Any]:
        return self._sequence.next()

    def previous(self) -> Optional[Any]:
        return self._sequence.previous()

    def rewind(self) -> None:
        self._sequence.reset()

    def __len__(self) -> int:
        return len(self._sequence)


# ─── Category ranking ───────────────────────────────────────────────────────

def top_categories(items: Iterable[Any], n: int, category: Accessor,
                   amount: Accessor, zero: Any = 0) -> List[Tuple[Any, Any]]:
    """(category, total) for the n categories with the highest spending."""
    totals: Dict[Any, Any] = {}
    for item in items:
        cat = category(item)
        totals[cat] = totals.get(cat, zero) + amount(item)

    heap = MaxHeap(key=lambda entry: entry[1])
    for entry in totals.items():
        heap.add(entry)
    result: List[Tuple[Any, Any]] = []
    while len(result) < n and not heap.is_empty():
        result.append(heap.poll())
    return result


# ─── Search ─────────────────────────────────────────────────────────────────

def search(items: Iterable[Any], keyword: Optional[str],
           text_of: Accessor) -> List[Any]:
    """
    Records whose text contains keyword, ignoring case.
    An empty or None keyword matches everything; None text matches nothing.
    """
    pattern = (keyword or "").lower()
    if not pattern:
        return list(items)
    return [item for item in items if contains((text_of(item) or "").lower(), pattern)]


# ─── Budget matrix ──────────────────────────────────────────────────────────

BUDGET_COLUMN = 0


def budget_matrix(budgets: Iterable[Any], month: Tuple[int, int],
                  start: Accessor, end: Accessor, limit: Accessor,
                  zero: Any = 0) -> SparseMatrix:
    """
    Spread each budget's limit evenly over the days it overlaps month.
    Cells are (day of month, BUDGET_COLUMN). Decimal limits are divided
    with ROUND_HALF_UP at the limit's own scale.
    """
    year, mon = month
    first = date(year, mon, 1)
    last = date(year, mon, calendar.monthrange(year, mon)[1])

    matrix = SparseMatrix(zero=zero)
    for budget in budgets:
        lo = max(first, start(budget))
        hi = min(last, end(budget))
        if lo > hi:
            continue
        days = (hi - lo).days + 1
        per_day = _per_day(limit(budget), days)
        d = lo
        while d <= hi:
            matrix.add_to(d.day, BUDGET_COLUMN, per_day)
            d += timedelta(days=1)
    logger.debug("budget_matrix %04d-%02d: %d cells", year, mon, len(matrix))
    return matrix


def _per_day(total: Any, days: int) -> Any:
    if isinstance(total, Decimal):
        exponent = total.as_tuple().exponent
        return (total / days).quantize(Decimal(1).scaleb(exponent),
                                       rounding=ROUND_HALF_UP)
    return total / days


# ─── Hierarchy traversal ────────────────────────────────────────────────────

def hierarchy_order(relations: Iterable[Tuple[int, int]], root: int,
                    depth_first: bool = False) -> List[int]:
    """Categories connected to root, in BFS (default) or DFS order."""
    graph = Graph(directed=False)
    for parent, child in relations:
        graph.add_edge(parent, child)
    return graph.dfs(root) if depth_first else graph.bfs(root)


# ─── Undo and planned payments ──────────────────────────────────────────────

class UndoLog:
    """Ids of logged records, most recent first out. undo() on empty returns None."""

    def __init__(self):
        self._ids = ArrayStack()

    def record(self, record_id: Any) -> None:
        self._ids.push(record_id)

    def undo(self) -> Optional[Any]:
        if self._ids.is_empty():
            return None
        return self._ids.pop()

    def __len__(self) -> int:
        return len(self._ids)


class PlannedPayments:
    """
    FIFO of scheduled records. process_up_to() makes one pass over the
    records queued when it starts: due records (due date <= the cutoff) are
    released in queue order, the rest go back on the queue in their
    original relative order.
    """

    def __init__(self, due: Accessor):
        self._due = due
        self._queue = ArrayQueue()

    def schedule(self, item: Any) -> None:
        self._queue.enqueue(item)

    def process_up_to(self, cutoff: date) -> List[Any]:
        released: List[Any] = []
        for _ in range(len(self._queue)):
            item = self._queue.dequeue()
            if item is None:
                break
            if self._due(item) <= cutoff:
                released.append(item)
            else:
                self._queue.enqueue(item)
        logger.debug("process_up_to %s: released %d, %d pending",
                     cutoff, len(released), len(self._queue))
        return released

    def pending(self) -> List[Any]:
        return list(self._queue)

    def __len__(self) -> int:
        return len(self._queue)
