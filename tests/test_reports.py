"""
BudgetKit Report Tests
======================
Budgeting queries composed from the toolkit structures, run over plain
caller records.
"""

import logging
import os
import sys
from collections import namedtuple
from datetime import date
from decimal import Decimal
from operator import attrgetter

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from reports import (
    largest, by_amount_descending, between, daily_matrix,
    dependency_groups, cyclic_groups, hierarchy_totals, HistoryNavigator,
    top_categories, search, budget_matrix, BUDGET_COLUMN, hierarchy_order,
    UndoLog, PlannedPayments,
)


Record = namedtuple("Record", ["id", "category", "day", "amount"])
Note = namedtuple("Note", ["id", "description"])
Budget = namedtuple("Budget", ["start", "end", "limit"])
Payment = namedtuple("Payment", ["id", "due"])

amount = attrgetter("amount")
day = attrgetter("day")
category = attrgetter("category")


@pytest.fixture
def records():
    return [
        Record(1, 10, date(2024, 1, 5), Decimal("40.00")),
        Record(2, 11, date(2024, 1, 1), Decimal("15.50")),
        Record(3, 10, date(2024, 1, 10), Decimal("120.00")),
        Record(4, 12, date(2024, 1, 5), Decimal("8.25")),
        Record(5, 11, date(2024, 2, 2), Decimal("60.00")),
    ]


# ═══════════════════════════════════════════════════════════════════
# Ranking and Ranges
# ═══════════════════════════════════════════════════════════════════

class TestRankingReports:

    def test_largest(self, records):
        assert [r.id for r in largest(records, 2, amount)] == [3, 5]

    def test_by_amount_descending(self, records):
        assert [r.id for r in by_amount_descending(records, amount)] == [3, 5, 1, 2, 4]

    def test_logs_at_debug(self, records, caplog):
        with caplog.at_level(logging.DEBUG, logger="reports.summary"):
            largest(records, 1, amount)
        assert "largest" in caplog.text


class TestBetween:

    def test_inclusive_with_same_day_order(self, records):
        result = between(records, date(2024, 1, 1), date(2024, 1, 5), day)
        assert [r.id for r in result] == [2, 1, 4]

    def test_reversed_range_empty(self, records):
        assert between(records, date(2024, 2, 1), date(2024, 1, 1), day) == []


# ═══════════════════════════════════════════════════════════════════
# Matrix
# ═══════════════════════════════════════════════════════════════════

class TestDailyMatrix:

    def test_month_filter(self, records):
        m = daily_matrix(records, category, day, amount,
                         zero=Decimal("0"), month=(2024, 1))
        assert m.get(10, 5) == Decimal("40.00")
        assert m.get(11, 2) == Decimal("0")
        assert m.row_sum(10) == Decimal("160.00")
        assert m.column_sum(5) == Decimal("48.25")

    def test_same_cell_accumulates(self):
        rows = [Record(i, 1, date(2024, 3, 3), Decimal("1.10")) for i in range(3)]
        m = daily_matrix(rows, category, day, amount, zero=Decimal("0"))
        assert m.get(1, 3) == Decimal("3.30")


# ═══════════════════════════════════════════════════════════════════
# Graph-backed Reports
# ═══════════════════════════════════════════════════════════════════

class TestDependencies:

    def test_groups(self):
        groups = dependency_groups({1: [2], 2: [3], 3: [1], 4: [4]})
        assert sorted(sorted(g) for g in groups) == [[1, 2, 3], [4]]

    def test_cyclic_groups_include_self_loops(self):
        edges = {1: [2], 2: [1], 3: [3], 4: [1]}
        cyclic = cyclic_groups(edges)
        assert sorted(sorted(g) for g in cyclic) == [[1, 2], [3]]


class TestHierarchyTotals:

    def test_totals_for_connected_categories(self, records):
        relations = [(10, 11), (20, 21)]
        totals = hierarchy_totals(relations, 10, records, category, amount,
                                  zero=Decimal("0"))
        assert totals == {10: Decimal("160.00"), 11: Decimal("75.50")}

    def test_child_root_reaches_parent(self, records):
        totals = hierarchy_totals([(10, 11)], 11, records, category, amount)
        assert set(totals) == {10, 11}


# ═══════════════════════════════════════════════════════════════════
# History Navigation
# ═══════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("compact", [False, True])
class TestHistoryNavigator:

    def test_navigation(self, records, compact):
        nav = HistoryNavigator(records, compact=compact)
        assert nav.compact is compact
        assert nav.current().id == 1
        assert nav.next().id == 2
        assert nav.previous().id == 1
        assert nav.previous().id == 1
        for _ in range(10):
            last = nav.next()
        assert last.id == 5
        nav.rewind()
        assert nav.current().id == 1
        assert len(nav) == 5

    def test_empty_history(self, compact):
        nav = HistoryNavigator([], compact=compact)
        assert nav.current() is None
        assert nav.next() is None


# ═══════════════════════════════════════════════════════════════════
# Category Ranking and Search
# ═══════════════════════════════════════════════════════════════════

class TestTopCategories:

    def test_highest_totals_first(self, records):
        top = top_categories(records, 2, category, amount, zero=Decimal("0"))
        assert top == [(10, Decimal("160.00")), (11, Decimal("75.50"))]

    def test_n_exceeds_categories(self, records):
        assert len(top_categories(records, 10, category, amount)) == 3

    def test_empty(self):
        assert top_categories([], 3, category, amount) == []


class TestSearch:

    @pytest.fixture
    def notes(self):
        return [
            Note(1, "Weekly Groceries"),
            Note(2, "Coffee"),
            Note(3, None),
            Note(4, "grocery run"),
        ]

    def test_case_insensitive(self, notes):
        result = search(notes, "GROCER", attrgetter("description"))
        assert [n.id for n in result] == [1, 4]

    def test_empty_keyword_returns_all(self, notes):
        assert search(notes, "", attrgetter("description")) == notes
        assert search(notes, None, attrgetter("description")) == notes

    def test_no_match(self, notes):
        assert search(notes, "rent", attrgetter("description")) == []


# ═══════════════════════════════════════════════════════════════════
# Budget Matrix and Hierarchy Order
# ═══════════════════════════════════════════════════════════════════

class TestBudgetMatrix:

    def test_spreads_limit_over_overlap(self):
        budgets = [
            Budget(date(2024, 1, 1), date(2024, 1, 31), Decimal("310.00")),
            Budget(date(2024, 1, 30), date(2024, 2, 28), Decimal("30.00")),
        ]
        m = budget_matrix(budgets, (2024, 1), attrgetter("start"),
                          attrgetter("end"), attrgetter("limit"),
                          zero=Decimal("0"))
        assert m.get(1, BUDGET_COLUMN) == Decimal("10.00")
        assert m.get(30, BUDGET_COLUMN) == Decimal("25.00")
        assert m.get(31, BUDGET_COLUMN) == Decimal("25.00")
        assert m.rows() == list(range(1, 32))

    def test_rounds_half_up_at_limit_scale(self):
        budgets = [Budget(date(2024, 2, 1), date(2024, 2, 3), Decimal("10.00"))]
        m = budget_matrix(budgets, (2024, 2), attrgetter("start"),
                          attrgetter("end"), attrgetter("limit"),
                          zero=Decimal("0"))
        assert m.get(1, BUDGET_COLUMN) == Decimal("3.33")
        assert len(m) == 3

    def test_budget_outside_month_skipped(self):
        budgets = [Budget(date(2023, 12, 1), date(2023, 12, 31), Decimal("99"))]
        m = budget_matrix(budgets, (2024, 1), attrgetter("start"),
                          attrgetter("end"), attrgetter("limit"))
        assert len(m) == 0


class TestHierarchyOrder:

    def test_bfs_and_dfs(self):
        relations = [(1, 2), (1, 3), (2, 4)]
        assert hierarchy_order(relations, 1) == [1, 2, 3, 4]
        assert hierarchy_order(relations, 1, depth_first=True) == [1, 2, 4, 3]


# ═══════════════════════════════════════════════════════════════════
# Undo and Planned Payments
# ═══════════════════════════════════════════════════════════════════

class TestUndoLog:

    def test_most_recent_first(self):
        log = UndoLog()
        for record_id in [7, 8, 9]:
            log.record(record_id)
        assert [log.undo(), log.undo()] == [9, 8]
        assert len(log) == 1

    def test_undo_empty_returns_none(self):
        log = UndoLog()
        assert log.undo() is None
        log.record(1)
        log.undo()
        assert log.undo() is None


class TestPlannedPayments:

    def test_releases_due_and_requeues_rest_in_order(self):
        planned = PlannedPayments(due=attrgetter("due"))
        for pid, due in [(1, date(2024, 3, 10)), (2, date(2024, 3, 1)),
                         (3, date(2024, 4, 1)), (4, date(2024, 3, 5)),
                         (5, date(2024, 3, 20))]:
            planned.schedule(Payment(pid, due))

        released = planned.process_up_to(date(2024, 3, 5))
        assert [p.id for p in released] == [2, 4]
        assert [p.id for p in planned.pending()] == [1, 3, 5]

        released = planned.process_up_to(date(2024, 3, 31))
        assert [p.id for p in released] == [1, 5]
        assert [p.id for p in planned.pending()] == [3]

    def test_cutoff_is_inclusive(self):
        planned = PlannedPayments(due=attrgetter("due"))
        planned.schedule(Payment(1, date(2024, 5, 1)))
        assert [p.id for p in planned.process_up_to(date(2024, 5, 1))] == [1]
        assert len(planned) == 0

    def test_empty_queue(self):
        planned = PlannedPayments(due=attrgetter("due"))
        assert planned.process_up_to(date(2024, 1, 1)) == []
