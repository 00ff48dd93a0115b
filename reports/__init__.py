"""
BudgetKit Reports
=================
Budgeting queries composed from the toolkit structures. Callers pass their
own records plus accessor callables; no entity types are defined here.
"""

from reports.summary import (
    largest, by_amount_descending, between, daily_matrix,
    dependency_groups, cyclic_groups, hierarchy_totals, HistoryNavigator,
    top_categories, search, budget_matrix, BUDGET_COLUMN, hierarchy_order,
    UndoLog, PlannedPayments,
)

__all__ = [
    "largest", "by_amount_descending", "between", "daily_matrix",
    "dependency_groups", "cyclic_groups", "hierarchy_totals", "HistoryNavigator",
    "top_categories", "search", "budget_matrix", "BUDGET_COLUMN",
    "hierarchy_order", "UndoLog", "PlannedPayments",
]
