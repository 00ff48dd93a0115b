"""
BudgetKit Matrix
================
Sparse coordinate-keyed 2-D accumulator.
"""

from matrix.sparse import SparseMatrix

__all__ = ["SparseMatrix"]
