"""
BudgetKit Sparse Matrix
=======================
2-D numeric accumulator that stores only non-zero cells, keyed by
(row, col) in a dict.

  - add_to() accumulates; a cell whose sum returns to zero is dropped
  - get() on an absent cell returns the zero value
  - entries() enumerates row by row, then column, so reports are
    reproducible regardless of insertion order

The zero value is configurable so Decimal amounts keep their type:
SparseMatrix(zero=Decimal("0")).
"""

from typing import Any, Dict, Iterator, List, Tuple

Cell = Tuple[int, int]


class SparseMatrix:

    def __init__(self, zero: Any = 0):
        self._zero = zero
        self._cells: Dict[Cell, Any] = {}

    @property
    def zero(self) -> Any:
        return self._zero

    def add_to(self, row: int, col: int, amount: Any) -> None:
        """Accumulate amount into (row, col). None amounts are ignored."""
        if amount is None:
            return
        cell = (row, col)
        updated = self._cells.get(cell, self._zero) + amount
        if updated == self._zero:
            self._cells.pop(cell, None)
        else:
            self._cells[cell] = updated

    def get(self, row: int, col: int) -> Any:
        return self._cells.get((row, col), self._zero)

    def row_sum(self, row: int) -> Any:
        total = self._zero
        for (r, _), amount in self._cells.items():
            if r == row:
                total = total + amount
        return total

    def column_sum(self, col: int) -> Any:
        total = self._zero
        for (_, c), amount in self._cells.items():
            if c == col:
                total = total + amount
        return total

    def entries(self) -> Iterator[Tuple[int, int, Any]]:
        """(row, col, amount) for every stored cell, ordered by row then column."""
        for (row, col) in sorted(self._cells):
            yield row, col, self._cells[(row, col)]

    def rows(self) -> List[int]:
        return sorted({row for row, _ in self._cells})

    def as_dict(self) -> Dict[int, Dict[int, Any]]:
        nested: Dict[int, Dict[int, Any]] = {}
        for row, col, amount in self.entries():
            nested.setdefault(row, {})[col] = amount
        return nested

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, cell: Cell) -> bool:
        return cell in self._cells
