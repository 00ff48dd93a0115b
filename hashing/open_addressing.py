"""
BudgetKit Open Addressing Hash Table
====================================
Hash table with linear probing.

  - Slot states: empty (None), live entry, or tombstone (deleted entry).
  - Probing stops at an empty slot; tombstones keep later entries in the
    same probe chain reachable.
  - The table doubles before an insert once (live + tombstones) * 2 >=
    capacity, so at least half the slots stay empty and probes terminate.
  - Resizing rehashes live entries only, discarding tombstones.
"""

from typing import Any, Iterator, List, Optional

DEFAULT_TABLE_CAPACITY = 128


class _Entry:
    __slots__ = ('key', 'value', 'deleted')

    def __init__(self, key: Any, value: Any):
        self.key = key
        self.value = value
        self.deleted = False


class OpenAddressingHashTable:

    def __init__(self, capacity: int = DEFAULT_TABLE_CAPACITY):
        self._table: List[Optional[_Entry]] = [None] * max(2, capacity)
        self._size = 0
        self._tombstones = 0

    @property
    def capacity(self) -> int:
        return len(self._table)

    def _index(self, key: Any) -> int:
        return hash(key) % len(self._table)

    def put(self, key: Any, value: Any) -> None:
        """Insert key, or overwrite its value if already present."""
        if (self._size + self._tombstones) * 2 >= len(self._table):
            self._resize()

        idx = self._index(key)
        reusable: Optional[int] = None
        while self._table[idx] is not None:
            entry = self._table[idx]
            if entry.deleted:
                if reusable is None:
                    reusable = idx
            elif entry.key == key:
                entry.value = value
                return
            idx = (idx + 1) % len(self._table)

        if reusable is not None:
            target = reusable
            self._tombstones -= 1
        else:
            target = idx
        self._table[target] = _Entry(key, value)
        self._size += 1

    def get(self, key: Any, default: Any = None) -> Any:
        idx = self._find_slot(key)
        return self._table[idx].value if idx is not None else default

    def remove(self, key: Any) -> bool:
        """Tombstone key's entry. Returns False if key was not present."""
        idx = self._find_slot(key)
        if idx is None:
            return False
        self._table[idx].deleted = True
        self._size -= 1
        self._tombstones += 1
        return True

    def keys(self) -> Iterator[Any]:
        for entry in self._table:
            if entry is not None and not entry.deleted:
                yield entry.key

    def __contains__(self, key: Any) -> bool:
        return self._find_slot(key) is not None

    def __len__(self) -> int:
        return self._size

    def _find_slot(self, key: Any) -> Optional[int]:
        idx = self._index(key)
        start = idx
        while self._table[idx] is not None:
            entry = self._table[idx]
            if not entry.deleted and entry.key == key:
                return idx
            idx = (idx + 1) % len(self._table)
            if idx == start:
                break
        return None

    def _resize(self) -> None:
        old = self._table
        self._table = [None] * (len(old) * 2)
        self._size = 0
        self._tombstones = 0
        for entry in old:
            if entry is not None and not entry.deleted:
                self.put(entry.key, entry.value)


class PositionIndex:
    """Maps record ids to their position in a caller-owned sequence."""

    def __init__(self, capacity: int = DEFAULT_TABLE_CAPACITY):
        self._positions = OpenAddressingHashTable(capacity)

    def put(self, record_id: int, position: int) -> None:
        self._positions.put(record_id, position)

    def get_position(self, record_id: int) -> Optional[int]:
        return self._positions.get(record_id)

    def remove(self, record_id: int) -> bool:
        return self._positions.remove(record_id)

    def __len__(self) -> int:
        return len(self._positions)
