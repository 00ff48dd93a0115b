"""
BudgetKit Hashing
=================
Open-addressing hash table (linear probing, tombstone deletes) and an
id → position index built on it.
"""

from hashing.open_addressing import (
    OpenAddressingHashTable, PositionIndex, DEFAULT_TABLE_CAPACITY,
)

__all__ = ["OpenAddressingHashTable", "PositionIndex", "DEFAULT_TABLE_CAPACITY"]
