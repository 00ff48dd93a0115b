"""
BudgetKit Indexing Module
=========================
In-memory B+ Tree index for ordered lookups and inclusive range scans.

Components:
  - bplus_tree: B+ Tree with put, get, range query, structure verification
"""

from indexing.bplus_tree import BPlusTree, DEFAULT_MIN_DEGREE

__all__ = ["BPlusTree", "DEFAULT_MIN_DEGREE"]
