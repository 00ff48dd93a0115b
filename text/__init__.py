"""
BudgetKit Text
==============
String algorithms used for searching and packing free-text fields.

Components:
  - kmp: Knuth-Morris-Pratt substring search
  - huffman: Huffman compression to a self-describing byte string
"""

from text.kmp import index_of, contains, find_all
from text.huffman import compress, decompress

__all__ = ["index_of", "contains", "find_all", "compress", "decompress"]
