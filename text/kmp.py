"""
BudgetKit KMP Matcher
=====================
Knuth-Morris-Pratt substring search in O(len(text) + len(pattern)).

Conventions:
  - An empty pattern matches at index 0.
  - None text, or text shorter than the pattern, never matches.
"""

from typing import List, Optional


def build_lps(pattern: str) -> List[int]:
    """Longest proper prefix that is also a suffix, for every prefix of pattern."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length > 0:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def index_of(text: Optional[str], pattern: Optional[str]) -> int:
    """Index of the first occurrence of pattern in text, or -1."""
    if not pattern:
        return 0
    if text is None or len(text) < len(pattern):
        return -1
    lps = build_lps(pattern)
    j = 0
    for i, ch in enumerate(text):
        while j > 0 and ch != pattern[j]:
            j = lps[j - 1]
        if ch == pattern[j]:
            j += 1
            if j == len(pattern):
                return i - j + 1
    return -1


def contains(text: Optional[str], pattern: Optional[str]) -> bool:
    return index_of(text, pattern) != -1


def find_all(text: Optional[str], pattern: str) -> List[int]:
    """Start indices of every occurrence, overlapping matches included."""
    if not pattern or text is None:
        return []
    lps = build_lps(pattern)
    matches: List[int] = []
    j = 0
    for i, ch in enumerate(text):
        while j > 0 and ch != pattern[j]:
            j = lps[j - 1]
        if ch == pattern[j]:
            j += 1
            if j == len(pattern):
                matches.append(i - j + 1)
                j = lps[j - 1]
    return matches
