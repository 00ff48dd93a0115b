"""
BudgetKit Huffman Codec
=======================
Huffman compression of a string into a self-describing byte string.

Format (UTF-8 text):
    <codepoint>:<freq>,<codepoint>:<freq>,...|<bits>

  - Header entries are sorted by code point.
  - <bits> is the encoded message as ASCII '0' / '1' characters.
  - Empty input encodes to b"". Data without a '|' decodes to itself.

The decoder rebuilds the tree from the frequency header, so tree
construction must be deterministic: leaves are seeded in code-point order
and ties on frequency are broken by creation sequence.
"""

import heapq
from itertools import count
from typing import Dict, Optional, Tuple

SEPARATOR = "|"


class _HuffNode:
    __slots__ = ('ch', 'freq', 'left', 'right')

    def __init__(self, ch: str, freq: int,
                 left: Optional['_HuffNode'] = None,
                 right: Optional['_HuffNode'] = None):
        self.ch = ch
        self.freq = freq
        self.left = left
        self.right = right

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _frequencies(text: str) -> Dict[str, int]:
    freq: Dict[str, int] = {}
    for ch in text:
        freq[ch] = freq.get(ch, 0) + 1
    return freq


def _build_tree(freq: Dict[str, int]) -> _HuffNode:
    seq = count()
    heap: list = []
    for ch in sorted(freq):
        heapq.heappush(heap, (freq[ch], next(seq), _HuffNode(ch, freq[ch])))

    if len(heap) == 1:
        # One distinct symbol still needs a one-bit code.
        f, _, only = heap[0]
        return _HuffNode("\0", f, only, None)

    while len(heap) > 1:
        fa, _, a = heapq.heappop(heap)
        fb, _, b = heapq.heappop(heap)
        heapq.heappush(heap, (fa + fb, next(seq), _HuffNode("\0", fa + fb, a, b)))
    return heap[0][2]


def _build_codes(node: _HuffNode, prefix: str, codes: Dict[str, str]) -> None:
    if node.is_leaf:
        codes[node.ch] = prefix or "0"
        return
    _build_codes(node.left, prefix + "0", codes)
    if node.right is not None:
        _build_codes(node.right, prefix + "1", codes)


def build_code_table(text: str) -> Dict[str, str]:
    """Symbol → bit string code for the given text."""
    if not text:
        return {}
    codes: Dict[str, str] = {}
    _build_codes(_build_tree(_frequencies(text)), "", codes)
    return codes


def compress(text: Optional[str]) -> bytes:
    if not text:
        return b""
    freq = _frequencies(text)
    codes: Dict[str, str] = {}
    _build_codes(_build_tree(freq), "", codes)

    header = "".join(f"{ord(ch)}:{freq[ch]}," for ch in sorted(freq))
    bits = "".join(codes[ch] for ch in text)
    return (header + SEPARATOR + bits).encode("utf-8")


def decompress(data: Optional[bytes]) -> str:
    if not data:
        return ""
    combined = data.decode("utf-8")
    header, sep, bits = combined.partition(SEPARATOR)
    if not sep:
        return combined

    freq = dict(_parse_header_entry(part) for part in header.split(",") if part)
    if not freq:
        return ""
    root = _build_tree(freq)

    out = []
    node = root
    for b in bits:
        node = node.left if b == "0" else node.right
        if node is None:
            raise ValueError("Invalid Huffman bit sequence")
        if node.is_leaf:
            out.append(node.ch)
            node = root
    return "".join(out)


def _parse_header_entry(part: str) -> Tuple[str, int]:
    code, _, freq = part.partition(":")
    return chr(int(code)), int(freq)
