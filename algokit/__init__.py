"""Generic algorithms: palindrome indexing, token tries and binary heaps."""

from __future__ import annotations

from .binary_heap import BinaryHeap, natural_order, reverse_order
from .strings import (
    CenterOutOfRangeError,
    PalindromeIndex,
    Trie,
    build,
    longest_palindromic_substring,
)

__version__ = "0.1.0"

__all__ = [
    "BinaryHeap",
    "CenterOutOfRangeError",
    "PalindromeIndex",
    "Trie",
    "build",
    "longest_palindromic_substring",
    "natural_order",
    "reverse_order",
]
