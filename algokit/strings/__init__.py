"""String and token-sequence algorithms."""

from .manacher import (
    SEPARATOR,
    CenterOutOfRangeError,
    Char,
    ConstructionProfile,
    Manacher,
    PalindromeIndex,
    Separator,
    TransformedView,
    build,
    compute_radii,
    longest_palindromic_substring,
    profile_construction,
    write_profiles_to_csv,
)
from .trie import Trie, TrieCursor, TrieNode, benchmark

__all__ = [
    "CenterOutOfRangeError",
    "Char",
    "ConstructionProfile",
    "Manacher",
    "PalindromeIndex",
    "SEPARATOR",
    "Separator",
    "TransformedView",
    "Trie",
    "TrieCursor",
    "TrieNode",
    "benchmark",
    "build",
    "compute_radii",
    "longest_palindromic_substring",
    "profile_construction",
    "write_profiles_to_csv",
]
