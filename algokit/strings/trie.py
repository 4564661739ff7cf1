"""Generic prefix tree keyed by arbitrary hashable tokens.

Unlike a character trie, every node carries a payload so the structure can
act as a map from token paths to values (``Trie[str, bool]`` is the classic
word set, ``Trie[int, int]`` maps byte strings to counters, and so on).

* Paths are any iterable of hashable tokens: strings, bytes, tuples.
* Nodes that were created only as intermediate steps hold the trie's
  ``default`` payload until data is stored on them.
* Node and path counts are tracked eagerly so callers can surface
  diagnostics without re-traversing the structure.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import (
    Any,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)
import time

K = TypeVar("K", bound=Hashable)
U = TypeVar("U")

__all__ = [
    "Trie",
    "TrieCursor",
    "TrieNode",
    "benchmark",
]


@dataclass(slots=True)
class TrieNode:
    """A node inside the trie data structure."""

    data: Any = None
    children: Dict[Hashable, "TrieNode"] = field(default_factory=dict)
    is_terminal: bool = False


class TrieCursor(Generic[K, U]):
    """Position inside a trie used to walk it one token at a time."""

    __slots__ = ("_trie", "_node")

    def __init__(self, trie: "Trie[K, U]", node: TrieNode) -> None:
        self._trie = trie
        self._node = node

    def child(self, token: K) -> Optional["TrieCursor[K, U]"]:
        """Return a cursor on the child reached by *token*, if any."""

        node = self._node.children.get(_check_token(token))
        return None if node is None else TrieCursor(self._trie, node)

    def child_or_insert(self, token: K) -> "TrieCursor[K, U]":
        """Return the child reached by *token*, creating it when missing."""

        node = self._node.children.get(_check_token(token))
        if node is None:
            node = TrieNode(data=self._trie.default)
            self._node.children[token] = node
            self._trie._node_count += 1
        return TrieCursor(self._trie, node)

    @property
    def data(self) -> Optional[U]:
        return self._node.data

    @data.setter
    def data(self, value: U) -> None:
        if not self._node.is_terminal:
            self._node.is_terminal = True
            self._trie._size += 1
        self._node.data = value

    @property
    def is_terminal(self) -> bool:
        """``True`` once data has been stored on this node."""

        return self._node.is_terminal


class Trie(Generic[K, U]):
    """Trie mapping token paths to payloads."""

    __slots__ = ("root", "default", "_size", "_node_count")

    def __init__(
        self,
        items: Optional[Iterable[Tuple[Iterable[K], U]]] = None,
        *,
        default: Optional[U] = None,
    ) -> None:
        self.default = default
        self.root: TrieNode = TrieNode(data=default)
        self._size = 0
        self._node_count = 1
        if items is not None:
            self.bulk_insert(items)

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------
    def cursor(self) -> TrieCursor[K, U]:
        """Return a cursor positioned at the root."""

        return TrieCursor(self, self.root)

    def insert(self, path: Iterable[K], data: U) -> None:
        """Store *data* at the node reached by *path*, creating nodes as needed.

        Inserting the same path again overwrites the previous payload. Every
        token is validated before any node is created, so a rejected path
        leaves the trie untouched.
        """

        tokens = self._normalize_path(path)
        cursor = self.cursor()
        for token in tokens:
            cursor = cursor.child_or_insert(token)
        cursor.data = data

    def bulk_insert(self, items: Iterable[Tuple[Iterable[K], U]]) -> None:
        """Insert multiple ``(path, data)`` pairs."""

        for path, data in items:
            self.insert(path, data)

    def get(self, path: Iterable[K]) -> Optional[U]:
        """Return the payload at *path*, or ``None`` when the path leaves the trie.

        Intermediate nodes report the trie's ``default`` payload.
        """

        node = self._traverse(path)
        return None if node is None else node.data

    def contains(self, path: Iterable[K]) -> bool:
        """Return ``True`` if data was stored exactly at *path*."""

        node = self._traverse(path)
        return bool(node and node.is_terminal)

    def starts_with(self, prefix: Iterable[K]) -> bool:
        """Return ``True`` when any stored node lies under *prefix*."""

        return self._traverse(prefix) is not None

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, Iterable):
            return False
        try:
            return self.contains(path)
        except TypeError:
            return False

    def __len__(self) -> int:
        return self._size

    @property
    def node_count(self) -> int:
        """Total number of nodes currently allocated."""

        return self._node_count

    def items(self) -> Iterator[Tuple[Tuple[K, ...], Optional[U]]]:
        """Yield ``(path, data)`` for every stored path, depth first.

        Children are visited in insertion order. The walk keeps its own stack,
        so path depth is not limited by the interpreter recursion limit.
        """

        if self.root.is_terminal:
            yield (), self.root.data
        prefix: List[K] = []
        stack: List[Iterator[Tuple[K, TrieNode]]] = [iter(self.root.children.items())]
        while stack:
            step = next(stack[-1], None)
            if step is None:
                stack.pop()
                if prefix:
                    prefix.pop()
                continue
            token, child = step
            prefix.append(token)
            if child.is_terminal:
                yield tuple(prefix), child.data
            stack.append(iter(child.children.items()))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _normalize_path(path: Iterable[K]) -> Tuple[K, ...]:
        if not isinstance(path, Iterable):
            raise TypeError("path must be an iterable of hashable tokens")
        tokens = tuple(path)
        for token in tokens:
            _check_token(token)
        return tokens

    def _traverse(self, path: Iterable[K]) -> Optional[TrieNode]:
        current: Optional[TrieNode] = self.root
        for token in path:
            if current is None:
                return None
            current = current.children.get(_check_token(token))
        return current


def _check_token(token: Any) -> Any:
    try:
        hash(token)
    except TypeError as exc:
        raise TypeError(
            f"trie tokens must be hashable, got {type(token).__name__}"
        ) from exc
    return token


def benchmark(trie: Trie[Any, Any], paths: Iterable[Iterable[Any]]) -> float:
    """Return the average lookup latency for *paths* in seconds.

    The iterable is consumed exactly once and ``0.0`` is returned when no
    paths are supplied.
    """

    path_list: Sequence[Iterable[Any]] = list(paths)
    if not path_list:
        return 0.0

    start = time.perf_counter()
    for path in path_list:
        trie.get(path)
    elapsed = time.perf_counter() - start
    return elapsed / len(path_list)
