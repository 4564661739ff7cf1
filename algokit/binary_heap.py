"""Array-backed binary heap ordered by a pluggable comparator.

The heap keeps the *largest* element (according to ``comparator``) at the
root. ``comparator(a, b)`` follows the classic three-way convention and
returns a negative number, zero or a positive number when ``a`` sorts
before, equal to or after ``b``. Pass a reversed comparator to obtain a
min-heap.

Unlike :mod:`heapq`, the ordering does not depend on the items' own
``__lt__`` so arbitrary payloads can be prioritised without wrapper tuples.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")

Comparator = Callable[[T, T], int]

__all__ = ["BinaryHeap", "Comparator", "natural_order", "reverse_order"]


def natural_order(a: Any, b: Any) -> int:
    """Three-way comparison using the items' own ordering."""

    return (a > b) - (a < b)


def reverse_order(a: Any, b: Any) -> int:
    """Three-way comparison that inverts the items' own ordering."""

    return natural_order(b, a)


def _parent(i: int) -> int:
    return (i - 1) // 2


def _left_child(i: int) -> int:
    return 2 * i + 1


class BinaryHeap(Generic[T]):
    """Max-heap on ``comparator`` supporting O(log n) push and pop."""

    __slots__ = ("_data", "_comparator")

    def __init__(
        self,
        items: Optional[Iterable[T]] = None,
        *,
        comparator: Optional[Comparator[T]] = None,
    ) -> None:
        if comparator is not None and not callable(comparator):
            raise TypeError("comparator must be callable")
        self._comparator: Comparator[T] = comparator or natural_order
        self._data: List[T] = list(items) if items is not None else []
        self._build_heap()

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._data)})"

    def push(self, item: T) -> None:
        self._data.append(item)
        self._sift_up(len(self._data) - 1)

    def peek(self) -> T:
        """Return the root element without removing it."""

        if not self._data:
            raise IndexError("peek from an empty heap")
        return self._data[0]

    def pop(self) -> T:
        """Remove and return the root element.

        Raises ``IndexError`` when the heap is empty, mirroring ``list.pop``.
        """

        if not self._data:
            raise IndexError("pop from an empty heap")
        last = self._data.pop()
        if not self._data:
            return last
        root, self._data[0] = self._data[0], last
        self._sift_down(0)
        return root

    def pop_or_none(self) -> Optional[T]:
        return self.pop() if self._data else None

    def drain(self) -> Iterator[T]:
        """Lazily pop every element, largest first."""

        while self._data:
            yield self.pop()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _is_less(self, i: int, j: int) -> bool:
        return self._comparator(self._data[i], self._data[j]) < 0

    def _build_heap(self) -> None:
        if len(self._data) < 2:
            return
        # 2 * last_internal + 1 == len - 1 for the last internal node
        last_internal = (len(self._data) - 2) // 2
        for i in range(last_internal, -1, -1):
            self._sift_down(i)

    def _sift_up(self, i: int) -> None:
        data = self._data
        while i > 0:
            parent = _parent(i)
            if not self._is_less(parent, i):
                break
            data[parent], data[i] = data[i], data[parent]
            i = parent

    def _sift_down(self, i: int) -> None:
        data = self._data
        size = len(data)
        while True:
            left = _left_child(i)
            if left >= size:
                break
            largest = left if self._is_less(i, left) else i
            right = left + 1
            if right < size and self._is_less(largest, right):
                largest = right
            if largest == i:
                break
            data[i], data[largest] = data[largest], data[i]
            i = largest
