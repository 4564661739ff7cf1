"""Tests for the comparator-driven binary heap."""

from __future__ import annotations

import random

import pytest

from algokit.binary_heap import BinaryHeap, natural_order, reverse_order

SAMPLE = [2, 1, 6, 3, 9, 7, 4, 8, 5]


def test_heapify_with_explicit_comparator() -> None:
    heap = BinaryHeap(SAMPLE, comparator=lambda a, b: (a > b) - (a < b))
    for expected in range(9, 0, -1):
        assert heap.pop() == expected
    assert heap.pop_or_none() is None


def test_default_comparator_is_natural_order() -> None:
    heap = BinaryHeap(SAMPLE)
    assert list(heap.drain()) == list(range(9, 0, -1))
    assert not heap


def test_reverse_order_yields_min_heap() -> None:
    heap = BinaryHeap(comparator=reverse_order)
    for value in SAMPLE:
        heap.push(value)

    assert heap.peek() == 1
    assert len(heap) == len(SAMPLE)
    assert list(heap.drain()) == sorted(SAMPLE)


def test_comparator_orders_arbitrary_payloads() -> None:
    tasks = [{"name": "low", "priority": 1}, {"name": "high", "priority": 5}]
    heap = BinaryHeap(
        tasks, comparator=lambda a, b: natural_order(a["priority"], b["priority"])
    )
    heap.push({"name": "mid", "priority": 3})

    assert [task["name"] for task in heap.drain()] == ["high", "mid", "low"]


def test_random_pushes_and_pops_match_sorted_order() -> None:
    rng = random.Random(21)
    values = [rng.randint(-100, 100) for _ in range(500)]
    heap: BinaryHeap[int] = BinaryHeap()
    for value in values:
        heap.push(value)
    assert [heap.pop() for _ in range(len(values))] == sorted(values, reverse=True)


def test_empty_heap_errors() -> None:
    heap: BinaryHeap[int] = BinaryHeap()
    with pytest.raises(IndexError):
        heap.pop()
    with pytest.raises(IndexError):
        heap.peek()


def test_rejects_non_callable_comparator() -> None:
    with pytest.raises(TypeError):
        BinaryHeap([1, 2], comparator=3)  # type: ignore[arg-type]
