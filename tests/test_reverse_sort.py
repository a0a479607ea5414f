"""Tests for in-place reversal and merge sort on StringQueue."""

import random

import pytest

from strqueue import StringQueue, linkedlist


def make_queue(*values: str) -> StringQueue:
    queue = StringQueue()
    for value in values:
        queue.insert_tail(value)
    return queue


def node_ids(queue: StringQueue) -> set[int]:
    ids = set()
    node = queue._head
    while node is not None:
        ids.add(id(node))
        node = node.next
    return ids


def test_reverse_empty() -> None:
    """Test reversing an empty queue is a no-op."""
    queue = StringQueue()
    queue.reverse()
    assert queue.size() == 0
    queue.check_invariants()


def test_reverse_single() -> None:
    """Test reversing a single-value queue."""
    queue = make_queue("a")
    queue.reverse()
    assert list(queue) == ["a"]
    assert queue._head is queue._tail
    queue.check_invariants()


def test_reverse_swaps_head_and_tail() -> None:
    """Test that the old head becomes the tail and vice versa."""
    queue = StringQueue()
    queue.insert_head("a")
    queue.insert_head("b")
    assert list(queue) == ["b", "a"]
    old_head, old_tail = queue._head, queue._tail

    queue.reverse()
    assert list(queue) == ["a", "b"]
    assert queue._head is old_tail
    assert queue._tail is old_head
    assert queue.peek_tail() == "b"
    queue.check_invariants()


def test_reverse_twice_restores_order() -> None:
    """Test that reversal is an involution and keeps the size."""
    values = [f"v{i}" for i in range(11)]
    queue = make_queue(*values)

    queue.reverse()
    assert list(queue) == values[::-1]
    queue.reverse()
    assert list(queue) == values
    assert queue.size() == 11
    queue.check_invariants()


def test_reverse_keeps_nodes() -> None:
    """Test that reversal neither creates nor destroys nodes."""
    queue = make_queue("a", "b", "c", "d")
    before = node_ids(queue)
    queue.reverse()
    assert node_ids(queue) == before


def test_reverse_then_insert_tail() -> None:
    """Test that the tail is usable after reversal."""
    queue = make_queue("a", "b", "c")
    queue.reverse()
    queue.insert_tail("z")
    assert list(queue) == ["c", "b", "a", "z"]
    queue.check_invariants()


def test_sort_example() -> None:
    """Test sorting then removing the smallest value."""
    queue = make_queue("banana", "apple", "cherry")
    assert queue.size() == 3

    queue.sort()
    assert list(queue) == ["apple", "banana", "cherry"]
    queue.check_invariants()

    buffer = bytearray(16)
    assert queue.remove_head(buffer, len(buffer))
    assert bytes(buffer[:6]) == b"apple\x00"
    assert queue.size() == 2


def test_sort_empty_and_single() -> None:
    """Test sorting degenerate queues is a no-op."""
    queue = StringQueue()
    queue.sort()
    assert queue.size() == 0
    queue.check_invariants()

    queue = make_queue("only")
    node = queue._head
    queue.sort()
    assert queue._head is node
    assert queue._tail is node


def test_sort_recomputes_tail() -> None:
    """Test that the tail points to the largest value after sorting."""
    queue = make_queue("m", "z", "a")
    queue.sort()
    assert queue.peek_tail() == "z"
    assert queue._tail is not None and queue._tail.next is None
    queue.insert_tail("zz")
    assert list(queue) == ["a", "m", "z", "zz"]
    queue.check_invariants()


def test_sort_with_duplicates() -> None:
    """Test sorting values with duplicates keeps every copy."""
    values = ["b", "a", "c", "a", "b", "a"]
    queue = make_queue(*values)
    queue.sort()
    assert list(queue) == sorted(values)
    queue.check_invariants()


def test_sort_is_idempotent() -> None:
    """Test that sorting a sorted queue keeps the same order and nodes."""
    queue = make_queue("d", "b", "a", "c")
    queue.sort()
    first_pass = list(queue)
    head = queue._head

    queue.sort()
    assert list(queue) == first_pass
    assert queue._head is head


def test_sort_keeps_nodes() -> None:
    """Test that sorting neither creates nor destroys nodes."""
    queue = make_queue("q", "w", "e", "r", "t", "y")
    before = node_ids(queue)
    queue.sort()
    assert node_ids(queue) == before


def test_sort_random_permutation() -> None:
    """Test that sorting yields a non-decreasing permutation of the input."""
    rng = random.Random(1234)
    values = ["".join(rng.choices("abcXYZ019", k=rng.randint(0, 6))) for _ in range(500)]
    queue = make_queue(*values)

    queue.sort()
    result = list(queue)
    assert result == sorted(values)
    assert all(a <= b for a, b in zip(result, result[1:]))
    assert queue.size() == len(values)
    queue.check_invariants()


def test_sort_reverse_sorted_input() -> None:
    """Test sorting a descending queue."""
    values = [f"{i:04d}" for i in range(100)]
    queue = make_queue(*reversed(values))
    queue.sort()
    assert list(queue) == values


def test_sort_large_queue_does_not_exhaust_stack() -> None:
    """Test sorting a queue far longer than the recursion limit."""
    rng = random.Random(42)
    values = [str(rng.randrange(1_000_000)) for _ in range(50_000)]
    queue = make_queue(*values)

    queue.sort()
    assert list(queue) == sorted(values)
    queue.check_invariants()


def test_sort_then_reverse() -> None:
    """Test reversing a sorted queue gives descending order."""
    queue = make_queue("b", "c", "a")
    queue.sort()
    queue.reverse()
    assert list(queue) == ["c", "b", "a"]
    queue.check_invariants()


def test_sort_allocates_no_nodes(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that sorting relinks existing nodes without constructing any."""
    created = []

    class CountingNode(linkedlist.Node):
        __slots__ = ()

        def __init__(self, value: str) -> None:
            created.append(value)
            super().__init__(value)

    queue = make_queue("h", "c", "f", "a", "g", "b", "e", "d")
    monkeypatch.setattr(linkedlist, "Node", CountingNode)

    queue.sort()
    assert list(queue) == ["a", "b", "c", "d", "e", "f", "g", "h"]
    assert created == []
