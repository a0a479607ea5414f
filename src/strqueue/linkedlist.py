"""Singly-linked node chain and the in-place algorithms that relink it."""

from collections.abc import Iterator


class Node:
    """A node in the singly-linked chain."""

    __slots__ = ("value", "next")

    def __init__(self, value: str) -> None:
        self.value = value
        self.next: Node | None = None


def iter_values(head: Node | None) -> Iterator[str]:
    """Yield stored values from head to the end of the chain."""
    node = head
    while node is not None:
        yield node.value
        node = node.next


def last_node(head: Node | None) -> Node | None:
    """Return the node whose successor is absent. O(n)."""
    if head is None:
        return None
    node = head
    while node.next is not None:
        node = node.next
    return node


def release_chain(head: Node | None) -> int:
    """
    Unlink every node of the chain and return how many were released.

    Nodes are detached one at a time so that dropping a long chain never
    triggers a deep recursive deallocation.
    """
    released = 0
    node = head
    while node is not None:
        successor = node.next
        node.next = None
        node = successor
        released += 1
    return released


def reverse_chain(head: Node | None) -> Node | None:
    """
    Reverse the successor direction of every node in place.

    Returns the new head (the old last node). O(n) time, O(1) extra space.
    """
    prev: Node | None = None
    curr = head
    while curr is not None:
        successor = curr.next
        curr.next = prev
        prev = curr
        curr = successor
    return prev


def split_chain(head: Node) -> tuple[Node, Node | None]:
    """
    Sever the chain at its midpoint and return both halves.

    The slow cursor advances one node per step and the fast cursor two;
    when fast runs out of pairs, slow sits on the last node of the first
    half. For odd lengths the first half is the longer one.
    """
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    second = slow.next
    slow.next = None
    return head, second


def merge_chains(left: Node | None, right: Node | None) -> Node | None:
    """
    Merge two ascending chains into one by relinking their nodes.

    On equal values the node from ``left`` goes first. No node is allocated.
    """
    if left is None:
        return right
    if right is None:
        return left

    if left.value <= right.value:
        head = tail = left
        left = left.next
    else:
        head = tail = right
        right = right.next

    while left is not None and right is not None:
        if left.value <= right.value:
            tail.next = left
            tail = left
            left = left.next
        else:
            tail.next = right
            tail = right
            right = right.next
    tail.next = left if left is not None else right
    return head


def merge_sort(head: Node | None) -> Node | None:
    """Sort the chain ascending and return the new head. Recursion depth is O(log n)."""
    if head is None or head.next is None:
        return head
    first, second = split_chain(head)
    return merge_chains(merge_sort(first), merge_sort(second))
