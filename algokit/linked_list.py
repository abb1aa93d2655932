"""Singly linked lists and common operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; None when empty."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as reversed digit lists."""

    def digits() -> Iterator[int]:
        a, b, carry = l1, l2, 0
        while a is not None or b is not None or carry:
            total = carry
            if a is not None:
                total += a.val
                a = a.next
            if b is not None:
                total += b.val
                b = b.next
            carry, digit = divmod(total, 10)
            yield digit

    return build_list(digits())


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node of ``head_a`` that is also part of ``head_b``."""
    if head_a is None or head_b is None:
        return None
    in_b = {id(node) for node in _nodes(head_b)}
    return next((node for node in _nodes(head_a) if id(node) in in_b), None)


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list."""
    dummy = ListNode(-1)
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Unlink every node whose value equals ``val``."""
    while head is not None and head.val == val:
        head = head.next
    node = head
    while node is not None and node.next is not None:
        if node.next.val == val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Remove the n-th node counted from the end (1 is the last node).

    A single-node list with ``n == 0`` is returned unchanged.
    """
    if head is None:
        raise ValueError("cannot remove a node from an empty list")
    if head.next is None:
        if n == 1:
            return None
        if n == 0:
            return head
    length = sum(1 for _ in _nodes(head))
    if not 1 <= n <= length:
        raise ValueError(f"n must be between 1 and {length}, got {n}")
    if n == length:
        return head.next
    before = head
    for _ in range(length - n - 1):
        before = before.next  # type: ignore[assignment]
    before.next = before.next.next  # type: ignore[union-attr]
    return head


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list to the right by ``k`` places; k <= 0 leaves it unchanged."""
    if head is None or head.next is None or k <= 0:
        return head
    nodes = list(_nodes(head))
    shift = k % len(nodes)
    if shift == 0:
        return head
    new_tail = nodes[-shift - 1]
    new_head = nodes[-shift]
    nodes[-1].next = head
    new_tail.next = None
    return new_head


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes."""
    if head is None or head.next is None:
        return head
    dummy = ListNode()
    prev, curr = dummy, head
    while curr is not None and curr.next is not None:
        second = curr.next
        prev.next = second
        curr.next = second.next
        second.next = curr
        prev, curr = curr, curr.next
    return dummy.next