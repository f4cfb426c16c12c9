"""Singly linked lists of integers and algorithms over them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; None when empty."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def merge_two_lists(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list, reusing their nodes.

    On equal values the node from ``second`` comes first.
    """
    if first is None:
        return second
    if second is None:
        return first

    sentinel = ListNode()
    tail = sentinel
    while first is not None and second is not None:
        if first.val < second.val:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return sentinel.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a list in place and return its new head."""
    previous: Optional[ListNode] = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def add_two_numbers(first: ListNode, second: ListNode) -> ListNode:
    """Add two numbers stored as lists of digits, least significant first."""
    if first is None or second is None:
        raise ValueError("both numbers must have at least one digit")

    sentinel = ListNode()
    tail = sentinel
    carry = 0
    a: Optional[ListNode] = first
    b: Optional[ListNode] = second
    while a is not None or b is not None:
        if a is not None:
            carry += a.val
            a = a.next
        if b is not None:
            carry += b.val
            b = b.next
        tail.next = ListNode(carry % 10)
        tail = tail.next
        carry //= 10
    if carry:
        tail.next = ListNode(carry % 10)
    assert sentinel.next is not None
    return sentinel.next


def is_palindrome_linked_list(head: Optional[ListNode]) -> bool:
    """Tell whether the list's values read the same in both directions."""
    values = list(head) if head is not None else []
    return values == values[::-1]