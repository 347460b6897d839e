"""Singly linked lists and the classic operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

__all__ = [
    "ListNode",
    "RandomNode",
    "build_list",
    "merge_two_lists",
    "partition",
    "copy_random_list",
    "reverse_list",
    "delete_node",
]


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


@dataclass(eq=False)
class RandomNode:
    """A list node with an extra pointer to any node of the list, or None."""

    val: int
    next: Optional[RandomNode] = None
    random: Optional[RandomNode] = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[RandomNode] = self
        while node is not None:
            yield node.val
            node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; None if empty."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def merge_two_lists(list1: Optional[ListNode], list2: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list.

    On equal values the node from ``list2`` comes first.
    """
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def partition(head: Optional[ListNode], x: int) -> Optional[ListNode]:
    """Relink the list so nodes below ``x`` precede the others, keeping order."""
    before = ListNode()
    after = ListNode()
    before_tail, after_tail = before, after
    node = head
    while node is not None:
        if node.val < x:
            before_tail.next = node
            before_tail = node
        else:
            after_tail.next = node
            after_tail = node
        node = node.next
    after_tail.next = None
    before_tail.next = after.next
    return before.next


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Return a deep copy of a list whose nodes also carry random pointers."""
    copies: dict[RandomNode, RandomNode] = {}
    node = head
    while node is not None:
        copies[node] = RandomNode(node.val)
        node = node.next
    for original, copy in copies.items():
        copy.next = copies[original.next] if original.next is not None else None
        copy.random = copies[original.random] if original.random is not None else None
    return copies[head] if head is not None else None


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous: Optional[ListNode] = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list given only the node itself.

    The node takes over its successor's value and link, so it cannot be
    the last node of the list.
    """
    following = node.next
    if following is None:
        raise ValueError("cannot delete the last node of a list")
    node.val = following.val
    node.next = following.next