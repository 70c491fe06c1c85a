"""Singly linked lists: construction, merging, cycle detection and reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = field(default=None, repr=False)


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order and return its head."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of a list in order; raise ValueError if it loops."""
    seen: set[int] = set()
    values = []
    for node in _nodes(head):
        if id(node) in seen:
            raise ValueError("linked list contains a cycle")
        seen.add(id(node))
        values.append(node.val)
    return values


def merge_two_lists(list1: ListNode | None, list2: ListNode | None) -> ListNode | None:
    """Merge two sorted lists.

    The values of ``list1`` are inserted as new nodes into ``list2``, whose
    head is returned; ``list1`` itself is left untouched.  If ``list2`` is
    empty, ``list1`` is returned as it is.
    """
    if list2 is None:
        return list1
    if list1 is None:
        return list2
    node = list2
    for value in (n.val for n in _nodes(list1)):
        while node.next is not None and node.next.val < value:
            node = node.next
        if node.val > value:
            node.val, value = value, node.val
        node.next = ListNode(value, node.next)
    return list2


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if fast is slow:
            return True
    return False


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a list in place and return its new head."""
    previous: ListNode | None = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous