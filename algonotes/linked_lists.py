"""Singly linked lists and multilevel (next/bottom) lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A list node with a horizontal ``next`` link and a vertical ``bottom`` link."""

    data: int
    next: Optional[ListNode] = None
    bottom: Optional[ListNode] = None


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a list linked through ``next``; return its head, or None when empty."""
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


def _walk(head: Optional[ListNode], link: str) -> Iterator[int]:
    while head is not None:
        yield head.data
        head = getattr(head, link)


def to_list(head: Optional[ListNode]) -> list[int]:
    """Values reached by following ``next`` links."""
    return list(_walk(head, "next"))


def bottom_values(head: Optional[ListNode]) -> list[int]:
    """Values reached by following ``bottom`` links."""
    return list(_walk(head, "bottom"))


def build_multilevel(columns: Iterable[Sequence[int]]) -> Optional[ListNode]:
    """Build a multilevel list: column heads joined by ``next``, each column by ``bottom``.

    Every column must hold at least one value.
    """
    head: Optional[ListNode] = None
    previous: Optional[ListNode] = None
    for column in columns:
        if not column:
            raise ValueError("every column needs at least one value")
        first, *rest = column
        top = ListNode(first)
        below = top
        for value in rest:
            below.bottom = ListNode(value)
            below = below.bottom
        if previous is None:
            head = top
        else:
            previous.next = top
        previous = top
    return head


def merge_bottom(first: Optional[ListNode], second: Optional[ListNode]) -> Optional[ListNode]:
    """Merge two lists sorted along ``bottom``; on equal values ``second`` goes first."""
    anchor = ListNode(0)
    tail = anchor
    while first is not None and second is not None:
        if first.data < second.data:
            tail.bottom = first
            first = first.bottom
        else:
            tail.bottom = second
            second = second.bottom
        tail = tail.bottom
    tail.bottom = first if first is not None else second
    return anchor.bottom


def flatten(root: Optional[ListNode]) -> Optional[ListNode]:
    """Merge every sorted column of a multilevel list into one list along ``bottom``."""
    heads: list[ListNode] = []
    node = root
    while node is not None:
        heads.append(node)
        node = node.next
    if not heads:
        return None
    result = heads[-1]
    for head in reversed(heads[:-1]):
        head.next = result
        result = merge_bottom(head, result)
    return result


def merge_sorted(first: Optional[ListNode], second: Optional[ListNode]) -> Optional[ListNode]:
    """Merge two ``next``-linked sorted lists in place, reusing their nodes.

    On equal values the node from the list holding the smaller head comes first.
    """
    if first is None:
        return second
    if second is None:
        return first
    if first.data > second.data:
        first, second = second, first
    head = first
    while first is not None and second is not None:
        tail = first
        while first is not None and first.data <= second.data:
            tail = first
            first = first.next
        tail.next = second
        first, second = second, first
    return head