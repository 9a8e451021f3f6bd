"""Doubly linked lists: building, inserting, deleting, reversing and pair search."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class DNode:
    """One cell of a doubly linked list."""

    data: Any
    next: Optional[DNode] = None
    back: Optional[DNode] = None


def _nodes(head: Optional[DNode]) -> Iterator[DNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _unlink(node: DNode) -> None:
    prev, following = node.back, node.next
    if prev is not None:
        prev.next = following
    if following is not None:
        following.back = prev
    node.next = None
    node.back = None


def from_iterable(values: Iterable[Any]) -> Optional[DNode]:
    """Build a list holding ``values`` in order; None when there are none."""
    head: Optional[DNode] = None
    tail: Optional[DNode] = None
    for value in values:
        node = DNode(value, None, tail)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: Optional[DNode]) -> list[Any]:
    """The values of the list, front to back."""
    return [node.data for node in _nodes(head)]


def insert_at(head: Optional[DNode], k: int, value: Any) -> Optional[DNode]:
    """Insert ``value`` so that it becomes the ``k``-th node (1-based).

    A position beyond one past the end leaves the list unchanged.
    """
    if k == 1:
        node = DNode(value, head)
        if head is not None:
            head.back = node
        return node
    for position, node in enumerate(_nodes(head), start=1):
        if position == k - 1:
            new = DNode(value, node.next, node)
            if node.next is not None:
                node.next.back = new
            node.next = new
            break
    return head


def delete_head(head: Optional[DNode]) -> Optional[DNode]:
    """Remove the first node; an empty or single-node list becomes empty."""
    if head is None or head.next is None:
        return None
    new_head = head.next
    _unlink(head)
    return new_head


def delete_tail(head: Optional[DNode]) -> Optional[DNode]:
    """Remove the last node; an empty or single-node list becomes empty."""
    if head is None or head.next is None:
        return None
    tail = head
    while tail.next is not None:
        tail = tail.next
    _unlink(tail)
    return head


def delete_at(head: Optional[DNode], k: int) -> Optional[DNode]:
    """Remove the ``k``-th node (1-based); out-of-range positions change nothing."""
    if head is None:
        return None
    if k == 1:
        return delete_head(head)
    for position, node in enumerate(_nodes(head), start=1):
        if position == k:
            _unlink(node)
            break
    return head


def delete_first_value(head: Optional[DNode], value: Any) -> Optional[DNode]:
    """Remove the first node holding ``value``."""
    if head is None:
        return None
    if head.data == value:
        return delete_head(head)
    for node in _nodes(head.next):
        if node.data == value:
            _unlink(node)
            break
    return head


def delete_all(head: Optional[DNode], k: Any) -> Optional[DNode]:
    """Remove every node holding ``k``."""
    node = head
    while node is not None:
        following = node.next
        if node.data == k:
            if node is head:
                head = following
            _unlink(node)
        node = following
    return head


def remove_duplicates(head: Optional[DNode]) -> Optional[DNode]:
    """Keep one node of each run of equal values in a sorted list."""
    node = head
    while node is not None and node.next is not None:
        if node.next.data == node.data:
            _unlink(node.next)
        else:
            node = node.next
    return head


def reverse(head: Optional[DNode]) -> Optional[DNode]:
    """Reverse the list in place and return its new head."""
    new_head: Optional[DNode] = None
    node = head
    while node is not None:
        node.next, node.back = node.back, node.next
        new_head = node
        node = node.back
    return new_head


def pair_sums(head: Optional[DNode], k: Any) -> list[tuple[Any, Any]]:
    """Pairs of values in a sorted list of distinct values that add up to ``k``."""
    if head is None:
        return []
    left: DNode = head
    right: DNode = head
    while right.next is not None:
        right = right.next
    pairs: list[tuple[Any, Any]] = []
    while left.data < right.data:
        total = left.data + right.data
        if total == k:
            pairs.append((left.data, right.data))
            assert left.next is not None and right.back is not None
            left = left.next
            right = right.back
        elif total < k:
            assert left.next is not None
            left = left.next
        else:
            assert right.back is not None
            right = right.back
    return pairs