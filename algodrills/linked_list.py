"""Singly linked lists and the classic drills on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    data: Any
    next: Optional[Node] = None


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_iterable(values: Iterable[Any]) -> Optional[Node]:
    """Build a list holding ``values`` in order; None when there are none."""
    head: Optional[Node] = None
    tail: Optional[Node] = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: Optional[Node]) -> list[Any]:
    """The values of the list, front to back."""
    return [node.data for node in _nodes(head)]


def length(head: Optional[Node]) -> int:
    """Number of nodes in the list."""
    return sum(1 for _ in _nodes(head))


def contains(head: Optional[Node], x: Any) -> bool:
    """Whether some node holds ``x``."""
    return any(node.data == x for node in _nodes(head))


def insert_at(head: Optional[Node], value: Any, k: int) -> Optional[Node]:
    """Insert ``value`` so that it becomes the ``k``-th node (1-based).

    A position past the end of the list plus one leaves the list unchanged.
    """
    if k == 1:
        return Node(value, head)
    for position, node in enumerate(_nodes(head), start=1):
        if position == k - 1:
            node.next = Node(value, node.next)
            break
    return head


def delete_value(head: Optional[Node], value: Any) -> Optional[Node]:
    """Remove the first node holding ``value``; the list is unchanged if none does."""
    if head is None:
        return None
    if head.data == value:
        return head.next
    prev = head
    for node in _nodes(head.next):
        if node.data == value:
            prev.next = node.next
            break
        prev = node
    return head


def middle_value(head: Optional[Node]) -> Any:
    """Value of the middle node; the second of the two middles for even lengths."""
    if head is None:
        raise ValueError("list is empty")
    slow = fast = head
    while fast is not None and fast.next is not None:
        assert slow.next is not None
        slow = slow.next
        fast = fast.next.next
    return slow.data


def delete_middle(head: Optional[Node]) -> Optional[Node]:
    """Remove the node at index ``length // 2``."""
    if head is None or head.next is None:
        return None
    slow = head
    fast = head.next.next
    while fast is not None and fast.next is not None:
        assert slow.next is not None
        slow = slow.next
        fast = fast.next.next
    assert slow.next is not None
    slow.next = slow.next.next
    return head


def remove_nth_from_end(head: Optional[Node], n: int) -> Optional[Node]:
    """Remove the ``n``-th node counted from the end (1 is the last node)."""
    if n < 1:
        raise IndexError("n must be at least 1")
    fast = head
    for _ in range(n):
        if fast is None:
            raise IndexError("n exceeds the length of the list")
        fast = fast.next
    if fast is None:
        assert head is not None
        return head.next
    slow = head
    while fast.next is not None:
        assert slow is not None
        slow = slow.next
        fast = fast.next
    assert slow is not None and slow.next is not None
    slow.next = slow.next.next
    return head


def rotate_right(head: Optional[Node], k: int) -> Optional[Node]:
    """Rotate the list ``k`` places to the right."""
    if head is None or head.next is None or k == 0:
        return head
    tail = head
    size = 1
    while tail.next is not None:
        tail = tail.next
        size += 1
    k %= size
    if k == 0:
        return head
    new_tail = head
    for _ in range(size - k - 1):
        assert new_tail.next is not None
        new_tail = new_tail.next
    new_head = new_tail.next
    new_tail.next = None
    tail.next = head
    return new_head


def reverse(head: Optional[Node]) -> Optional[Node]:
    """Reverse the list in place and return its new head."""
    prev: Optional[Node] = None
    node = head
    while node is not None:
        following = node.next
        node.next = prev
        prev = node
        node = following
    return prev


def is_palindrome(head: Optional[Node]) -> bool:
    """Whether the values read the same both ways; the list is left as it was."""
    if head is None or head.next is None:
        return True
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        assert slow.next is not None
        slow = slow.next
        fast = fast.next.next
    second = reverse(slow.next)
    result = True
    first: Optional[Node] = head
    other = second
    while other is not None:
        assert first is not None
        if first.data != other.data:
            result = False
            break
        first = first.next
        other = other.next
    slow.next = reverse(second)
    return result