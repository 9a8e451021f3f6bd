"""Linked-list algorithms: digit arithmetic, cycles, intersections and sorting."""

from __future__ import annotations

from typing import Optional

from algodrills.linked_list import Node, _nodes


def add_one(head: Optional[Node]) -> Node:
    """Add one to the number whose digits the list holds, most significant first.

    The list is changed in place; a new leading node is added when the carry
    runs past the front.
    """
    carry = 1
    for node in reversed(list(_nodes(head))):
        node.data += carry
        if node.data < 10:
            carry = 0
            break
        node.data = 0
        carry = 1
    if carry:
        return Node(1, head)
    assert head is not None
    return head


def add_two_numbers(head1: Optional[Node], head2: Optional[Node]) -> Optional[Node]:
    """Sum of two numbers stored least significant digit first, as a new list."""
    dummy = Node(-1)
    current = dummy
    carry = 0
    first, second = head1, head2
    while first is not None or second is not None:
        total = carry
        if first is not None:
            total += first.data
            first = first.next
        if second is not None:
            total += second.data
            second = second.next
        carry, digit = divmod(total, 10)
        current.next = Node(digit)
        current = current.next
    if carry:
        current.next = Node(carry)
    return dummy.next


def intersection(head1: Optional[Node], head2: Optional[Node]) -> Optional[Node]:
    """The first node shared by both lists, or None when they never meet."""
    if head1 is None or head2 is None:
        return None
    a: Optional[Node] = head1
    b: Optional[Node] = head2
    while a is not b:
        a = a.next if a is not None else head2
        b = b.next if b is not None else head1
    return a


def _meeting_point(head: Optional[Node]) -> Optional[Node]:
    slow = fast = head
    while fast is not None and fast.next is not None:
        assert slow is not None
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def loop_length(head: Optional[Node]) -> int:
    """Number of nodes in the list's cycle; 0 when it has none."""
    meet = _meeting_point(head)
    if meet is None:
        return 0
    count = 1
    node = meet.next
    while node is not meet:
        assert node is not None
        count += 1
        node = node.next
    return count


def loop_start(head: Optional[Node]) -> Optional[Node]:
    """The node where the list's cycle begins, or None when it has none."""
    fast = _meeting_point(head)
    if fast is None:
        return None
    slow = head
    while slow is not fast:
        assert slow is not None and fast is not None
        slow = slow.next
        fast = fast.next
    return slow


def odd_even(head: Optional[Node]) -> Optional[Node]:
    """Regroup the list: nodes at odd positions first, then those at even ones."""
    if head is None or head.next is None:
        return head
    odd = head
    even: Optional[Node] = head.next
    even_head = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def sort_012(head: Optional[Node]) -> Optional[Node]:
    """Relink a list of 0s, 1s and 2s into ascending order."""
    heads = {value: Node(-1) for value in (0, 1, 2)}
    tails = dict(heads)
    node = head
    while node is not None:
        if node.data not in tails:
            raise ValueError(f"unexpected value {node.data!r}")
        tails[node.data].next = node
        tails[node.data] = node
        node = node.next
    tails[2].next = None
    tails[1].next = heads[2].next
    tails[0].next = heads[1].next if heads[1].next is not None else heads[2].next
    return heads[0].next


def merge_sorted(left: Optional[Node], right: Optional[Node]) -> Optional[Node]:
    """Merge two sorted lists into one by relinking their nodes."""
    dummy = Node(-1)
    tail = dummy
    while left is not None and right is not None:
        if left.data <= right.data:
            tail.next = left
            left = left.next
        else:
            tail.next = right
            right = right.next
        tail = tail.next
    tail.next = left if left is not None else right
    return dummy.next


def _find_middle(head: Node) -> Node:
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        assert slow.next is not None
        slow = slow.next
        fast = fast.next.next
    return slow


def merge_sort(head: Optional[Node]) -> Optional[Node]:
    """Sort the list by merge sort, relinking its nodes; equal values keep their order."""
    if head is None or head.next is None:
        return head
    mid = _find_middle(head)
    right = mid.next
    mid.next = None
    return merge_sorted(merge_sort(head), merge_sort(right))