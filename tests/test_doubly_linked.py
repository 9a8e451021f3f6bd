import pytest

from algodrills.doubly_linked import (
    DNode,
    delete_all,
    delete_at,
    delete_first_value,
    delete_head,
    delete_tail,
    from_iterable,
    insert_at,
    pair_sums,
    remove_duplicates,
    reverse,
    to_list,
)


def backward(head):
    """Values read from the tail back to the head via the back pointers."""
    if head is None:
        return []
    assert head.back is None
    node = head
    while node.next is not None:
        assert node.next.back is node
        node = node.next
    values = []
    while node is not None:
        values.append(node.data)
        node = node.back
    return values


def check(head, expected):
    assert to_list(head) == expected
    assert backward(head) == list(reversed(expected))


@pytest.mark.parametrize("values", [[], [7], [1, 2, 3, 4]])
def test_round_trip(values):
    check(from_iterable(values), values)


def test_node_defaults():
    node = DNode(3)
    assert (node.data, node.next, node.back) == (3, None, None)


def test_insert_in_middle():
    check(insert_at(from_iterable([1, 2, 3, 4]), 2, 5), [1, 5, 2, 3, 4])


def test_insert_at_front_and_end():
    check(insert_at(from_iterable([1, 2]), 1, 0), [0, 1, 2])
    check(insert_at(from_iterable([1, 2]), 3, 9), [1, 2, 9])
    check(insert_at(None, 1, 4), [4])


def test_insert_past_end_changes_nothing():
    check(insert_at(from_iterable([1, 2]), 5, 9), [1, 2])


def test_delete_head_and_tail():
    check(delete_head(from_iterable([1, 2, 3, 4])), [2, 3, 4])
    check(delete_tail(from_iterable([1, 2, 3, 4])), [1, 2, 3])
    assert delete_head(from_iterable([1])) is None
    assert delete_tail(from_iterable([1])) is None
    assert delete_head(None) is None


@pytest.mark.parametrize(
    "k, expected",
    [(1, [2, 3, 4]), (2, [1, 3, 4]), (4, [1, 2, 3]), (9, [1, 2, 3, 4])],
)
def test_delete_at(k, expected):
    check(delete_at(from_iterable([1, 2, 3, 4]), k), expected)


def test_delete_first_value():
    check(delete_first_value(from_iterable([1, 2, 3, 4]), 3), [1, 2, 4])
    check(delete_first_value(from_iterable([1, 2, 3, 4]), 1), [2, 3, 4])
    check(delete_first_value(from_iterable([3, 1, 3]), 3), [1, 3])
    check(delete_first_value(from_iterable([1, 2]), 8), [1, 2])


def test_delete_all():
    check(delete_all(from_iterable([1, 5, 3, 5, 4, 5]), 5), [1, 3, 4])
    check(delete_all(from_iterable([5, 5, 2]), 5), [2])
    assert delete_all(from_iterable([5]), 5) is None


def test_remove_duplicates():
    check(remove_duplicates(from_iterable([1, 2, 2, 3, 3, 4])), [1, 2, 3, 4])
    check(remove_duplicates(from_iterable([1, 1, 1])), [1])


@pytest.mark.parametrize("values", [[1, 2, 3, 4], [9], []])
def test_reverse(values):
    check(reverse(from_iterable(values)), list(reversed(values)))


def test_reverse_twice_restores():
    values = [4, 8, 15, 16]
    check(reverse(reverse(from_iterable(values))), values)


def test_pair_sums():
    assert pair_sums(from_iterable([1, 2, 3, 4, 9]), 5) == [(1, 4), (2, 3)]
    assert pair_sums(None, 5) == []


def test_pair_sums_invariant():
    values = [1, 2, 4, 5, 6, 8, 9]
    for target in range(3, 18):
        pairs = pair_sums(from_iterable(values), target)
        assert all(a + b == target and a < b for a, b in pairs)
        expected = [(a, target - a) for a in values if a < target - a and target - a in values]
        assert pairs == expected