import pytest

from algodrills.sliding_window import (
    character_replacement,
    count_abc_substrings,
    count_nice_subarrays,
    count_subarrays_with_sum,
    longest_k_distinct,
    longest_ones,
    longest_unique_substring,
    max_card_points,
    total_fruit,
)


def test_subarray_counts_cover_every_subarray():
    arr = [1, 0, 0, 1, 1, 0]
    n = len(arr)
    total = sum(count_subarrays_with_sum(arr, goal) for goal in range(sum(arr) + 1))
    assert total == n * (n + 1) // 2


def test_subarray_count_negative_goal():
    assert not count_subarrays_with_sum([1, 0, 1], -1)


def test_subarray_count_all_zeros():
    arr = [0, 0, 0, 0]
    n = len(arr)
    assert count_subarrays_with_sum(arr, 0) == n * (n + 1) // 2


@pytest.mark.parametrize("k", [0, 1, 2, 3])
def test_nice_subarrays_match_parity_sums(k):
    assert count_nice_subarrays([1, 2, 3, 4, 5], k) == count_subarrays_with_sum(
        [1, 0, 1, 0, 1], k
    )


def test_nice_subarrays_negative_odds():
    assert count_nice_subarrays([-1, -3, 2], 2) == count_nice_subarrays([1, 3, 2], 2)


def test_nice_subarrays_cover_every_subarray():
    arr = [2, 7, 4, 9, 11, 6]
    n = len(arr)
    odds = sum(value % 2 for value in arr)
    assert sum(count_nice_subarrays(arr, k) for k in range(odds + 1)) == n * (n + 1) // 2


def test_longest_k_distinct_source_example():
    assert longest_k_distinct("aaabbccd", 2) == 5


@pytest.mark.parametrize(
    "s,k",
    [("aaabbccd", 2), ("abaccc", 2), ("eceba", 2), ("abcabc", 1), ("", 3), ("aabbcc", 3)],
)
def test_total_fruit_agrees_with_shrinking_window(s, k):
    assert total_fruit(s, k) == longest_k_distinct(s, k)


def test_total_fruit_on_lists():
    fruits = [1, 2, 1, 2, 3, 3, 3, 2]
    assert total_fruit(fruits, 2) == longest_k_distinct(fruits, 2)


def test_longest_k_distinct_enough_room():
    s = "abcabcab"
    assert longest_k_distinct(s, len(set(s))) == len(s)


def test_character_replacement_source_example():
    assert character_replacement("AAAABBCCDD", 2) == 6


def test_character_replacement_bounds():
    s = "ABBACCCAB"
    result = character_replacement(s, 1)
    assert max(s.count(ch) for ch in set(s)) <= result + 1
    assert result <= len(s)
    assert character_replacement(s, len(s)) == len(s)


def test_longest_unique_substring_source_example():
    assert longest_unique_substring("abcabcbb") == 3


def test_longest_unique_substring_distinct_and_empty():
    assert longest_unique_substring("abcdef") == len("abcdef")
    assert not longest_unique_substring("")


def test_longest_unique_substring_bounded_by_alphabet():
    s = "pwwkewqpwk"
    assert longest_unique_substring(s) <= len(set(s))


def test_longest_ones_enough_flips():
    bits = [0, 1, 0, 1, 0]
    assert longest_ones(bits, bits.count(0)) == len(bits)


def test_longest_ones_no_zeros():
    bits = [1, 1, 1, 1]
    assert longest_ones(bits, 0) == len(bits)


def test_longest_ones_grows_with_k():
    bits = [1, 0, 0, 1, 1, 0, 1, 0, 0, 1]
    results = [longest_ones(bits, k) for k in range(bits.count(0) + 1)]
    assert results == sorted(results)
    assert results[-1] == len(bits)


def test_max_card_points_all_cards():
    cards = [1, 2, 3, 4, 5, 6]
    assert max_card_points(cards, len(cards)) == sum(cards)


def test_max_card_points_increasing_prefers_suffix():
    cards = [1, 2, 3, 4, 5, 6]
    assert max_card_points(cards, 3) == sum(cards[-3:])


def test_max_card_points_zero_cards():
    assert max_card_points([4, 5], 0) == 0


def test_max_card_points_too_many():
    with pytest.raises(ValueError):
        max_card_points([1, 2], 3)


def test_count_abc_substrings_minimal():
    assert count_abc_substrings("abc") == 1


def test_count_abc_substrings_missing_letter():
    assert not count_abc_substrings("aabbaab")


def test_count_abc_substrings_bounded():
    s = "abcbbca"
    n = len(s)
    assert 0 < count_abc_substrings(s) <= n * (n + 1) // 2


def test_count_abc_substrings_rejects_other_letters():
    with pytest.raises(ValueError):
        count_abc_substrings("abd")