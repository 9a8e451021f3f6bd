import pytest

from algodrills.substrings import (
    beauty_sum,
    count_homogenous,
    is_rotation,
    max_depth,
    remove_outer_parentheses,
    reverse_words,
    roman_to_int,
)


def test_count_homogenous_example():
    assert count_homogenous("abbcccaa") == 13


def test_count_homogenous_distinct_chars():
    s = "abcdef"
    assert count_homogenous(s) == len(s)
    assert count_homogenous("") == 0


def test_count_homogenous_is_order_independent_of_runs():
    assert count_homogenous("aabbb") == count_homogenous("bbbaa")


def test_max_depth():
    assert max_depth("(1+(2*3)+((8)/4))+1") == 3
    assert max_depth("no parens") == 0
    assert max_depth("((()))") == len("((()))") // 2


def test_is_rotation():
    assert is_rotation("abcde", "cdeab") is True
    assert is_rotation("abcde", "abced") is False
    assert is_rotation("abc", "abcd") is False
    assert is_rotation("", "") is False


def test_every_rotation_is_found():
    s = "rotation"
    for i in range(len(s)):
        assert is_rotation(s, s[i:] + s[:i])


def test_remove_outer_parentheses():
    assert remove_outer_parentheses("(()())(())") == "()()()"
    assert remove_outer_parentheses("()()") == ""


def test_remove_outer_wraps_back():
    inner = "()(())"
    assert remove_outer_parentheses("(" + inner + ")") == inner


def test_reverse_words():
    assert reverse_words("Om Sai Ram") == "Ram Sai Om"
    assert reverse_words("single") == "single"


def test_reverse_words_twice_restores():
    s = "the quick brown fox"
    assert reverse_words(reverse_words(s)) == s


@pytest.mark.parametrize(
    "numeral, value",
    [("IV", 4), ("III", 3), ("IX", 9), ("LVIII", 58), ("MCMXCIV", 1994)],
)
def test_roman_to_int(numeral, value):
    assert roman_to_int(numeral) == value


def test_roman_rejects_unknown_digit():
    with pytest.raises(ValueError):
        roman_to_int("XQ")


def test_beauty_sum_example():
    assert beauty_sum("aabcb") == 5


def test_beauty_sum_uniform_strings():
    assert beauty_sum("aaaa") == 0
    assert beauty_sum("abc") == 0
    assert beauty_sum("") == 0