import pytest

from algodrills.text import atoi, is_anagram, largest_odd_prefix, longest_common_prefix


def test_anagram_source_example():
    assert is_anagram("raj", "jar")


@pytest.mark.parametrize("a,b", [("raj", "rat"), ("aab", "abb"), ("ab", "abc")])
def test_not_anagram(a, b):
    assert not is_anagram(a, b)


def test_atoi_negative():
    assert atoi("-2121") == -2121


@pytest.mark.parametrize("n", [0, 7, 123, 987654321])
def test_atoi_round_trip(n):
    assert atoi(str(n)) == n
    assert atoi(str(-n)) == -n


@pytest.mark.parametrize("bad", ["", "-", "12a", "+5", "1 2", "--3"])
def test_atoi_rejects(bad):
    with pytest.raises(ValueError):
        atoi(bad)


@pytest.mark.parametrize("s", ["54456", "35427", "2468", "1", "1000", "7280"])
def test_largest_odd_prefix_invariants(s):
    result = largest_odd_prefix(s)
    assert s.startswith(result)
    assert all(int(d) % 2 == 0 for d in s[len(result):])
    if result:
        assert int(result[-1]) % 2 == 1


def test_largest_odd_prefix_whole_string():
    assert largest_odd_prefix("35427") == "35427"


def test_largest_odd_prefix_none():
    assert largest_odd_prefix("2468") == ""


def test_longest_common_prefix_source_example():
    assert longest_common_prefix(["flower", "flow", "float"]) == "flo"


@pytest.mark.parametrize(
    "words,expected",
    [([], ""), (["abc"], "abc"), (["a", "b"], ""), (["flow", "flower"], "flow")],
)
def test_longest_common_prefix_edges(words, expected):
    assert longest_common_prefix(words) == expected


def test_longest_common_prefix_is_prefix_of_all():
    words = ["interview", "internet", "interval", "internal"]
    result = longest_common_prefix(words)
    assert all(w.startswith(result) for w in words)
    assert len({w[: len(result) + 1] for w in words}) > 1