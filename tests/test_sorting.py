from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.sorting import (
    bubble_sort,
    count_inversions,
    counting_sort,
    merge_sort,
    modified_shell_sort,
    quick_sort,
    radix_sort,
    selection_sort,
    shell_sort,
)

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60)


@given(values=int_lists)
def test_general_sorts_agree_with_sorted(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert selection_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert shell_sort(values) == expected


def test_input_is_not_modified():
    data = [5, 3, 8, 1, 9, 2]
    snapshot = list(data)
    assert bubble_sort(data) == [1, 2, 3, 5, 8, 9]
    assert selection_sort(data) == [1, 2, 3, 5, 8, 9]
    assert merge_sort(data) == [1, 2, 3, 5, 8, 9]
    assert quick_sort(data) == [1, 2, 3, 5, 8, 9]
    assert shell_sort(data) == [1, 2, 3, 5, 8, 9]
    assert Counter(modified_shell_sort(data)) == Counter(snapshot)
    assert radix_sort(data) == [1, 2, 3, 5, 8, 9]
    assert data == snapshot


def test_empty_and_single():
    assert bubble_sort([]) == []
    assert bubble_sort([7]) == [7]
    assert selection_sort([]) == []
    assert selection_sort([7]) == [7]
    assert merge_sort([]) == []
    assert merge_sort([7]) == [7]
    assert quick_sort([]) == []
    assert quick_sort([7]) == [7]
    assert shell_sort([]) == []
    assert shell_sort([7]) == [7]
    assert modified_shell_sort([]) == []
    assert modified_shell_sort([7]) == [7]
    assert radix_sort([]) == []
    assert radix_sort([7]) == [7]


def test_merge_sort_is_stable():
    pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]
    keyed = [_Keyed(k, tag) for k, tag in pairs]
    result = merge_sort(keyed)
    assert [item.tag for item in result] == ["b", "d", "a", "c"]


class _Keyed:
    def __init__(self, key, tag):
        self.key = key
        self.tag = tag

    def __lt__(self, other):
        return self.key < other.key

    def __le__(self, other):
        return self.key <= other.key

    def __gt__(self, other):
        return self.key > other.key

    def __ge__(self, other):
        return self.key >= other.key


def test_sorts_accept_strings():
    words = ["pear", "apple", "fig"]
    assert quick_sort(words) == sorted(words)
    assert merge_sort(iter(words)) == sorted(words)


@given(values=st.lists(st.integers(min_value=0, max_value=9), max_size=60))
def test_counting_sort_default_range(values):
    assert counting_sort(values) == sorted(values)


@given(values=st.lists(st.integers(min_value=0, max_value=99), max_size=60))
def test_counting_sort_custom_range(values):
    assert counting_sort(values, 100) == sorted(values)


@pytest.mark.parametrize("bad", [10, -1])
def test_counting_sort_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        counting_sort([1, bad, 3])


def test_counting_sort_rejects_empty_range():
    with pytest.raises(ValueError):
        counting_sort([], 0)


@given(values=st.lists(st.integers(min_value=0, max_value=100_000), max_size=60))
def test_radix_sort_matches_sorted(values):
    assert radix_sort(values) == sorted(values)


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])


def test_radix_sort_all_zero():
    assert radix_sort([0, 0, 0]) == [0, 0, 0]


@given(values=int_lists)
def test_modified_shell_sort_is_permutation(values):
    assert Counter(modified_shell_sort(values)) == Counter(values)


@given(values=int_lists)
def test_modified_shell_sort_keeps_sorted_input(values):
    ordered = sorted(values)
    assert modified_shell_sort(ordered) == ordered


def test_modified_shell_sort_reversed_example():
    assert modified_shell_sort([4, 3, 2, 1]) == [1, 2, 3, 4]


def test_count_inversions_sample():
    assert count_inversions([2, 3, 9, 2, 9]) == 2


@given(values=int_lists)
def test_sorted_input_has_no_inversions(values):
    assert count_inversions(sorted(values)) == 0


@given(n=st.integers(min_value=0, max_value=60))
def test_reversed_distinct_has_all_pairs_inverted(n):
    values = list(range(n, 0, -1))
    assert count_inversions(values) == n * (n - 1) // 2


@given(values=int_lists)
def test_inversions_of_reverse_complement(values):
    distinct = list(dict.fromkeys(values))
    n = len(distinct)
    total = n * (n - 1) // 2
    assert count_inversions(distinct) + count_inversions(distinct[::-1]) == total


def test_count_inversions_does_not_modify_input():
    data = [3, 1, 2]
    assert count_inversions(data) == 2
    assert data == [3, 1, 2]