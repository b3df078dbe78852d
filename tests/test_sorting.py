import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.sorting import (
    bubble_sort,
    bubble_sort_adaptive,
    count_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

COMPARISON_NAMES = [
    "bubble_sort",
    "bubble_sort_adaptive",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "selection_sort",
]

SOURCE_INPUTS = [
    [1, 5, 2, 6, 3],
    [9, 2, 56, 1, 5, 6, 2, 1],
    [12, 54, 65, 23, 7, 9],
    [9, 8, 1, 2, 7, 4, 9],
    [3, 1, 5, 4, 2, 0],
]


def _sort_all(make, with_count=True):
    """Run every sort on a fresh input from make() and collect the results by name."""
    results = {
        "bubble_sort": bubble_sort(make()),
        "bubble_sort_adaptive": bubble_sort_adaptive(make()),
        "insertion_sort": insertion_sort(make()),
        "merge_sort": merge_sort(make()),
        "quick_sort": quick_sort(make()),
        "selection_sort": selection_sort(make()),
    }
    if with_count:
        results["count_sort"] = count_sort(make())
    return results


def _expected(value, with_count=True):
    names = COMPARISON_NAMES + (["count_sort"] if with_count else [])
    return dict.fromkeys(names, value)


@pytest.mark.parametrize("data", SOURCE_INPUTS)
def test_source_examples_sorted(data):
    assert _sort_all(lambda: data) == _expected(sorted(data))


def test_bubble_sort_pinned_example():
    assert bubble_sort([1, 5, 2, 6, 3]) == [1, 2, 3, 5, 6]


def test_count_sort_pinned_example():
    assert count_sort([9, 2, 56, 1, 5, 6, 2, 1]) == [1, 1, 2, 2, 5, 6, 9, 56]


def test_empty_input():
    assert _sort_all(list) == _expected([])


def test_single_item():
    assert _sort_all(lambda: [4]) == _expected([4])


def test_input_not_modified():
    data = [5, 3, 9, 1, 3]
    snapshot = list(data)
    results = _sort_all(lambda: data)
    assert data == snapshot
    assert results == _expected(sorted(snapshot))


def test_accepts_generator():
    assert _sort_all(lambda: (x for x in (3, 0, 2))) == _expected([0, 2, 3])


def test_already_sorted_and_reversed():
    ascending = list(range(50))
    expected = _expected(ascending, with_count=False)
    assert _sort_all(lambda: ascending, with_count=False) == expected
    assert _sort_all(lambda: reversed(ascending), with_count=False) == expected


def test_all_equal():
    assert _sort_all(lambda: [7] * 10, with_count=False) == _expected([7] * 10, with_count=False)


def test_strings():
    words = ["pear", "apple", "fig", "banana"]
    assert _sort_all(lambda: words, with_count=False) == _expected(sorted(words), with_count=False)


@given(st.lists(st.integers(min_value=-1000, max_value=1000)))
def test_comparison_sorts_match_sorted(data):
    assert _sort_all(lambda: data, with_count=False) == _expected(sorted(data), with_count=False)


@given(st.lists(st.integers(min_value=0, max_value=500)))
def test_count_sort_matches_sorted(data):
    assert count_sort(data) == sorted(data)


@given(st.lists(st.floats(allow_nan=False)))
def test_floats(data):
    for result in _sort_all(lambda: data, with_count=False).values():
        assert all(a <= b for a, b in zip(result, result[1:]))
        assert sorted(result) == sorted(data)


def test_count_sort_rejects_negative():
    with pytest.raises(ValueError):
        count_sort([3, -1, 2])


def test_quick_sort_large_sorted_input():
    data = list(range(3000))
    assert quick_sort(data) == data


def test_merge_sort_is_stable():
    class Item:
        def __init__(self, key, tag):
            self.key = key
            self.tag = tag

        def __lt__(self, other):
            return self.key < other.key

    items = [Item(1, "a"), Item(0, "b"), Item(1, "c"), Item(0, "d")]
    result = merge_sort(items)
    assert [item.tag for item in result] == ["b", "d", "a", "c"]