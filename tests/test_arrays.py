from collections import Counter

import pytest
from hypothesis import given, strategies as st

from algokit.arrays import (
    array_sum,
    intersection,
    majority_element,
    max_area,
    max_frequency_elements,
    max_product,
    max_subarray,
    minimum_deletions,
    pivot_index,
    remove_duplicates,
    repeating_elements,
    reverse_after,
    rotate,
    running_sum,
)

ints = st.integers(-50, 50)


def test_max_frequency_elements_example():
    assert max_frequency_elements([1, 2, 2, 3, 1, 4]) == 4


def test_max_frequency_elements_all_distinct():
    assert max_frequency_elements([1, 2, 3, 4, 5]) == 5


def test_max_frequency_elements_empty():
    assert max_frequency_elements([]) == 0


@given(st.lists(ints, min_size=1, max_size=40))
def test_max_frequency_elements_is_multiple_of_top_count(values):
    top = max(Counter(values).values())
    result = max_frequency_elements(values)
    assert result % top == 0
    assert top <= result <= len(values)


def test_repeating_elements_sample():
    assert sorted(repeating_elements([1, 1, 2, 3, 4, 4, 5, 1, 2])) == [1, 2, 4]


@given(st.lists(st.integers(0, 10), max_size=40))
def test_repeating_elements_invariant(values):
    result = repeating_elements(values)
    assert len(result) == len(set(result))
    assert all(values.count(value) > 1 for value in result)
    assert {v for v in values if values.count(v) > 1} == set(result)


@given(st.lists(ints, max_size=30), st.lists(ints, max_size=30))
def test_intersection_matches_sets(first, second):
    result = intersection(first, second)
    assert len(result) == len(set(result))
    assert set(result) == set(first) & set(second)


def test_majority_element_example():
    assert majority_element([2, 2, 1, 1, 1, 2, 2]) == 2


def test_majority_element_empty():
    with pytest.raises(ValueError):
        majority_element([])


@given(st.lists(st.integers(0, 5), min_size=1, max_size=40))
def test_majority_element_has_top_count(values):
    counts = Counter(values)
    assert counts[majority_element(values)] == max(counts.values())


def test_max_product_example():
    assert max_product([2, 3, -2, 4]) == 6


def test_max_product_empty():
    with pytest.raises(ValueError):
        max_product([])


@given(st.lists(st.integers(1, 9), min_size=1, max_size=10))
def test_max_product_all_positive_is_whole_product(values):
    product = 1
    for value in values:
        product *= value
    assert max_product(values) == product


@given(ints)
def test_max_product_single(value):
    assert max_product([value]) == value


def test_max_subarray_empty():
    with pytest.raises(ValueError):
        max_subarray([])


@given(st.lists(st.integers(0, 50), min_size=1, max_size=30))
def test_max_subarray_non_negative_is_total(values):
    assert max_subarray(values) == sum(values)


@given(st.lists(st.integers(-50, -1), min_size=1, max_size=30))
def test_max_subarray_all_negative_is_max(values):
    assert max_subarray(values) == max(values)


@given(st.lists(ints, max_size=40))
def test_remove_duplicates(values):
    nums = sorted(values)
    k = remove_duplicates(nums)
    assert k == len(set(values))
    assert nums[:k] == sorted(set(values))


@given(st.lists(ints, min_size=1, max_size=30), st.data())
def test_reverse_after(values, data):
    m = data.draw(st.integers(-1, len(values) - 1))
    items = list(values)
    reverse_after(items, m)
    assert items[: m + 1] == values[: m + 1]
    assert items[m + 1:] == values[m + 1:][::-1]


@given(st.lists(ints, min_size=1, max_size=30))
def test_rotate_by_one_moves_last_to_front(values):
    nums = list(values)
    rotate(nums, 1)
    assert nums[0] == values[-1]
    assert nums[1:] == values[:-1]


@given(st.lists(ints, min_size=1, max_size=30), st.integers(0, 100))
def test_rotate_round_trip(values, k):
    nums = list(values)
    rotate(nums, k)
    rotate(nums, len(values) - k % len(values))
    assert nums == values


@given(st.lists(ints, min_size=1, max_size=30))
def test_rotate_full_turn_is_identity(values):
    nums = list(values)
    rotate(nums, len(values))
    assert nums == values


@given(st.lists(ints, min_size=1, max_size=30))
def test_running_sum(values):
    sums = running_sum(values)
    assert len(sums) == len(values)
    assert sums[-1] == sum(values)
    assert [sums[0]] + [b - a for a, b in zip(sums, sums[1:])] == values


def test_running_sum_empty():
    assert running_sum([]) == []


def test_minimum_deletions_example():
    assert minimum_deletions([2, 10, 7, 5, 4, 1, 8, 6]) == 5


def test_minimum_deletions_small():
    assert minimum_deletions([101]) == 1
    assert minimum_deletions([3, 7]) == 2


def test_minimum_deletions_empty():
    with pytest.raises(ValueError):
        minimum_deletions([])


@given(st.lists(ints, min_size=1, max_size=30))
def test_minimum_deletions_bounds(values):
    assert 1 <= minimum_deletions(values) <= len(values)


def test_pivot_index_example():
    assert pivot_index([1, 7, 3, 6, 5, 6]) == 3


def test_pivot_index_none():
    assert pivot_index([1, 2, 3]) == -1


@given(st.lists(st.integers(-5, 5), max_size=20))
def test_pivot_index_balances(values):
    index = pivot_index(values)
    if index == -1:
        assert all(sum(values[:i]) != sum(values[i + 1:]) for i in range(len(values)))
    else:
        assert sum(values[:index]) == sum(values[index + 1:])


@given(st.lists(ints, max_size=40))
def test_array_sum(values):
    assert array_sum(values) == sum(values)


def test_max_area_example():
    assert max_area([1, 8, 6, 2, 5, 4, 8, 3, 7]) == 49


@given(st.integers(0, 100), st.integers(0, 100))
def test_max_area_two_lines(first, second):
    assert max_area([first, second]) == min(first, second)


def test_max_area_too_few_lines():
    assert max_area([]) == 0
    assert max_area([5]) == 0