import pytest
from hypothesis import given, strategies as st

from algokit.searching import binary_search, search_matrix


SAMPLE = [1, 4, 5, 7, 9, 10, 12, 25]


@pytest.mark.parametrize("target", SAMPLE)
def test_binary_search_finds_each_sample_value(target):
    assert SAMPLE[binary_search(SAMPLE, target)] == target


def test_binary_search_last_element_of_sample():
    assert binary_search(SAMPLE, 25) == len(SAMPLE) - 1


def test_binary_search_missing_value():
    assert binary_search(SAMPLE, 6) == -1


def test_binary_search_empty():
    assert binary_search([], 3) == -1


@given(st.sets(st.integers(-1000, 1000), max_size=50))
def test_binary_search_index_matches_position(values):
    items = sorted(values)
    for index, value in enumerate(items):
        assert binary_search(items, value) == index


@given(st.lists(st.integers(-20, 20), max_size=40), st.integers(-25, 25))
def test_binary_search_with_duplicates(values, target):
    items = sorted(values)
    result = binary_search(items, target)
    if target in items:
        assert items[result] == target
    else:
        assert result == -1


MATRIX = [[1, 3, 5, 7], [10, 11, 16, 20], [23, 30, 34, 60]]


@pytest.mark.parametrize("target", [value for row in MATRIX for value in row])
def test_search_matrix_finds_present(target):
    assert search_matrix(MATRIX, target) is True


@pytest.mark.parametrize("target", [0, 2, 13, 61])
def test_search_matrix_rejects_absent(target):
    assert search_matrix(MATRIX, target) is False


def test_search_matrix_empty():
    assert search_matrix([], 1) is False
    assert search_matrix([[]], 1) is False


@given(
    st.lists(st.integers(-50, 50), min_size=1, max_size=30),
    st.integers(1, 5),
    st.integers(-60, 60),
)
def test_search_matrix_agrees_with_membership(values, width, target):
    width = min(width, len(values))
    flat = sorted(values)[: len(values) // width * width]
    matrix = [flat[start:start + width] for start in range(0, len(flat), width)]
    assert search_matrix(matrix, target) == (target in flat)