import pytest

from algobox.searching import binary_search, binary_search_recursive, linear_search

SAMPLE = [1, 3, 7, 15, 18, 20, 25, 33, 36, 40]
MISSING = [0, 2, 19, 41, -5]


def test_binary_search_worked_example():
    assert binary_search(SAMPLE, 20) == 5


def test_binary_search_recursive_worked_example():
    assert binary_search_recursive(SAMPLE, 20) == 5


def test_binary_search_finds_every_element():
    for value in SAMPLE:
        assert SAMPLE[binary_search(SAMPLE, value)] == value


def test_binary_search_recursive_finds_every_element():
    for value in SAMPLE:
        assert SAMPLE[binary_search_recursive(SAMPLE, value)] == value


def test_linear_search_finds_every_element():
    for value in SAMPLE:
        assert SAMPLE[linear_search(SAMPLE, value)] == value


@pytest.mark.parametrize("missing", MISSING)
def test_binary_search_missing_value_gives_none(missing):
    assert binary_search(SAMPLE, missing) is None


@pytest.mark.parametrize("missing", MISSING)
def test_binary_search_recursive_missing_value_gives_none(missing):
    assert binary_search_recursive(SAMPLE, missing) is None


@pytest.mark.parametrize("missing", MISSING)
def test_linear_search_missing_value_gives_none(missing):
    assert linear_search(SAMPLE, missing) is None


def test_empty_sequence():
    assert binary_search([], 1) is None
    assert binary_search_recursive([], 1) is None
    assert linear_search([], 1) is None


def test_binary_search_single_element():
    assert binary_search([42], 42) == 0
    assert binary_search([42], 7) is None


def test_binary_search_recursive_single_element():
    assert binary_search_recursive([42], 42) == 0
    assert binary_search_recursive([42], 7) is None


def test_binary_searches_work_on_strings():
    words = ["apple", "banana", "cherry", "date"]
    assert binary_search(words, "cherry") == 2
    assert binary_search_recursive(words, "cherry") == 2


def test_linear_search_on_unsorted_returns_first_match():
    items = [9, 4, 7, 4, 1]
    assert linear_search(items, 4) == 1


def test_iterative_and_recursive_agree():
    items = list(range(0, 200, 3))
    for target in range(-2, 205):
        assert binary_search(items, target) == binary_search_recursive(items, target)