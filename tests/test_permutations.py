"""Permutation enumerator."""

import math
from collections import Counter

from permutations import permute


def test_three_elements():
    result = permute([1, 2, 3])
    assert len(result) == 6
    assert len({tuple(p) for p in result}) == 6
    assert all(sorted(p) == [1, 2, 3] for p in result)


def test_factorial_count():
    for k in range(1, 7):
        assert len(permute(list(range(k)))) == math.factorial(k)


def test_empty_input_gives_empty_result():
    assert permute([]) == []


def test_single_element():
    assert permute([9]) == [[9]]


def test_duplicates_are_kept():
    result = permute([1, 1, 2])
    assert len(result) == 6
    assert Counter(tuple(p) for p in result)[(1, 1, 2)] == 2


def test_input_not_modified():
    numbers = [3, 1, 2]
    permute(numbers)
    assert numbers == [3, 1, 2]
