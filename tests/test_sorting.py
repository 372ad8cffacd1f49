import random

import pytest

from algodrills.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

CASES = [
    [9, 8, 7, 65, 4, 3, 2],
    [9, 8, 76, 5, 4, 3, 2, 1],
    [],
    [42],
    [2, 2],
    [2, 1],
    [3, 3, 3, 1, 1, 2],
    [-5, 0, 5, -10, 10],
    [1, 2, 3, 4, 5],
    [5, 4, 3, 2, 1],
]


def _is_ordered(values):
    return all(a <= b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("nums", CASES)
def test_sorts_match_builtin(nums):
    expected = sorted(nums)
    assert bubble_sort(nums) == expected
    assert insertion_sort(nums) == expected
    assert selection_sort(nums) == expected
    assert merge_sort(nums) == expected
    assert quick_sort(nums) == expected
    assert heap_sort(nums) == expected


def test_source_examples():
    assert bubble_sort([9, 8, 7, 65, 4, 3, 2]) == [2, 3, 4, 7, 8, 9, 65]
    assert insertion_sort([9, 8, 7, 65, 4, 3, 2]) == [2, 3, 4, 7, 8, 9, 65]
    assert selection_sort([9, 8, 7, 65, 4, 3, 2]) == [2, 3, 4, 7, 8, 9, 65]
    assert merge_sort([9, 8, 76, 5, 4, 3, 2, 1]) == [1, 2, 3, 4, 5, 8, 9, 76]
    assert quick_sort([9, 8, 76, 5, 4, 3, 2, 1]) == [1, 2, 3, 4, 5, 8, 9, 76]
    assert heap_sort([9, 8, 76, 5, 4, 3, 2, 1]) == [1, 2, 3, 4, 5, 8, 9, 76]


def test_input_left_untouched():
    nums = [9, 8, 76, 5, 4, 3, 2, 1]
    original = list(nums)
    bubble_sort(nums)
    assert nums == original
    insertion_sort(nums)
    assert nums == original
    selection_sort(nums)
    assert nums == original
    merge_sort(nums)
    assert nums == original
    quick_sort(nums)
    assert nums == original
    heap_sort(nums)
    assert nums == original


def test_random_inputs():
    rng = random.Random(1234)
    for _ in range(50):
        nums = [rng.randint(-20, 20) for _ in range(rng.randint(0, 30))]
        expected = sorted(nums)
        assert bubble_sort(nums) == expected
        assert insertion_sort(nums) == expected
        assert selection_sort(nums) == expected
        assert merge_sort(nums) == expected
        assert quick_sort(nums) == expected
        assert heap_sort(nums) == expected


def test_accepts_any_iterable():
    expected = [1, 2, 3]
    assert bubble_sort(iter((3, 1, 2))) == expected
    assert insertion_sort(iter((3, 1, 2))) == expected
    assert selection_sort(iter((3, 1, 2))) == expected
    assert merge_sort(iter((3, 1, 2))) == expected
    assert quick_sort(iter((3, 1, 2))) == expected
    assert heap_sort(iter((3, 1, 2))) == expected


def test_result_is_permutation_and_ordered():
    nums = [7, 7, 1, 0, 7, -3, 12]
    results = [
        bubble_sort(nums),
        insertion_sort(nums),
        selection_sort(nums),
        merge_sort(nums),
        quick_sort(nums),
        heap_sort(nums),
    ]
    for result in results:
        assert sorted(result) == sorted(nums)
        assert _is_ordered(result)