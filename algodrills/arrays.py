"""Counting, product and prefix-sum problems over integer arrays."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable, Sequence


def count_single_value_subarrays(nums: Iterable[int], k: int) -> int:
    """Number of contiguous subarrays made up only of the value ``k``."""
    count = 0
    run = 0
    for value in nums:
        if value == k:
            run += 1
            count += run
        else:
            run = 0
    return count


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of every other element."""
    left = list(accumulate(nums[:-1], initial=1)) if nums else []
    right = list(accumulate(reversed(nums[1:]), initial=1))[::-1] if nums else []
    return [a * b for a, b in zip(left, right)]


def _check_range(nums: Sequence[int]) -> None:
    n = len(nums)
    for value in nums:
        if not 1 <= value <= n:
            raise ValueError(f"value {value} is outside 1..{n}")


def find_duplicates(nums: Sequence[int]) -> list[int]:
    """Values of ``nums`` (all in 1..n) seen again, in the order they repeat."""
    _check_range(nums)
    seen: set[int] = set()
    repeats = []
    for value in nums:
        if value in seen:
            repeats.append(value)
        else:
            seen.add(value)
    return repeats


def find_missing(nums: Sequence[int]) -> list[int]:
    """Values of 1..n that do not occur in ``nums`` (all in 1..n), ascending."""
    _check_range(nums)
    present = set(nums)
    return [value for value in range(1, len(nums) + 1) if value not in present]


def prefix_sums(nums: Iterable[int]) -> list[int]:
    """Running totals starting from 0; entry i is the sum of the first i values."""
    return list(accumulate(nums, initial=0))


def range_sum(nums: Sequence[int], start: int, end: int) -> int:
    """Sum of ``nums[start..end]``, both ends included, via prefix sums."""
    if not 0 <= start <= end < len(nums):
        raise IndexError(f"invalid range {start}..{end} for length {len(nums)}")
    prefix = prefix_sums(nums)
    return prefix[end + 1] - prefix[start]