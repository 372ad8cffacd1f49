"""Counting and optimising over contiguous subarrays with sliding windows."""

from __future__ import annotations

from collections import Counter
from typing import Callable, Sequence


def count_max_at_least_k(nums: Sequence[int], k: int) -> int:
    """Subarrays in which the array's maximum appears at least ``k`` times."""
    if k < 1:
        raise ValueError("k must be at least 1")
    if not nums:
        return 0
    peak = max(nums)
    left = 0
    seen = 0
    total = 0
    for right, value in enumerate(nums):
        if value == peak:
            seen += 1
        while seen >= k:
            total += len(nums) - right
            if nums[left] == peak:
                seen -= 1
            left += 1
    return total


def _count_sum_at_most(nums: Sequence[int], bound: int) -> int:
    if bound < 0:
        return 0
    left = 0
    window = 0
    count = 0
    for right, value in enumerate(nums):
        window += value
        while window > bound:
            window -= nums[left]
            left += 1
        count += right - left + 1
    return count


def count_binary_subarrays(nums: Sequence[int], goal: int) -> int:
    """Subarrays of a 0/1 array whose sum is exactly ``goal``."""
    return _count_sum_at_most(nums, goal) - _count_sum_at_most(nums, goal - 1)


def longest_good_subarray(nums: Sequence[int], k: int) -> int:
    """Length of the longest subarray where no value occurs more than ``k`` times."""
    if k < 1:
        raise ValueError("k must be at least 1")
    counts: Counter[int] = Counter()
    left = 0
    best = 0
    for right, value in enumerate(nums):
        counts[value] += 1
        while counts[value] > k:
            counts[nums[left]] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def _best_window_sum(
    nums: Sequence[int], k: int, accept: Callable[[int], bool]
) -> int:
    if not 1 <= k <= len(nums):
        raise ValueError(f"window size {k} must be between 1 and {len(nums)}")
    window = Counter(nums[:k])
    total = sum(nums[:k])
    best = total if accept(len(window)) else 0
    for index in range(k, len(nums)):
        leaving, entering = nums[index - k], nums[index]
        total += entering - leaving
        window[leaving] -= 1
        if window[leaving] == 0:
            del window[leaving]
        window[entering] += 1
        if accept(len(window)):
            best = max(best, total)
    return best


def max_distinct_window_sum(nums: Sequence[int], k: int) -> int:
    """Largest sum of a length-``k`` window whose values are all distinct, else 0."""
    return _best_window_sum(nums, k, lambda distinct: distinct == k)


def max_almost_unique_sum(nums: Sequence[int], k: int, m: int) -> int:
    """Largest sum of a length-``k`` window with at least ``m`` distinct values, else 0."""
    return _best_window_sum(nums, k, lambda distinct: distinct >= m)


def min_subarray_len(nums: Sequence[int], target: int) -> int:
    """Length of the shortest subarray of positive values summing to at least ``target``; 0 if none."""
    if target < 1:
        raise ValueError("target must be positive")
    left = 0
    window = 0
    best: int | None = None
    for right, value in enumerate(nums):
        window += value
        while window >= target:
            length = right - left + 1
            best = length if best is None else min(best, length)
            window -= nums[left]
            left += 1
    return best or 0


def count_max_prefixes(nums: Sequence[int], k: int) -> int:
    """Subarrays ending at each index where the maximum has been seen ``k`` times so far.

    Once the running count of the array's maximum reaches ``k`` at index ``i``,
    all ``i + 1`` subarrays ending there are counted.
    """
    if not nums:
        return 0
    peak = max(nums)
    seen = 0
    total = 0
    for index, value in enumerate(nums):
        if value == peak:
            seen += 1
        if seen >= k:
            total += index + 1
    return total