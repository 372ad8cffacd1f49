"""Windowed scans over arrays and strings: longest, shortest and counted windows."""

from __future__ import annotations

from collections import Counter
from typing import Sequence


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Longest run of 1s in a 0/1 array after flipping at most ``k`` zeroes."""
    if k < 0:
        raise ValueError("k must not be negative")
    left = 0
    zeros = 0
    best = 0
    for right, value in enumerate(nums):
        if value == 0:
            zeros += 1
        while zeros > k:
            if nums[left] == 0:
                zeros -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def count_subarrays_with_sum(nums: Sequence[int], k: int) -> int:
    """Number of subarrays of positive integers whose sum is exactly ``k``."""
    if any(value <= 0 for value in nums):
        raise ValueError("all values must be positive")
    if k < 1:
        return 0
    left = 0
    window = 0
    count = 0
    for value in nums:
        window += value
        while window > k:
            window -= nums[left]
            left += 1
        if window == k:
            count += 1
    return count


def longest_k_distinct_brute(nums: Sequence[int], k: int) -> int:
    """Longest subarray with at most ``k`` distinct values, by trying every start."""
    if k < 0:
        raise ValueError("k must not be negative")
    best = 0
    for start in range(len(nums)):
        seen: set[int] = set()
        for end in range(start, len(nums)):
            seen.add(nums[end])
            if len(seen) > k:
                break
            best = max(best, end - start + 1)
    return best


def longest_k_distinct(nums: Sequence[int], k: int) -> int:
    """Longest subarray with at most ``k`` distinct values, in one sliding pass."""
    if k < 0:
        raise ValueError("k must not be negative")
    counts: Counter[int] = Counter()
    left = 0
    best = 0
    for right, value in enumerate(nums):
        counts[value] += 1
        while len(counts) > k:
            leaving = nums[left]
            counts[leaving] -= 1
            if counts[leaving] == 0:
                del counts[leaving]
            left += 1
        best = max(best, right - left + 1)
    return best


def min_operations_to_zero(nums: Sequence[int], x: int) -> int:
    """Fewest values taken from either end whose total is exactly ``x``; -1 if impossible.

    Taking values from the ends leaves a middle subarray summing to
    ``sum(nums) - x``, so the answer comes from the longest such subarray.
    """
    n = len(nums)
    target = sum(nums) - x
    if target < 0:
        return -1
    left = 0
    window = 0
    best: int | None = None
    for right, value in enumerate(nums):
        window += value
        while window > target and left <= right:
            window -= nums[left]
            left += 1
        if window == target:
            operations = n - (right - left + 1)
            best = operations if best is None else min(best, operations)
    return -1 if best is None else best


def max_window_sum(nums: Sequence[int], k: int) -> int:
    """Largest sum of any ``k`` consecutive values."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"window size {k} must be between 1 and {len(nums)}")
    total = sum(nums[:k])
    best = total
    for index in range(k, len(nums)):
        total += nums[index] - nums[index - k]
        best = max(best, total)
    return best


def count_abc_substrings(s: str) -> int:
    """Number of substrings containing each of 'a', 'b' and 'c' at least once.

    The string must consist only of those three letters.
    """
    stray = set(s) - set("abc")
    if stray:
        raise ValueError(f"unexpected characters: {''.join(sorted(stray))!r}")
    counts: Counter[str] = Counter()
    left = 0
    total = 0
    for right, char in enumerate(s):
        counts[char] += 1
        while counts["a"] and counts["b"] and counts["c"]:
            total += len(s) - right
            counts[s[left]] -= 1
            left += 1
    return total


def longest_unique_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    left = 0
    best = 0
    for right, char in enumerate(s):
        if char in last_seen:
            left = max(last_seen[char] + 1, left)
        last_seen[char] = right
        best = max(best, right - left + 1)
    return best