"""Binary search over sorted sequences, matrices and monotone answer spaces."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Sequence


def hours_to_eat(piles: Sequence[int], speed: int) -> int:
    """Hours needed to eat every pile at ``speed`` bananas per hour, one pile per hour."""
    if speed <= 0:
        raise ValueError("speed must be positive")
    return sum((pile + speed - 1) // speed for pile in piles)


def min_eating_speed(piles: Sequence[int], hours: int) -> int:
    """Smallest eating speed that finishes all piles within ``hours``."""
    if not piles:
        raise ValueError("piles must not be empty")
    low, high = 1, max(piles)
    best = None
    while low <= high:
        mid = low + (high - low) // 2
        if hours_to_eat(piles, mid) > hours:
            low = mid + 1
        else:
            best = mid
            high = mid - 1
    if best is None:
        raise ValueError("no speed can finish the piles in the given hours")
    return best


def find_min_rotated(nums: Sequence[int]) -> int:
    """Minimum of a rotated ascending sequence of distinct values."""
    if not nums:
        raise ValueError("nums must not be empty")
    low, high = 0, len(nums) - 1
    while low < high:
        middle = low + (high - low) // 2
        if nums[middle] > nums[high]:
            low = middle + 1
        else:
            high = middle
    return nums[low]


def _square_search(n: int) -> tuple[bool, int]:
    """Search 1..n for the root of n; return (exact, first value whose square exceeds n)."""
    low, high = 1, n
    while low <= high:
        middle = low + (high - low) // 2
        square = middle * middle
        if square > n:
            high = middle - 1
        elif square < n:
            low = middle + 1
        else:
            return True, middle
    return False, low


def is_perfect_square(n: int) -> bool:
    """Whether the positive integer ``n`` is the square of an integer."""
    exact, _ = _square_search(n)
    return exact


def integer_sqrt(n: int) -> int:
    """Square root of ``n`` rounded down."""
    if n < 0:
        raise ValueError("n must not be negative")
    exact, value = _square_search(n)
    return value if exact else value - 1


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a binary search: the index found, if any, and the steps taken."""

    index: int | None
    iterations: int

    @property
    def found(self) -> bool:
        return self.index is not None


def binary_search(nums: Sequence[int], target: int) -> SearchResult:
    """Look for ``target`` in ascending ``nums``, counting the halving steps."""
    low, high = 0, len(nums) - 1
    iterations = 0
    while low <= high:
        iterations += 1
        middle = low + (high - low) // 2
        if nums[middle] > target:
            high = middle - 1
        elif nums[middle] < target:
            low = middle + 1
        else:
            return SearchResult(middle, iterations)
    return SearchResult(None, iterations)


def _contains(nums: Sequence[int], target: int, left: int, right: int) -> bool:
    while left <= right:
        mid = left + (right - left) // 2
        if nums[mid] > target:
            right = mid - 1
        elif nums[mid] < target:
            left = mid + 1
        else:
            return True
    return False


def search_sorted_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Find ``target`` in a matrix whose rows, read in order, form one ascending run."""
    if not matrix or not matrix[0]:
        return False
    low, high = 0, len(matrix) - 1
    while low <= high:
        middle = low + (high - low) // 2
        first = matrix[middle][0]
        if first > target:
            high = middle - 1
        elif first < target:
            low = middle + 1
        else:
            return True
    row = low - 1
    if row < 0:
        return False
    return _contains(matrix[row], target, 0, len(matrix[row]) - 1)


def search_staircase_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Find ``target`` in a matrix whose rows and columns are each ascending."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value > target:
            col -= 1
        elif value < target:
            row += 1
        else:
            return True
    return False


def find_pivot(nums: Sequence[int]) -> int:
    """Index of the smallest element of a rotated ascending sequence, duplicates allowed."""
    low, high = 0, len(nums) - 1
    while low < high:
        mid = low + (high - low) // 2
        if nums[mid] > nums[high]:
            low = mid + 1
        elif nums[mid] < nums[high]:
            high = mid
        elif high > 0 and nums[high] >= nums[high - 1]:
            high -= 1
        else:
            low = high
    return low


def search_rotated(nums: Sequence[int], target: int) -> bool:
    """Whether ``target`` occurs in a rotated ascending sequence."""
    pivot = find_pivot(nums)
    return _contains(nums, target, 0, pivot - 1) or _contains(
        nums, target, pivot, len(nums) - 1
    )


def can_ship(weights: Sequence[int], days: int, capacity: int) -> bool:
    """Whether loading packages in order, ``capacity`` per day, takes at most ``days``."""
    load = 0
    used = 1
    for weight in weights:
        if load + weight > capacity:
            used += 1
            load = weight
        else:
            load += weight
    return used <= days


def ship_within_days(weights: Sequence[int], days: int) -> int:
    """Least ship capacity that delivers every package within ``days``."""
    if not weights:
        raise ValueError("weights must not be empty")
    if days < 1:
        raise ValueError("days must be at least 1")
    low, high = max(weights), sum(weights)
    best = high
    while low <= high:
        mid = low + (high - low) // 2
        if can_ship(weights, days, mid):
            best = mid
            high = mid - 1
        else:
            low = mid + 1
    return best


def successful_pairs(
    spells: Sequence[int], potions: Sequence[int], success: int
) -> list[int]:
    """For each spell, how many potions give a product of at least ``success``."""
    ordered = sorted(potions)
    return [
        len(ordered) - bisect.bisect_left(ordered, success, key=lambda p, s=spell: p * s)
        for spell in spells
    ]