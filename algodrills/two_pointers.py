"""Array rearrangements done with two moving indices."""

from __future__ import annotations

from typing import Iterable, Sequence


def partition_even_odd(nums: Iterable[int]) -> list[int]:
    """Rearrange so every even number comes before every odd number."""
    items = list(nums)
    left, right = 0, len(items) - 1
    while left < right:
        if items[left] % 2 == 0:
            left += 1
        if items[right] % 2 == 1:
            right -= 1
        if left < right and items[right] % 2 == 0 and items[left] % 2 == 1:
            items[left], items[right] = items[right], items[left]
            left += 1
            right -= 1
    return items


def move_zeroes(nums: Iterable[int]) -> list[int]:
    """Move zeroes to the end, keeping the order of the other values."""
    items = list(nums)
    write = 0
    for read, value in enumerate(items):
        if value != 0:
            items[write], items[read] = items[read], items[write]
            write += 1
    return items


def remove_duplicates(nums: Sequence[int], k: int) -> list[int]:
    """Keep at most ``k`` copies of each value of an ascending sequence."""
    if k < 1:
        raise ValueError("k must be at least 1")
    kept: list[int] = []
    for value in nums:
        if len(kept) < k or value != kept[-k]:
            kept.append(value)
    return kept


def count_adjacent_swaps(nums: Iterable[int]) -> int:
    """Adjacent swaps needed to bring every 0 ahead of every 1."""
    swaps = 0
    zeros = 0
    for index, value in enumerate(nums):
        if value == 0:
            swaps += index - zeros
            zeros += 1
    return swaps