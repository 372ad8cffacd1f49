"""Lookup problems solved with dictionaries, sets and counters."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence


def two_sum(nums: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Index pairs ``(earlier, later)`` whose values add up to ``target``.

    Each index is paired with the most recent earlier index holding its
    complement, and pairs come out in the order of their later index.
    """
    seen: dict[int, int] = {}
    pairs: list[tuple[int, int]] = []
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            pairs.append((partner, index))
        seen[value] = index
    return pairs


def is_anagram(s: str, t: str) -> bool:
    """Whether ``s`` and ``t`` hold the same characters the same number of times."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Whether any value occurs more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def contains_nearby_duplicate(nums: Iterable[int], k: int) -> bool:
    """Whether two equal values sit at most ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        previous = last_seen.get(value)
        if previous is not None and index - previous <= k:
            return True
        last_seen[value] = index
    return False


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """The ``k`` most frequent values, most frequent first, ties in ascending order."""
    if k < 1:
        raise ValueError("k must be at least 1")
    counts = Counter(nums)
    ranked = sorted(counts, key=lambda value: (-counts[value], value))
    return ranked[:k]


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Values common to both inputs, once each, in order of first match in ``nums2``."""
    remaining = set(nums1)
    common: list[int] = []
    for value in nums2:
        if value in remaining:
            common.append(value)
            remaining.discard(value)
    return common