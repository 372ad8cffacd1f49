"""Classic comparison sorts; each returns a new sorted list."""

from __future__ import annotations

from typing import Iterable


def bubble_sort(nums: Iterable[int]) -> list[int]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(nums)
    n = len(items)
    for i in range(n):
        for j in range(n - i - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(nums: Iterable[int]) -> list[int]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(nums)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def selection_sort(nums: Iterable[int]) -> list[int]:
    """Sort by moving the smallest remaining element to the front each pass."""
    items = list(nums)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(nums: Iterable[int]) -> list[int]:
    """Stable sort by splitting in halves and merging the sorted halves."""
    items = list(nums)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[low]
    i, j = low, high
    while i < j:
        while i < high and items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(nums: Iterable[int]) -> list[int]:
    """Sort by partitioning around the first element of each range."""
    items = list(nums)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(items, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return items


def _sift_down(items: list[int], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(nums: Iterable[int]) -> list[int]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    items = list(nums)
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(items, n, i)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items