"""Stair climbing and Fibonacci sequences."""

from __future__ import annotations

from functools import lru_cache


@lru_cache(maxsize=None)
def _ways(n: int) -> int:
    if n <= 2:
        return n
    return _ways(n - 1) + _ways(n - 2)


def climb_stairs(n: int) -> int:
    """Ways to climb ``n`` stairs taking one or two steps at a time, recursively."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return _ways(n)


def climb_stairs_dp(n: int) -> int:
    """Ways to climb ``n`` stairs, computed bottom-up from the last two counts."""
    if n < 1:
        raise ValueError("n must be at least 1")
    one_back, two_back = 2, 1
    if n == 1:
        return two_back
    for _ in range(3, n + 1):
        one_back, two_back = one_back + two_back, one_back
    return one_back


def fibonacci_upto(limit: int) -> list[int]:
    """Leading Fibonacci terms for ``limit``.

    For a positive limit the sequence opens with 0 and 1, then continues while
    terms do not exceed ``limit`` and the term number stays within ``limit``;
    the term after the opening pair is always given when it fits. A limit
    below 1 gives nothing.
    """
    if limit < 1:
        return []
    terms = [0, 1]
    previous, current = 0, 1
    number = 3
    while True:
        previous, current = current, previous + current
        if current > limit:
            break
        terms.append(current)
        number += 1
        if number > limit:
            break
    return terms