"""Character-frequency problems over words."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from string import ascii_lowercase
from typing import Iterable


def common_chars(words: Iterable[str]) -> list[str]:
    """Letters present in every word, repeated as often as in all of them, alphabetically.

    Words must consist of lowercase ASCII letters.
    """
    counters = []
    for word in words:
        stray = set(word) - set(ascii_lowercase)
        if stray:
            raise ValueError(f"word {word!r} has characters outside a-z")
        counters.append(Counter(word))
    if not counters:
        raise ValueError("at least one word is required")
    shared = reduce(lambda a, b: a & b, counters)
    return sorted(shared.elements())