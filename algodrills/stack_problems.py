"""Problems solved by pushing and popping a stack."""

from __future__ import annotations

import operator
from string import digits
from typing import Callable, Iterable, Sequence

_OPENER_FOR = {")": "(", "}": "{", "]": "["}


def baseball_score(operations: Iterable[str]) -> int:
    """Total of a baseball score record.

    An integer records a score. ``+`` records the sum of the last two scores,
    ``D`` doubles the last score and ``C`` cancels the last score.
    """
    record: list[int] = []
    total = 0
    for op in operations:
        if op == "+":
            if len(record) < 2:
                raise ValueError("'+' needs two previous scores")
            score = record[-1] + record[-2]
        elif op == "D":
            if not record:
                raise ValueError("'D' needs a previous score")
            score = record[-1] * 2
        elif op == "C":
            if not record:
                raise ValueError("'C' needs a previous score")
            total -= record.pop()
            continue
        else:
            score = int(op)
        record.append(score)
        total += score
    return total


def _is_digit_token(token: str) -> bool:
    return token != "" and all(char in digits for char in token)


def decode_string(s: str) -> str:
    """Expand every ``k[text]`` in ``s`` into ``text`` repeated ``k`` times.

    Digits not followed by a bracket are kept as ordinary characters.
    """
    stack: list[str] = []
    for char in s:
        if char != "]":
            stack.append(char)
            continue
        parts: list[str] = []
        while True:
            if not stack:
                raise ValueError("unmatched ']'")
            token = stack.pop()
            if token == "[":
                break
            parts.append(token)
        count_digits: list[str] = []
        while stack and _is_digit_token(stack[-1]):
            count_digits.append(stack.pop())
        if not count_digits:
            raise ValueError("missing repeat count before '['")
        count = int("".join(reversed(count_digits)))
        stack.append("".join(reversed(parts)) * count)
    return "".join(stack)


def make_good(s: str) -> str:
    """Repeatedly drop adjacent pairs that are the same letter in opposite cases."""
    stack: list[str] = []
    for char in s:
        if stack and abs(ord(char) - ord(stack[-1])) == 32:
            stack.pop()
        else:
            stack.append(char)
    return "".join(stack)


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Value of an integer expression in reverse Polish notation.

    Division truncates toward zero.
    """
    stack: list[int] = []
    for token in tokens:
        apply = _OPERATORS.get(token)
        if apply is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} needs two operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(apply(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def is_valid_parentheses(s: str) -> bool:
    """Whether every closing bracket in ``s`` closes the latest open one and none stay open.

    Any character that is not a closing bracket counts as an opener.
    """
    stack: list[str] = []
    for char in s:
        opener = _OPENER_FOR.get(char)
        if opener is None:
            stack.append(char)
        elif not stack or stack.pop() != opener:
            return False
    return not stack


def reverse_parentheses(s: str) -> str:
    """Reverse the text inside each pair of parentheses, innermost first, and drop them."""
    stack: list[str] = []
    for char in s:
        if char != ")":
            stack.append(char)
            continue
        inner: list[str] = []
        while True:
            if not stack:
                raise ValueError("unmatched ')'")
            top = stack.pop()
            if top == "(":
                break
            inner.append(top)
        stack.extend(inner)
    return "".join(stack)


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, how many days until a warmer one; 0 if none comes."""
    waits = [0] * len(temperatures)
    pending: list[int] = []
    for day, temperature in enumerate(temperatures):
        while pending and temperature > temperatures[pending[-1]]:
            earlier = pending.pop()
            waits[earlier] = day - earlier
        pending.append(day)
    return waits