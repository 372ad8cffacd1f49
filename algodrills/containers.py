"""A linked stack, a stack kept in a queue and a queue kept in a stack."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator


@dataclass
class _Node:
    data: Any
    next: _Node | None = None


class LinkedStack:
    """Last-in, first-out stack of linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._length = 0

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._top = _Node(value, self._top)
        self._length += 1

    def pop(self) -> Any:
        """Remove the top value and return it."""
        if self._top is None:
            raise IndexError("stack underflow")
        node = self._top
        self._top = node.next
        self._length -= 1
        return node.data

    def peek(self) -> Any:
        """The top value, left in place."""
        if self._top is None:
            raise IndexError("stack empty")
        return self._top.data

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        """Values from top to bottom."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next


class QueueBackedStack:
    """Stack that keeps its values in a single first-in, first-out queue."""

    def __init__(self) -> None:
        self._queue: deque[Any] = deque()

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._queue.append(value)

    def pop(self) -> Any:
        """Remove the newest value and return it, cycling the older ones round."""
        if not self._queue:
            raise IndexError("pop from empty stack")
        for _ in range(len(self._queue) - 1):
            self._queue.append(self._queue.popleft())
        return self._queue.popleft()

    def top(self) -> Any:
        """The newest value, left in place."""
        if not self._queue:
            raise IndexError("stack empty")
        return self._queue[-1]

    def is_empty(self) -> bool:
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[Any]:
        """Values from top to bottom."""
        return reversed(self._queue)


class StackBackedQueue:
    """Queue that keeps its values in a single last-in, first-out stack."""

    def __init__(self) -> None:
        self._stack: list[Any] = []

    def push(self, value: Any) -> None:
        """Add ``value`` at the back."""
        self._stack.append(value)

    def pop(self) -> Any:
        """Remove the oldest value and return it, unstacking and restacking the rest."""
        if not self._stack:
            raise IndexError("pop from empty queue")
        buffer: list[Any] = []
        while self._stack:
            buffer.append(self._stack.pop())
        oldest = buffer.pop()
        while buffer:
            self._stack.append(buffer.pop())
        return oldest

    def front(self) -> Any:
        """The oldest value, left in place."""
        if not self._stack:
            raise IndexError("queue empty")
        return self._stack[0]

    def back(self) -> Any:
        """The newest value, left in place."""
        if not self._stack:
            raise IndexError("queue empty")
        return self._stack[-1]

    def is_empty(self) -> bool:
        return not self._stack

    def __len__(self) -> int:
        return len(self._stack)

    def __iter__(self) -> Iterator[Any]:
        """Values from front to back."""
        return iter(list(self._stack))