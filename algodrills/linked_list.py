"""A singly linked list of integers with positional insert and remove."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass
class Node:
    """One link of the list: a value and the node after it."""

    data: int = 0
    next: Node | None = None


class LinkedList:
    """Singly linked list built from an iterable of values.

    Positions are 1-based, as in the list's textbook presentation.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Node | None = None
        self._length = 0
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._length += 1

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._length

    def __contains__(self, value: object) -> bool:
        return any(node.data == value for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _check_position(self, position: int) -> None:
        if self._head is None:
            raise IndexError("list empty")
        if position > self._length:
            raise IndexError("not enough items in linked list")
        if position < 1:
            raise IndexError("positions start at 1")

    def _node_at(self, position: int) -> Node:
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert(self, position: int, value: int) -> None:
        """Insert ``value`` so that it becomes the node at ``position``.

        Position 1 prepends; a position equal to the current length appends
        after the last node.
        """
        self._check_position(position)
        if position == 1:
            self._head = Node(value, self._head)
        elif position == self._length:
            last = self._node_at(self._length)
            last.next = Node(value)
        else:
            before = self._node_at(position - 1)
            before.next = Node(value, before.next)
        self._length += 1

    def remove(self, position: int) -> int:
        """Remove the node at ``position`` and return its value."""
        self._check_position(position)
        if position == 1:
            return self.remove_first()
        if position == self._length:
            return self.remove_last()
        before = self._node_at(position - 1)
        removed = before.next
        assert removed is not None
        before.next = removed.next
        self._length -= 1
        return removed.data

    def remove_first(self) -> int:
        """Remove the head node and return its value."""
        if self._head is None:
            raise IndexError("remove from empty list")
        removed = self._head
        self._head = removed.next
        self._length -= 1
        return removed.data

    def remove_last(self) -> int:
        """Remove the tail node and return its value."""
        if self._head is None:
            raise IndexError("remove from empty list")
        if self._head.next is None:
            return self.remove_first()
        before = self._node_at(self._length - 1)
        removed = before.next
        assert removed is not None
        before.next = None
        self._length -= 1
        return removed.data