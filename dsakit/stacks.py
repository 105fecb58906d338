"""Stacks backed by a bounded array and by linked nodes, and bracket balancing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from dsakit.linked_list import Node

OPENING_BRACKETS = frozenset("([{")


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping from an empty stack."""


class ArrayStack:
    """A stack with a fixed capacity."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, key: Any) -> None:
        """Put ``key`` on top; raises StackOverflowError when full."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("stack is full")
        self._items.append(key)

    def pop(self) -> Any:
        """Remove and return the top item; raises StackUnderflowError when empty."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items.pop()

    def __iter__(self) -> Iterator[Any]:
        """Yield the items from top to bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, items={list(self)!r})"


class LinkedStack:
    """An unbounded stack whose top is the head of a chain of nodes."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        """Build a stack from ``values`` given from top to bottom."""
        self._head: Optional[Node] = None
        tail: Optional[Node] = None
        for value in values:
            node = Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node

    def push(self, key: Any) -> None:
        """Put ``key`` on top."""
        self._head = Node(key, self._head)

    def pop(self) -> Any:
        """Remove and return the top item; raises StackUnderflowError when empty."""
        if self._head is None:
            raise StackUnderflowError("stack is empty")
        removed = self._head
        self._head = removed.next
        return removed.data

    def __iter__(self) -> Iterator[Any]:
        """Yield the items from top to bottom."""
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def is_balanced(expression: str) -> bool:
    """Tell whether every closing character has an opening bracket before it.

    ``(``, ``[`` and ``{`` open; every other character closes the most
    recent open bracket, whatever its kind. The expression is balanced when
    no character closes with nothing open and nothing is left open.
    """
    depth = 0
    for char in expression:
        if char in OPENING_BRACKETS:
            depth += 1
        elif depth == 0:
            return False
        else:
            depth -= 1
    return depth == 0