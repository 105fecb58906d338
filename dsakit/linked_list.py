"""Singly linked list with the classic node-level operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A list cell holding one value and a link to the next cell."""

    data: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list reached through its head node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __contains__(self, key: Any) -> bool:
        return any(value == key for value in self)

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def node_at(self, index: int) -> Node:
        """Return the node at position ``index``; raises IndexError outside."""
        if index >= 0:
            for position, node in enumerate(self._nodes()):
                if position == index:
                    return node
        raise IndexError(f"invalid index {index}")

    def push_front(self, key: Any) -> Node:
        """Put ``key`` in a new node at the head and return that node."""
        self.head = Node(key, self.head)
        return self.head

    def push_back(self, key: Any) -> Node:
        """Put ``key`` in a new node after the last one and return that node."""
        node = Node(key)
        if self.head is None:
            self.head = node
            return node
        tail = self.head
        while tail.next is not None:
            tail = tail.next
        tail.next = node
        return node

    def insert_after(self, node: Node, key: Any) -> Node:
        """Link a new node holding ``key`` right after ``node`` and return it."""
        node.next = Node(key, node.next)
        return node.next

    def pop_front(self) -> Any:
        """Remove the head node and return its value; IndexError when empty."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        removed = self.head
        self.head = removed.next
        return removed.data

    def pop_back(self) -> Any:
        """Remove the last node and return its value; IndexError when empty."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        if self.head.next is None:
            value = self.head.data
            self.head = None
            return value
        before = self.head
        while before.next.next is not None:
            before = before.next
        value = before.next.data
        before.next = None
        return value

    def last(self) -> Any:
        """Return the value of the last node; IndexError when empty."""
        if self.head is None:
            raise IndexError("empty list has no last node")
        node = self.head
        while node.next is not None:
            node = node.next
        return node.data

    def second_last(self) -> Any:
        """Return the value before the last one; IndexError with fewer than two."""
        if self.head is None or self.head.next is None:
            raise IndexError("list has fewer than two nodes")
        node = self.head
        while node.next.next is not None:
            node = node.next
        return node.data

    def middle(self) -> Any:
        """Return the middle value; the second of the two middles for even length.

        Raises IndexError when the list is empty.
        """
        if self.head is None:
            raise IndexError("empty list has no middle")
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
        return slow.data

    def alternate(self) -> list[Any]:
        """Return every other value, starting with the first."""
        return [value for position, value in enumerate(self) if position % 2 == 0]

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: Optional[Node] = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self.head = previous


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> LinkedList:
    """Merge two ascending sequences into a new ascending linked list.

    When values compare equal, the one from ``second`` comes first.
    """
    merged = LinkedList()
    tail: Optional[Node] = None
    left, right = iter(first), iter(second)
    sentinel = object()
    a, b = next(left, sentinel), next(right, sentinel)

    def attach(value: Any) -> None:
        nonlocal tail
        node = Node(value)
        if tail is None:
            merged.head = node
        else:
            tail.next = node
        tail = node

    while a is not sentinel and b is not sentinel:
        if a < b:
            attach(a)
            a = next(left, sentinel)
        else:
            attach(b)
            b = next(right, sentinel)
    for value, rest in ((a, left), (b, right)):
        if value is not sentinel:
            attach(value)
            for remaining in rest:
                attach(remaining)
    return merged