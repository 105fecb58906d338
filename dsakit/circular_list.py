"""Circular singly linked list whose last node links back to the head."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from dsakit.linked_list import Node


class CircularLinkedList:
    """A singly linked list in which the tail points back at the head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for value in values:
            self.insert_back(value)

    def _nodes(self) -> Iterator[Node]:
        if self.head is None:
            return
        node = self.head
        while True:
            yield node
            node = node.next
            if node is self.head:
                return

    def _tail(self) -> Node:
        tail = self.head
        while tail.next is not self.head:
            tail = tail.next
        return tail

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _link_first(self, node: Node) -> None:
        node.next = node
        self.head = node

    def insert_front(self, key: Any) -> Node:
        """Put ``key`` in a new node that becomes the head; return the node."""
        node = Node(key)
        if self.head is None:
            self._link_first(node)
            return node
        tail = self._tail()
        node.next = self.head
        tail.next = node
        self.head = node
        return node

    def insert_back(self, key: Any) -> Node:
        """Put ``key`` in a new node placed just before the head; return the node."""
        node = Node(key)
        if self.head is None:
            self._link_first(node)
            return node
        tail = self._tail()
        tail.next = node
        node.next = self.head
        return node