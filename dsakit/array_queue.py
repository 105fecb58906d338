"""Linear queue stored in a fixed number of slots."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class QueueOverflowError(OverflowError):
    """Raised when enqueuing past the last slot."""


class QueueUnderflowError(IndexError):
    """Raised when dequeuing from an empty queue."""


class ArrayQueue:
    """A queue over a fixed array of slots.

    The rear only moves forward, so slots freed at the front are not
    reused until the queue empties completely and both ends reset.
    """

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = -1
        self._rear = -1

    def enqueue(self, key: Any) -> None:
        """Add ``key`` at the rear; raises QueueOverflowError past the last slot."""
        if self._rear == self.capacity - 1:
            raise QueueOverflowError("queue overflow")
        if self._front == -1:
            self._front = self._rear = 0
        else:
            self._rear += 1
        self._slots[self._rear] = key

    def dequeue(self) -> Any:
        """Remove and return the front item; raises QueueUnderflowError when empty."""
        if self._front == -1:
            raise QueueUnderflowError("queue underflow")
        value = self._slots[self._front]
        self._slots[self._front] = None
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._front += 1
        return value

    def __iter__(self) -> Iterator[Any]:
        """Yield the items from front to rear."""
        if self._front == -1:
            return iter(())
        return iter(self._slots[self._front : self._rear + 1])

    def __len__(self) -> int:
        return 0 if self._front == -1 else self._rear - self._front + 1

    def __str__(self) -> str:
        if self._front == -1:
            return "Queue is Empty"
        return "Queue: " + " ".join(str(value) for value in self)