"""Bounded first-in, first-out queues."""

from typing import Any

from dsakit.stacks import Stack

DEFAULT_CAPACITY = 5


class QueueFullError(Exception):
    """Raised when adding to a full queue."""


class QueueEmptyError(IndexError):
    """Raised when removing from an empty queue."""


class CircularQueue:
    """A queue over a fixed ring of ``capacity`` slots."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    def enqueue(self, element: Any) -> None:
        """Add ``element`` at the rear."""
        if self.is_full():
            raise QueueFullError(f"cannot add {element!r}, queue full")
        rear = (self._front + self._size) % self.capacity
        self._slots[rear] = element
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the element at the front."""
        if self.is_empty():
            raise QueueEmptyError("cannot delete, queue empty")
        element = self._slots[self._front]
        self._slots[self._front] = None
        self._size -= 1
        self._front = 0 if self._size == 0 else (self._front + 1) % self.capacity
        return element

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def __len__(self) -> int:
        return self._size


class TwoStackQueue:
    """A queue kept in a primary stack, using a second stack to dequeue."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._primary = Stack(capacity)
        self._buffer = Stack(capacity)

    @property
    def capacity(self) -> int:
        return self._primary.capacity

    def enqueue(self, element: Any) -> None:
        """Add ``element`` at the rear."""
        if self._primary.is_full():
            raise QueueFullError(f"queue overflow, can't add {element!r}")
        self._primary.push(element)

    def dequeue(self) -> Any:
        """Remove and return the oldest element."""
        if self._primary.is_empty():
            raise QueueEmptyError("queue underflow")
        while not self._primary.is_empty():
            self._buffer.push(self._primary.pop())
        front = self._buffer.pop()
        while not self._buffer.is_empty():
            self._primary.push(self._buffer.pop())
        return front

    def is_empty(self) -> bool:
        return self._primary.is_empty()

    def __len__(self) -> int:
        return len(self._primary)