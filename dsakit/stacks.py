"""A bounded last-in, first-out stack."""

from typing import Any

DEFAULT_CAPACITY = 5


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping or peeking an empty stack."""


class Stack:
    """A stack holding at most ``capacity`` elements."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._data: list[Any] = []

    def push(self, element: Any) -> None:
        """Put ``element`` on top of the stack."""
        if self.is_full():
            raise StackOverflowError(f"stack overflow, can't push {element!r}")
        self._data.append(element)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self.is_empty():
            raise StackUnderflowError("stack underflow")
        return self._data.pop()

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._data[-1]

    def is_empty(self) -> bool:
        return not self._data

    def is_full(self) -> bool:
        return len(self._data) >= self.capacity

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Stack({self._data!r}, capacity={self.capacity})"