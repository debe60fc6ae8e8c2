"""Linked nodes: a doubly linked list and merging of sorted singly linked chains."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A list node holding ``data`` with links to its neighbours."""

    data: Any
    next: Optional[Node] = field(default=None, repr=False)
    prev: Optional[Node] = field(default=None, repr=False)


class DoublyLinkedList:
    """A list of nodes linked in both directions."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items:
            self.insert_end(item)

    def insert_begin(self, item: Any) -> None:
        """Put ``item`` in front of the first node."""
        node = Node(item, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_end(self, item: Any) -> None:
        """Put ``item`` after the last node."""
        node = Node(item, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def delete_begin(self) -> Any:
        """Remove the first node and return its data."""
        if self._head is None:
            raise IndexError("delete from empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return node.data

    def delete_end(self) -> Any:
        """Remove the last node and return its data."""
        if self._tail is None:
            raise IndexError("delete from empty list")
        node = self._tail
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._size -= 1
        return node.data

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"


def build_chain(values: Iterable[Any]) -> Optional[Node]:
    """Link ``values`` into a singly linked chain and return its head."""
    head: Optional[Node] = None
    last: Optional[Node] = None
    for value in values:
        node = Node(value)
        if last is None:
            head = node
        else:
            last.next = node
        last = node
    return head


def iter_chain(head: Optional[Node]) -> Iterator[Any]:
    """Yield the data of each node from ``head`` along ``next`` links."""
    node = head
    while node is not None:
        yield node.data
        node = node.next


def merge_sorted_lists(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Splice two ascending chains into one, reusing their nodes.

    On equal values the node from ``second`` comes first.
    """
    anchor = Node(None)
    tail = anchor
    while first is not None and second is not None:
        if first.data < second.data:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next