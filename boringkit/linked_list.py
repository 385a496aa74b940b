"""A doubly linked list with a sentinel node and node-level operations."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

from .sorting import Compare, quick_sort, three_way


@dataclass(eq=False)
class ListNode:
    """A node of a :class:`LinkedList` holding one value."""

    value: Any
    prev: Optional["ListNode"] = field(default=None, repr=False)
    next: Optional["ListNode"] = field(default=None, repr=False)
    owner: Optional["LinkedList"] = field(default=None, repr=False)


class LinkedList:
    """Doubly linked list whose nodes can be addressed, inserted and removed."""

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._sentinel = ListNode(None)
        self._sentinel.prev = self._sentinel
        self._sentinel.next = self._sentinel
        self._size = 0
        if iterable is not None:
            self.extend(iterable)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.value

    def __reversed__(self) -> Iterator[Any]:
        node = self._sentinel.prev
        while node is not self._sentinel:
            previous = node.prev
            yield node.value
            node = previous

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _check(self, node: ListNode) -> None:
        if node.owner is not self:
            raise ValueError("node does not belong to this list")

    def first(self) -> Optional[ListNode]:
        """Return the first node, or None if the list is empty."""
        node = self._sentinel.next
        return None if node is self._sentinel else node

    def last(self) -> Optional[ListNode]:
        """Return the last node, or None if the list is empty."""
        node = self._sentinel.prev
        return None if node is self._sentinel else node

    def successor(self, node: ListNode) -> Optional[ListNode]:
        """Return the node after ``node``, or None at the end."""
        self._check(node)
        following = node.next
        return None if following is self._sentinel else following

    def predecessor(self, node: ListNode) -> Optional[ListNode]:
        """Return the node before ``node``, or None at the start."""
        self._check(node)
        preceding = node.prev
        return None if preceding is self._sentinel else preceding

    def nodes(self, start: Optional[ListNode] = None) -> Iterator[ListNode]:
        """Yield nodes from ``start`` (default: the first) to the end.

        The node just yielded may be removed without breaking iteration.
        """
        if start is None:
            node = self._sentinel.next
        else:
            self._check(start)
            node = start
        while node is not self._sentinel:
            following = node.next
            yield node
            node = following

    def search(
        self,
        value: Any,
        compare: Compare = three_way,
        start: Optional[ListNode] = None,
    ) -> Optional[ListNode]:
        """Return the first node from ``start`` whose value compares equal to ``value``."""
        for node in self.nodes(start):
            if compare(node.value, value) == 0:
                return node
        return None

    def insert_before(self, node: Optional[ListNode], value: Any) -> ListNode:
        """Insert ``value`` before ``node`` (at the end when ``node`` is None)."""
        if node is None:
            node = self._sentinel
        else:
            self._check(node)
        new = ListNode(value, prev=node.prev, next=node, owner=self)
        node.prev.next = new
        node.prev = new
        self._size += 1
        return new

    def append(self, value: Any) -> ListNode:
        """Add ``value`` at the end and return its node."""
        return self.insert_before(None, value)

    def appendleft(self, value: Any) -> ListNode:
        """Add ``value`` at the front and return its node."""
        return self.insert_before(self._sentinel.next, value) if self._size else self.append(value)

    def extend(self, iterable: Iterable[Any]) -> None:
        """Append every value of ``iterable``."""
        for value in iterable:
            self.append(value)

    def remove(self, node: ListNode) -> Any:
        """Unlink ``node`` and return its value."""
        self._check(node)
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = None
        node.owner = None
        self._size -= 1
        return node.value

    def pop(self) -> Any:
        """Remove and return the last value."""
        node = self.last()
        if node is None:
            raise IndexError("pop from an empty list")
        return self.remove(node)

    def popleft(self) -> Any:
        """Remove and return the first value."""
        node = self.first()
        if node is None:
            raise IndexError("pop from an empty list")
        return self.remove(node)

    def sort(self, compare: Compare = three_way) -> None:
        """Sort the values in place; nodes keep their positions."""
        values = list(self)
        quick_sort(values, compare)
        for node, value in zip(self.nodes(), values):
            node.value = value

    def wring(
        self,
        compare: Compare = three_way,
        callback: Optional[Callable[[Any], Any]] = None,
    ) -> int:
        """Remove consecutive duplicate values, reporting each to ``callback``.

        Returns the number of values removed.
        """
        removed = 0
        current = self.first()
        while current is not None:
            following = current.next
            if following is self._sentinel:
                break
            if compare(current.value, following.value) == 0:
                value = self.remove(following)
                removed += 1
                if callback is not None:
                    callback(value)
            else:
                current = following
        return removed