"""A growable array container with search, heap sort and de-duplication."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, MutableSequence
from typing import Any, Optional

from .sorting import Compare, heap_sort, three_way, wring

CHUNK_SIZE = 128
"""Number of slots the vector's capacity grows by whenever it fills up."""


class Vector(MutableSequence):
    """A sequence whose capacity grows in fixed chunks of :data:`CHUNK_SIZE`."""

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._items: list[Any] = []
        self._capacity = CHUNK_SIZE
        if iterable is not None:
            self.extend(iterable)

    @property
    def capacity(self) -> int:
        """Number of values the vector can hold before it grows again."""
        return self._capacity

    def _reserve(self) -> None:
        while len(self._items) > self._capacity:
            self._capacity += CHUNK_SIZE

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector(self._items[index])
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        self._items[index] = value
        self._reserve()

    def __delitem__(self, index) -> None:
        if isinstance(index, slice):
            remaining = [
                item
                for position, item in enumerate(self._items)
                if position not in range(*index.indices(len(self._items)))
            ]
            self._items[:] = remaining
        else:
            self._items.pop(index)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vector):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` before position ``index``, growing if full."""
        if len(self._items) >= self._capacity:
            self._capacity += CHUNK_SIZE
        self._items.insert(index, value)

    def search(
        self, value: Any, compare: Compare = three_way, start: int = 0
    ) -> Optional[int]:
        """Return the index of the first item from ``start`` comparing equal to ``value``."""
        if start < 0:
            start = max(start + len(self._items), 0)
        for index, item in enumerate(self._items[start:], start):
            if compare(item, value) == 0:
                return index
        return None

    def sort(self, compare: Compare = three_way) -> None:
        """Sort the items in place with heap sort."""
        heap_sort(self._items, compare)

    def wring(
        self,
        compare: Compare = three_way,
        callback: Optional[Callable[[Any], Any]] = None,
    ) -> int:
        """Remove consecutive duplicates, passing each removed value to ``callback``.

        Returns the number of values removed.
        """
        return wring(self._items, compare, callback)