"""FIFO queue, max-priority queue and a linear list of entities."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from .entity import Entity
from .linked_list import LinkedList
from .sorting import Compare, build_max_heap, three_way
from .vector import Vector


class Queue:
    """First-in first-out queue over a linked list."""

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._list = LinkedList(iterable)

    def offer(self, value: Any) -> None:
        """Add ``value`` at the back."""
        self._list.append(value)

    def poll(self) -> Any:
        """Remove and return the value at the front."""
        if not self._list:
            raise IndexError("poll from an empty queue")
        return self._list.popleft()

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._list)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class MaxQueue:
    """Priority queue that hands out the largest value under ``compare``.

    The heap is rebuilt on every extraction, so priorities that change while
    values wait in the queue are honoured.
    """

    def __init__(
        self, compare: Compare = three_way, items: Optional[Iterable[Any]] = None
    ) -> None:
        self.compare = compare
        self._heap = Vector(items)

    def push(self, value: Any) -> None:
        """Add ``value`` to the queue."""
        self._heap.append(value)

    def extract(self) -> Any:
        """Remove and return the largest value."""
        if not self._heap:
            raise IndexError("extract from an empty queue")
        build_max_heap(self._heap, self.compare)
        self._heap[0], self._heap[-1] = self._heap[-1], self._heap[0]
        return self._heap.pop()

    def __len__(self) -> int:
        return len(self._heap)


def _key_match(stored: Entity, probe: Entity) -> int:
    """Return 0 when the two entities have equal keys, 1 otherwise."""
    if stored.key_equals(probe):
        return 0
    return 1


class EntityList:
    """Linked list of entities searched with an entity comparator.

    ``compare(stored, probe)`` returns 0 for a match; by default entities
    match when their keys are equal.
    """

    def __init__(self, compare: Optional[Compare] = None) -> None:
        self.compare = compare if compare is not None else _key_match
        self._list = LinkedList()

    def add(self, *args: Any) -> Entity:
        """Append an entity made of ``args`` and return it."""
        if not args:
            raise TypeError("add() needs at least one value")
        entity = Entity(list(args))
        self._list.append(entity)
        return entity

    def find(self, *args: Any) -> Optional[Entity]:
        """Return the first entity matching one made of ``args``, or None."""
        if not args:
            raise TypeError("find() needs at least one value")
        node = self._list.search(Entity(list(args)), self.compare)
        return None if node is None else node.value

    def remove(self, entity: Entity) -> Entity:
        """Remove ``entity`` itself from the list and return it."""
        for node in self._list.nodes():
            if node.value is entity:
                return self._list.remove(node)
        raise ValueError("entity is not in this list")

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._list)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"