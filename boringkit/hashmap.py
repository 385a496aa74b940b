"""A chained hash map whose entries live in one linked list grouped by slot."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

from .linked_list import LinkedList, ListNode
from .sorting import Compare, three_way

KeyHasher = Callable[[Any, int], int]


@dataclass(eq=False)
class HashNode:
    """One stored entity together with the slot its key hashes to."""

    entity: Any
    slot_index: int
    _link: Optional[ListNode] = field(default=None, repr=False)


class HashMap:
    """Hash map keyed by ``key_hasher``/``key_compare`` over stored entities.

    Entities sharing a slot are kept next to each other in a single linked
    list; each slot remembers the first entry of its group.
    """

    def __init__(
        self,
        slot_size: int,
        key_hasher: KeyHasher,
        key_compare: Compare = three_way,
    ) -> None:
        if slot_size <= 0:
            raise ValueError(f"slot size must be positive, got {slot_size}")
        self.slot_size = slot_size
        self.key_hasher = key_hasher
        self.key_compare = key_compare
        self._table = LinkedList()
        self._slots: list[Optional[ListNode]] = [None] * slot_size

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[Any]:
        for node in self._table:
            yield node.entity

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _slot_of(self, key: Any) -> int:
        index = self.key_hasher(key, self.slot_size)
        if not 0 <= index < self.slot_size:
            raise ValueError(
                f"hasher returned slot {index} outside 0..{self.slot_size - 1}"
            )
        return index

    def _find(self, key: Any, index: int) -> Optional[ListNode]:
        head = self._slots[index]
        if head is None:
            return None
        for link in self._table.nodes(head):
            node = link.value
            if self.key_compare(node.entity, key) == 0:
                return link
            if node.slot_index != index:
                return None
        return None

    def first(self) -> Optional[HashNode]:
        """Return the first node in iteration order, or None if empty."""
        link = self._table.first()
        return None if link is None else link.value

    def last(self) -> Optional[HashNode]:
        """Return the last node in iteration order, or None if empty."""
        link = self._table.last()
        return None if link is None else link.value

    def search(self, key: Any) -> Optional[HashNode]:
        """Return the node whose entity matches ``key``, or None."""
        link = self._find(key, self._slot_of(key))
        return None if link is None else link.value

    def set(
        self,
        entity: Any,
        setup: Optional[Callable[[Any], Any]] = None,
        conflict_fix: Optional[Callable[[Any, Any], Any]] = None,
    ) -> bool:
        """Store ``entity``; return True if it was new, False if it replaced one.

        ``setup(entity)`` gives the value stored for a new entry.
        ``conflict_fix(existing, entity)`` gives the value kept when the key
        is already present; without it the new entity replaces the old one.
        """
        index = self._slot_of(entity)
        link = self._find(entity, index)
        if link is None:
            stored = setup(entity) if setup is not None else entity
            node = HashNode(stored, index)
            node._link = self._table.insert_before(self._slots[index], node)
            self._slots[index] = node._link
            return True
        node = link.value
        if conflict_fix is not None:
            node.entity = conflict_fix(node.entity, entity)
        else:
            node.entity = entity
        return False

    def remove(self, node: HashNode) -> Any:
        """Remove ``node`` from the map and return its entity."""
        link = node._link
        if link is None or link.owner is not self._table:
            raise ValueError("node does not belong to this map")
        index = node.slot_index
        if self._slots[index] is link:
            following = self._table.successor(link)
            if following is not None and following.value.slot_index == index:
                self._slots[index] = following
            else:
                self._slots[index] = None
        self._table.remove(link)
        node._link = None
        return node.entity

    def pop(self, key: Any) -> Any:
        """Remove the entity matching ``key`` and return it."""
        node = self.search(key)
        if node is None:
            raise KeyError(key)
        return self.remove(node)