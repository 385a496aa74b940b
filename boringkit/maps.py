"""Keyed maps and sets of entities stored in a red-black tree or a hash map."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

from .entity import Entity
from .hashmap import HashMap
from .rb_tree import RBTree
from .sorting import Compare, three_way

SLOT_SIZE = 1000
"""Default number of hash slots of the hashed maps and sets."""

KeyHasher = Callable[[Any, int], int]


def _plain(key: tuple) -> Any:
    """Unwrap single-element keys so callers see the bare value."""
    return key[0] if len(key) == 1 else key


def default_hasher(key: Any, slot_size: int) -> int:
    """Hash ``key`` into ``0 .. slot_size - 1`` with Python's ``hash``."""
    return hash(key) % slot_size


def _key_match(a: Entity, b: Entity) -> int:
    return 0 if a.key_equals(b) else 1


def _replace_value(existing: Entity, incoming: Entity) -> Entity:
    if existing.value_equals(incoming):
        return existing
    if (
        existing.number == incoming.number
        and existing.value_index == incoming.value_index
    ):
        existing.copy_value_from(incoming)
        return existing
    return incoming.copy()


def _keep_existing(existing: Entity, incoming: Entity) -> Entity:
    return existing


class _TreeStore:
    """Entities ordered by a comparator applied to their keys."""

    def __init__(self, compare: Compare) -> None:
        self._tree = RBTree(lambda a, b: compare(_plain(a.key()), _plain(b.key())))

    def __len__(self) -> int:
        return len(self._tree)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._tree)

    def find(self, probe: Entity) -> Optional[Entity]:
        node = self._tree.search(probe)
        return None if node is None else node.value

    def put(self, entity: Entity, conflict_fix) -> bool:
        return self._tree.set(entity, Entity.copy, conflict_fix)

    def take(self, probe: Entity) -> Optional[Entity]:
        node = self._tree.search(probe)
        return None if node is None else self._tree.remove(node)


class _HashStore:
    """Entities grouped in hash slots computed from their keys."""

    def __init__(self, key_hasher: KeyHasher, slot_size: int) -> None:
        self._map = HashMap(
            slot_size,
            lambda entity, size: key_hasher(_plain(entity.key()), size),
            _key_match,
        )

    def __len__(self) -> int:
        return len(self._map)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._map)

    def find(self, probe: Entity) -> Optional[Entity]:
        node = self._map.search(probe)
        return None if node is None else node.entity

    def put(self, entity: Entity, conflict_fix) -> bool:
        return self._map.set(entity, Entity.copy, conflict_fix)

    def take(self, probe: Entity) -> Optional[Entity]:
        node = self._map.search(probe)
        return None if node is None else self._map.remove(node)


class Map:
    """Base of the maps: keys of one or more parts mapped to one value.

    Subclasses choose the storage; keys made of one part are used bare,
    keys of several parts as tuples.
    """

    _store: Any

    @staticmethod
    def _probe(args: tuple) -> Entity:
        if not args:
            raise TypeError("at least one key part is required")
        return Entity(list(args))

    def set(self, *args: Any) -> bool:
        """Map the key parts ``args[:-1]`` to ``args[-1]``.

        Returns True if the key was new, False if its value was replaced.
        """
        if len(args) < 2:
            raise TypeError("set() needs at least one key part and a value")
        return self._store.put(Entity(list(args), len(args) - 1), _replace_value)

    def get(self, *args: Any) -> Any:
        """Return the value stored under the key parts ``args``."""
        entity = self._store.find(self._probe(args))
        if entity is None:
            raise KeyError(_plain(args))
        return entity.value()

    def has(self, *args: Any) -> bool:
        """True if a value is stored under the key parts ``args``."""
        return self._store.find(self._probe(args)) is not None

    def delete(self, *args: Any) -> Any:
        """Remove the key parts ``args`` and return the value they held."""
        entity = self._store.take(self._probe(args))
        if entity is None:
            raise KeyError(_plain(args))
        return entity.value()

    def entities(self) -> Iterator[Entity]:
        """Yield the stored entities, keys and values together."""
        return iter(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator[Any]:
        for entity in self._store:
            yield _plain(entity.key())

    def __repr__(self) -> str:
        items = ", ".join(f"{_plain(e.key())!r}: {e.value()!r}" for e in self._store)
        return f"{type(self).__name__}({{{items}}})"


class TreeMap(Map):
    """Map whose keys are kept in the order given by ``compare``."""

    def __init__(self, compare: Compare = three_way) -> None:
        self._store = _TreeStore(compare)


class HashedMap(Map):
    """Map whose keys are spread over ``slot_size`` hash slots."""

    def __init__(
        self, key_hasher: KeyHasher = default_hasher, slot_size: int = SLOT_SIZE
    ) -> None:
        self._store = _HashStore(key_hasher, slot_size)


class EntitySet:
    """Base of the sets: distinct keys, the first stored one kept."""

    _store: Any

    def add(self, key: Any) -> bool:
        """Add ``key``; return True if it was not present yet."""
        return self._store.put(Entity([key]), _keep_existing)

    def has(self, key: Any) -> bool:
        """True if a key equal to ``key`` is present."""
        return self._store.find(Entity([key])) is not None

    def get(self, key: Any) -> Any:
        """Return the stored key that matches ``key``."""
        entity = self._store.find(Entity([key]))
        if entity is None:
            raise KeyError(key)
        return entity.values[0]

    def delete(self, key: Any) -> Any:
        """Remove the key matching ``key`` and return the stored key."""
        entity = self._store.take(Entity([key]))
        if entity is None:
            raise KeyError(key)
        return entity.values[0]

    def union(self, other: Iterable[Any]) -> None:
        """Add every key of ``other`` to this set."""
        for key in other:
            self.add(key)

    def intersects(self, other: "EntitySet") -> bool:
        """True if the two sets share at least one key."""
        smaller, larger = (self, other) if len(self) < len(other) else (other, self)
        return any(larger.has(key) for key in smaller)

    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator[Any]:
        for entity in self._store:
            yield entity.values[0]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class TreeSet(EntitySet):
    """Set whose keys are kept in the order given by ``compare``."""

    def __init__(self, compare: Compare = three_way) -> None:
        self._store = _TreeStore(compare)


class HashedSet(EntitySet):
    """Set whose keys are spread over ``slot_size`` hash slots."""

    def __init__(
        self, key_hasher: KeyHasher = default_hasher, slot_size: int = SLOT_SIZE
    ) -> None:
        self._store = _HashStore(key_hasher, slot_size)