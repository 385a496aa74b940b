"""Keyed records of values and three-way comparators for plain values."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Entity:
    """A row of values split into a key part and a value part.

    ``values[:value_index]`` form the key; the rest are the value fields.
    When ``value_index`` is omitted, every value is part of the key.
    """

    values: list
    value_index: Optional[int] = None

    def __post_init__(self) -> None:
        self.values = list(self.values)
        if self.value_index is None:
            self.value_index = len(self.values)
        if not 0 <= self.value_index <= len(self.values):
            raise ValueError(
                f"value index {self.value_index} out of range for "
                f"{len(self.values)} values"
            )

    @classmethod
    def of(cls, *values: Any, value_index: Optional[int] = None) -> "Entity":
        """Build an entity from positional values."""
        return cls(list(values), value_index)

    @property
    def number(self) -> int:
        """Total count of values, key and value parts together."""
        return len(self.values)

    def key(self) -> tuple:
        """Return the key part as a tuple."""
        return tuple(self.values[: self.value_index])

    def value(self) -> Any:
        """Return the first value field."""
        if self.value_index >= len(self.values):
            raise IndexError("entity has no value fields")
        return self.values[self.value_index]

    def copy(self) -> "Entity":
        """Return an independent copy."""
        return Entity(list(self.values), self.value_index)

    def copy_value_from(self, other: "Entity") -> None:
        """Overwrite this entity's value fields with those of ``other``.

        Both entities must have the same shape and at least one value field.
        """
        if (
            self.number != other.number
            or self.value_index != other.value_index
            or other.value_index >= other.number
        ):
            raise ValueError("entities differ in shape or have no value fields")
        self.values[self.value_index :] = other.values[other.value_index :]

    def value_equals(self, other: "Entity") -> bool:
        """True if both entities share a shape and equal value fields."""
        return (
            self.value_index == other.value_index
            and self.number == other.number
            and self.values[self.value_index :] == other.values[other.value_index :]
        )

    def key_equals(self, other: "Entity") -> bool:
        """True if both entities have the same key length and equal keys."""
        return self.value_index == other.value_index and self.key() == other.key()


def cmp_int(a: Any, b: Any) -> int:
    """Three-way comparison of two values taken as integers."""
    left, right = int(a), int(b)
    if left == right:
        return 0
    return 1 if left > right else -1


def cmp_float(a: Any, b: Any) -> int:
    """Three-way comparison of two values taken as floats."""
    left, right = float(a), float(b)
    if left == right:
        return 0
    return 1 if left > right else -1


def entities(rows: Iterable[Iterable[Any]], value_index: Optional[int] = None) -> list:
    """Build a list of entities sharing one ``value_index``."""
    return [Entity(list(row), value_index) for row in rows]