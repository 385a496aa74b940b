"""In-place sorting and de-duplication helpers driven by three-way comparators.

A comparator takes two values and returns ``1`` when the first is greater,
``-1`` when it is smaller and ``0`` when both are equal.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any, Optional

Compare = Callable[[Any, Any], int]


def three_way(a: Any, b: Any) -> int:
    """Return 0 if ``a == b``, 1 if ``a > b`` and -1 otherwise."""
    if a == b:
        return 0
    return 1 if a > b else -1


def quick_sort(items: MutableSequence, compare: Compare = three_way) -> None:
    """Sort ``items`` in place with a Lomuto-partition quick sort."""
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = items[high]
        boundary = low - 1
        for probe in range(low, high):
            if compare(items[probe], pivot) != 1:
                boundary += 1
                items[boundary], items[probe] = items[probe], items[boundary]
        split = boundary + 1
        items[split], items[high] = items[high], items[split]
        pending.append((split + 1, high))
        pending.append((low, split - 1))


def max_heapify(
    items: MutableSequence, index: int, heap_size: int, compare: Compare = three_way
) -> None:
    """Sift ``items[index]`` down so the subtree rooted there is a max-heap.

    Only the first ``heap_size`` elements are treated as part of the heap.
    """
    if not 0 <= heap_size <= len(items):
        raise ValueError(f"heap size {heap_size} out of range for {len(items)} items")
    if index < 0:
        raise IndexError(f"negative heap index {index}")
    while True:
        left = 2 * index + 1
        right = left + 1
        largest = index
        if left < heap_size and compare(items[left], items[index]) == 1:
            largest = left
        if right < heap_size and compare(items[right], items[largest]) == 1:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def build_max_heap(items: MutableSequence, compare: Compare = three_way) -> None:
    """Rearrange ``items`` in place into a max-heap."""
    heap_size = len(items)
    for index in range(heap_size // 2 - 1, -1, -1):
        max_heapify(items, index, heap_size, compare)


def heap_sort(items: MutableSequence, compare: Compare = three_way) -> None:
    """Sort ``items`` in place in ascending order using heap sort."""
    build_max_heap(items, compare)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        max_heapify(items, 0, end, compare)


def wring(
    items: MutableSequence,
    compare: Compare = three_way,
    callback: Optional[Callable[[Any], Any]] = None,
) -> int:
    """Drop consecutive duplicates from ``items`` in place.

    Each removed value is handed to ``callback`` if one is given.
    Returns the number of values removed.
    """
    removed = 0
    index = 0
    while index + 1 < len(items):
        if compare(items[index], items[index + 1]) == 0:
            value = items.pop(index + 1)
            removed += 1
            if callback is not None:
                callback(value)
        else:
            index += 1
    return removed