"""Bounds-checked relocation of one element within an ordered sequence.

Usage:
    moved([1, 2, 3], 0, 1)  # [2, 1, 3]

    items = [1, 2, 3]
    move_item(items, 2, 0)  # items == [3, 1, 2]
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import TypeVar

T = TypeVar("T")


class IndexOutOfRangeError(IndexError):
    """Raised when a move index is negative or not smaller than the length."""

    pass


def check_index(target: Sequence[object], index: int) -> None:
    """Check that index addresses an existing element.

    Args:
        target: Sequence being indexed.
        index: Index to validate.

    Raises:
        IndexOutOfRangeError: If index is negative or >= len(target).
    """
    if index < 0:
        raise IndexOutOfRangeError(f"Index out of bounds: {index} is negative")
    length = len(target)
    if index >= length:
        raise IndexOutOfRangeError(f"Index out of bounds: {index} is not smaller than {length}")


def moved(source: Sequence[T], from_index: int, to_index: int) -> list[T]:
    """Return a new list with one element relocated.

    Elements between the two positions shift by one; the relative order of
    every other element is kept.

    Args:
        source: Sequence to reorder (not modified).
        from_index: Current position of the element.
        to_index: Position the element ends up at.

    Returns:
        Reordered copy of source.

    Raises:
        IndexOutOfRangeError: If either index is out of bounds.
    """
    check_index(source, from_index)
    check_index(source, to_index)
    items = list(source)
    if from_index == to_index:
        return items
    if from_index < to_index:
        return [
            *items[:from_index],
            *items[from_index + 1 : to_index + 1],
            items[from_index],
            *items[to_index + 1 :],
        ]
    return [
        *items[:to_index],
        items[from_index],
        *items[to_index:from_index],
        *items[from_index + 1 :],
    ]


def move_item(target: MutableSequence[T], from_index: int, to_index: int) -> MutableSequence[T]:
    """Relocate one element of target in place.

    Both indexes are validated before anything is written, so target is left
    untouched on failure. The contents are swapped in with a single full-range
    replacement.

    Args:
        target: Sequence to reorder.
        from_index: Current position of the element.
        to_index: Position the element ends up at.

    Returns:
        target, for chaining.

    Raises:
        IndexOutOfRangeError: If either index is out of bounds.
    """
    new_items = moved(target, from_index, to_index)
    if from_index != to_index:
        target[:] = new_items
    return target
