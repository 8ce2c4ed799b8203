"""Ordered-sequence utilities."""

from idstore.core.sequence.operations import (
    IndexOutOfRangeError,
    check_index,
    move_item,
    moved,
)

__all__ = [
    "IndexOutOfRangeError",
    "check_index",
    "moved",
    "move_item",
]
