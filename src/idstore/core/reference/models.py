"""Reference source protocol.

Anything that can look entities up by identity and scan them in order can be
the target of a reference. `Collection` is the built-in implementation.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class ReferenceSource(Protocol[T]):
    """Read-only view of an identity-indexed collection."""

    def get(self, id: Any) -> Any:
        """Entity (or parallel list of entities) for id(s); None when absent."""
        ...

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        """First entity in sequence order matching predicate."""
        ...

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        """All entities matching predicate, in sequence order."""
        ...

    def __iter__(self) -> Iterator[T]: ...

    def __len__(self) -> int: ...
