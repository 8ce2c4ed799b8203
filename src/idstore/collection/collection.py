"""Identity-indexed collection.

Keeps exactly one instance per entity identity, however many times
overlapping raw records are ingested.

Usage:
    users = Collection[dict]()
    alice = users.set({"id": 1, "name": "Alice"})
    users.set({"id": "1", "email": "alice@example.com"}) is alice  # True
    users.get(1)["email"]  # "alice@example.com"

    # Custom strategies
    todos = Collection(EntityFactory(create=lambda data, f: Todo(**data)))
"""

from __future__ import annotations

import functools
import warnings
from collections.abc import Callable, Iterator, MutableSequence, Sequence
from typing import Any, Generic, TypeVar, overload

from idstore.core.factory import EntityFactory, read_field
from idstore.core.identity import (
    UNRESOLVED,
    data_key,
    identity_key,
    is_primitive_id,
    is_resolved,
)
from idstore.core.reference import reference_many, reference_one
from idstore.core.sequence import move_item

T = TypeVar("T")
R = TypeVar("R")

_NO_INITIAL: Any = object()


def _is_many(value: Any) -> bool:
    return isinstance(value, (list, tuple))


class Collection(Generic[T]):
    """Ordered sequence of entities plus a lazily populated identity index.

    The index maps identity keys (the `str()` of an id) to entities and is a
    memoization layered over the sequence: anything reachable through it is
    also in the sequence. Entities without a resolvable id may sit in the
    sequence unindexed. Changing an indexed entity's id field directly,
    bypassing `set`, is not supported.

    Args:
        factory: Strategy for creating/updating entities (defaults if None).
        items: Sequence to hold entities, e.g. an observed list (new list if None).
        **options: Overrides applied on top of factory, see
            `EntityFactory.with_overrides`.
    """

    def __init__(
        self,
        factory: EntityFactory | None = None,
        *,
        items: MutableSequence[T] | None = None,
        **options: Any,
    ):
        self._factory = (factory or EntityFactory()).with_overrides(**options)
        self._items: MutableSequence[T] = items if items is not None else []
        self._index: dict[str, T] = {}

    @property
    def factory(self) -> EntityFactory:
        """Collection-level factory defaults."""
        return self._factory

    @property
    def items(self) -> MutableSequence[T]:
        """The live entity sequence. Mutate only through collection methods."""
        return self._items

    @property
    def length(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __contains__(self, entity: object) -> bool:
        return self._position(entity) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(length={len(self._items)})"

    def _position(self, entity: object) -> int | None:
        """Index of entity in the sequence, by instance identity."""
        for position, item in enumerate(self._items):
            if item is entity:
                return position
        return None

    def _model_key(self, entity: T) -> str | None:
        model_id = self._factory.get_model_id(entity, self._factory)
        return identity_key(model_id) if is_resolved(model_id) else None

    # --- Lookup ---

    @overload
    def get(self, id: list[Any] | tuple[Any, ...]) -> list[T | None]: ...

    @overload
    def get(self, id: Any) -> T | None: ...

    def get(self, id: Any) -> T | None | list[T | None]:
        """Get entities by id.

        Checks the identity index first, then scans the sequence comparing
        each entity's model id; a scan hit is memoized in the index.

        Args:
            id: Single id, or a list/tuple of ids.

        Returns:
            The entity or None; for a list, a parallel list with None slots.
        """
        if id is None or id is UNRESOLVED:
            return None
        if _is_many(id):
            return [self.get(id_) for id_ in id]

        key = identity_key(id)
        if key in self._index:
            return self._index[key]

        for entity in self._items:
            if self._model_key(entity) == key:
                self._index[key] = entity
                return entity
        return None

    # --- Ingestion ---

    @overload
    def set(self, data: list[Any] | tuple[Any, ...], **overrides: Any) -> list[T | None]: ...

    @overload
    def set(self, data: Any, **overrides: Any) -> T | None: ...

    def set(self, data: Any, **overrides: Any) -> T | None | list[T | None]:
        """Create or update entities from raw input, one instance per identity.

        Records whose id is `UNRESOLVED` are skipped. An existing entity is
        updated in place and returned as the same instance.

        Re-entrant: if the factory's `create` (directly or through another
        collection) calls `set` on this collection for the same identity,
        the entity published by that nested call is kept, the outer
        candidate is discarded and the outer data is applied with `update`.

        Args:
            data: Raw record, or a list/tuple of records. None is ignored.
            **overrides: Per-call factory overrides.

        Returns:
            The entity (None if its id is unresolved); for a list, one result
            per record.

        Raises:
            InvalidIdentityError: If a record's id resolves to None.
        """
        if data is None:
            return None
        factory = self._factory.with_overrides(**overrides)
        if _is_many(data):
            return [self._set_one(record, factory) for record in data]
        return self._set_one(data, factory)

    def _set_one(self, data: Any, factory: EntityFactory) -> T | None:
        key = data_key(factory.get_data_id(data, factory))
        if key is None:
            return None

        existing = self.get(key)
        if existing is not None:
            factory.update(existing, data, factory)
            return existing

        created = factory.create(data, factory)

        # create() may have re-entered set() for this id; reuse what it published.
        existing = self.get(key)
        if existing is not None:
            factory.update(existing, data, factory)
            return existing

        self._items.append(created)
        self._index[key] = created
        return created

    @overload
    def create(self, data: list[Any] | tuple[Any, ...], **overrides: Any) -> list[T | None]: ...

    @overload
    def create(self, data: Any, **overrides: Any) -> T | None: ...

    def create(self, data: Any, **overrides: Any) -> T | None | list[T | None]:
        """Like `set`, but records without an id are added anyway.

        Entities added without an id are not deduplicated: once such a record
        gains an id, later `set` calls will create a second instance unless
        the id also becomes readable on the first one.

        Args:
            data: Raw record, or a list/tuple of records. None is ignored.
            **overrides: Per-call factory overrides.

        Returns:
            The entity; for a list, one entity per record.

        Raises:
            InvalidIdentityError: If a record's id resolves to None.
        """
        if data is None:
            return None
        factory = self._factory.with_overrides(**overrides)
        if _is_many(data):
            return [self._create_one(record, factory) for record in data]
        return self._create_one(data, factory)

    def _create_one(self, data: Any, factory: EntityFactory) -> T | None:
        data_id = factory.get_data_id(data, factory)
        if data_id is not UNRESOLVED:
            return self._set_one(data, factory)

        created = factory.create(data, factory)
        self.add(created)
        return created

    def add(self, entities: T | Sequence[T]) -> Collection[T]:
        """Append already constructed entities without calling the factory.

        Instances already present (by identity, not id) are skipped.

        Args:
            entities: Entity, or a list/tuple of entities.

        Returns:
            self, for chaining.
        """
        batch = list(entities) if _is_many(entities) else [entities]
        new: list[T] = []
        for entity in batch:
            if entity in self or any(entity is seen for seen in new):
                continue
            key = self._model_key(entity)
            if key is not None:
                holder = self.get(key)
                if holder is not None and holder is not entity:
                    warnings.warn(
                        f"add() received a second instance for id {key!r}. "
                        f"Lookups by id keep returning the first one.",
                        stacklevel=2,
                    )
            new.append(entity)
        self._items.extend(new)
        return self

    # --- Removal and reordering ---

    def remove(self, entity_or_id: Any) -> Collection[T]:
        """Remove an entity given itself or its id.

        Does nothing when the id is unknown or the entity is not in this
        collection.

        Args:
            entity_or_id: Entity instance or primitive id.

        Returns:
            self, for chaining.
        """
        entity = self.get(entity_or_id) if is_primitive_id(entity_or_id) else entity_or_id
        if entity is None:
            return self
        position = self._position(entity)
        if position is None:
            return self

        del self._items[position]
        key = self._model_key(entity)
        if key is not None and self._index.get(key) is entity:
            del self._index[key]
        return self

    def clear(self) -> Collection[T]:
        """Remove every entity and forget all identities."""
        self._items.clear()
        self._index.clear()
        return self

    def move(self, from_index: int, to_index: int) -> Collection[T]:
        """Move the entity at from_index to to_index, shifting those between.

        Raises:
            IndexOutOfRangeError: If either index is negative or >= length.
                The sequence is left unchanged.
        """
        move_item(self._items, from_index, to_index)
        return self

    # --- Queries (pure reads over the current sequence) ---

    def map(self, iteratee: Callable[[T], R]) -> list[R]:
        return [iteratee(entity) for entity in list(self._items)]

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        return [entity for entity in list(self._items) if predicate(entity)]

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        """First entity in sequence order matching predicate, or None."""
        for entity in list(self._items):
            if predicate(entity):
                return entity
        return None

    def some(self, predicate: Callable[[T], bool]) -> bool:
        return any(predicate(entity) for entity in list(self._items))

    def every(self, predicate: Callable[[T], bool]) -> bool:
        return all(predicate(entity) for entity in list(self._items))

    def for_each(self, iteratee: Callable[[T], Any]) -> Collection[T]:
        for entity in list(self._items):
            iteratee(entity)
        return self

    def slice(self, start: int | None = None, end: int | None = None) -> list[T]:
        return list(self._items)[start:end]

    def at(self, index: int) -> T | None:
        """Entity at index, or None when index is outside [0, length)."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def order_by(
        self,
        iteratees: str | Callable[[T], Any] | Sequence[str | Callable[[T], Any]],
        orders: str | bool | Sequence[str | bool] | None = None,
    ) -> list[T]:
        """Sorted copy of the entities.

        Args:
            iteratees: Field name(s) or key function(s), most significant first.
            orders: Per-iteratee direction: "asc"/"desc", or True for
                ascending and False for descending. Missing entries are "asc".

        Returns:
            New list; ties keep sequence order. Entities whose value is None
            or missing sort last in either direction.
        """
        keys = [iteratees] if isinstance(iteratees, str) or callable(iteratees) else list(iteratees)
        if orders is None:
            directions: list[str | bool] = []
        elif isinstance(orders, (str, bool)):
            directions = [orders]
        else:
            directions = list(orders)

        result = list(self._items)
        for position in reversed(range(len(keys))):
            key = keys[position]
            direction = directions[position] if position < len(directions) else "asc"
            descending = direction is False or direction == "desc"
            if isinstance(key, str):
                key = functools.partial(read_field, name=key, default=None)
            present: list[tuple[Any, T]] = []
            missing: list[T] = []
            for entity in result:
                value = key(entity)
                if value is None or value is UNRESOLVED:
                    missing.append(entity)
                else:
                    present.append((value, entity))
            present.sort(key=lambda pair: pair[0], reverse=descending)
            result = [entity for _, entity in present] + missing
        return result

    def chunk(self, size: int = 1) -> list[list[T]]:
        """Split entities into lists of size (the last may be shorter)."""
        if size < 1:
            return []
        items = list(self._items)
        return [items[start : start + size] for start in range(0, len(items), size)]

    def reduce(self, iteratee: Callable[[Any, T], Any], initial: Any = _NO_INITIAL) -> Any:
        """Fold entities left to right with iteratee(accumulator, entity).

        Raises:
            TypeError: If the collection is empty and no initial is given.
        """
        if initial is _NO_INITIAL:
            return functools.reduce(iteratee, list(self._items))
        return functools.reduce(iteratee, list(self._items), initial)

    # --- References ---

    def reference_one(self, ids: Any, field: str | None = None) -> Any:
        """Belongs-to lookup into this collection, see `reference_one`."""
        return reference_one(self, ids, field)

    def reference_many(self, ids: Any, field: str) -> list[T]:
        """Has-many lookup into this collection, see `reference_many`."""
        return reference_many(self, ids, field)
