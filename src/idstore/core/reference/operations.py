"""Reference resolution across collections.

Relationships are not stored: they are equality joins computed on demand
between a foreign-key value and either the identity or a field of the
entities in a source collection. Nothing here caches or mutates.

Usage:
    # belongs-to: the todo's creator
    creator = reference_one(users, todo["creator_id"])

    # has-many: every todo created by a user
    todos_by_user = reference_many(todos, user["id"], "creator_id")
"""

from __future__ import annotations

from typing import Any, TypeVar

from idstore.core.factory.operations import read_field
from idstore.core.identity import UNRESOLVED
from idstore.core.reference.models import ReferenceSource

T = TypeVar("T")


def _is_many(ids: Any) -> bool:
    return isinstance(ids, (list, tuple))


def _field_matches(field: str, value: Any):
    def predicate(entity: Any) -> bool:
        return read_field(entity, field, UNRESOLVED) == value

    return predicate


def reference_one(source: ReferenceSource[T], ids: Any, field: str | None = None) -> Any:
    """Resolve a belongs-to reference.

    Without field, ids are looked up through the source's identity index.
    With field, the source is scanned for the first entity whose field equals
    the id; when several match, the earliest in sequence order wins.

    Args:
        source: Collection holding the referenced entities.
        ids: Single id, or a list/tuple of ids.
        field: Field to match against instead of the entity identity.

    Returns:
        For a single id, the entity or None. For a list, the resolved
        entities in input order with unresolved ids dropped.
    """
    if _is_many(ids):
        resolved = (reference_one(source, id_, field) for id_ in ids)
        return [entity for entity in resolved if entity is not None]

    if field is not None:
        return source.find(_field_matches(field, ids))

    return source.get(ids)


def reference_many(source: ReferenceSource[T], ids: Any, field: str) -> list[T]:
    """Resolve a has-many reference.

    Args:
        source: Collection holding the referencing entities.
        ids: Single id, or a list/tuple of ids.
        field: Foreign-key field on the source entities.

    Returns:
        Every entity whose field equals the id. For a list of ids, the
        per-id groups concatenated in input order, each group in sequence
        order.
    """
    if _is_many(ids):
        result: list[T] = []
        for id_ in ids:
            result.extend(reference_many(source, id_, field))
        return result

    return source.filter(_field_matches(field, ids))
