"""Default entity factory strategies.

These are the behaviours a collection falls back to when no custom strategy
is supplied: raw input becomes the entity, and later sightings shallow-merge
onto it.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import TYPE_CHECKING, Any

from idstore.core.identity import UNRESOLVED

if TYPE_CHECKING:
    from idstore.core.factory.models import EntityFactory

DEFAULT_ID_ATTRIBUTE = "id"


def read_field(obj: Any, name: str, default: Any = UNRESOLVED) -> Any:
    """Read a field off a mapping or an attribute-bearing object.

    Args:
        obj: Raw record or entity.
        name: Key or attribute name.
        default: Returned when the field is absent.

    Returns:
        The field value, or default.
    """
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    return getattr(obj, name, default)


def default_create(data: Any, factory: EntityFactory) -> Any:
    """Use the raw input itself as the entity."""
    return data


def default_update(existing: Any, data: Any, factory: EntityFactory) -> Any:
    """Shallow-overwrite the existing entity's fields with the input's fields.

    Args:
        existing: Entity already held by the collection.
        data: Raw input record.
        factory: Effective factory options (unused).

    Returns:
        The same existing instance, mutated in place.
    """
    if existing is data:
        return existing
    if isinstance(existing, MutableMapping):
        existing.update(data)
    else:
        for key, value in data.items():
            setattr(existing, key, value)
    return existing


def default_get_id(obj: Any, factory: EntityFactory) -> Any:
    """Read the configured id attribute (`"id"` when unset).

    Returns:
        The id value, or `UNRESOLVED` if the field is absent.
    """
    return read_field(obj, factory.id_attribute or DEFAULT_ID_ATTRIBUTE)
