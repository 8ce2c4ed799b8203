"""Entity factory strategy record.

Usage:
    factory = EntityFactory(create=lambda data, f: Todo(**data))
    users = Collection(factory, id_attribute="_id")

    # Per-call overrides never touch the collection defaults
    users.set(payload, root_store=root)
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from idstore.core.factory.operations import (
    DEFAULT_ID_ATTRIBUTE,
    default_create,
    default_get_id,
    default_update,
)

CreateFunc = Callable[[Any, "EntityFactory"], Any]
"""Signature: (raw_input, factory) -> new_entity"""

UpdateFunc = Callable[[Any, Any, "EntityFactory"], Any]
"""Signature: (existing_entity, raw_input, factory) -> entity"""

GetIdFunc = Callable[[Any, "EntityFactory"], Any]
"""Signature: (record_or_entity, factory) -> id | UNRESOLVED | None"""


@dataclass(frozen=True, slots=True)
class EntityFactory:
    """Pluggable strategy deciding how raw input becomes or updates an entity.

    Every callback receives the effective factory (collection defaults merged
    with per-call overrides) as its last argument, so extra options travel
    through `context`.

    Callbacks that call back into a collection (e.g. parsing nested records
    into another collection that points back here) must be re-entrant: the
    collection re-checks its index after `create` returns and the innermost
    completed call for an identity wins.
    """

    create: CreateFunc = default_create
    """Build a new entity from raw input. Default: the input itself."""

    update: UpdateFunc = default_update
    """Merge raw input onto an existing entity. Default: shallow overwrite."""

    get_data_id: GetIdFunc = default_get_id
    """Id of a raw input record."""

    get_model_id: GetIdFunc = default_get_id
    """Id of an entity already in a collection."""

    id_attribute: str = DEFAULT_ID_ATTRIBUTE
    """Field read by the default id accessors."""

    context: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    """Free-form options forwarded to callbacks."""

    def with_overrides(self, **overrides: Any) -> EntityFactory:
        """Return a copy with overrides applied on top of this record.

        Known field names replace the field (None leaves it unchanged); any
        other keyword is merged into a fresh copy of `context`.

        Args:
            **overrides: Field replacements and extra context options.

        Returns:
            New EntityFactory, or self when there is nothing to override.
        """
        if not overrides:
            return self
        names = {f.name for f in dataclasses.fields(self)} - {"context"}
        changes: dict[str, Any] = {}
        extra: dict[str, Any] = {}
        for key, value in overrides.items():
            if key in names:
                if value is not None:
                    changes[key] = value
            elif key == "context":
                extra.update(value or {})
            else:
                extra[key] = value
        if extra:
            changes["context"] = MappingProxyType({**self.context, **extra})
        return dataclasses.replace(self, **changes) if changes else self

    def option(self, name: str, default: Any = None) -> Any:
        """Read an extra option from `context`."""
        return self.context.get(name, default)
