"""Model base class: an attribute bag with a parse hook.

Usage:
    class Todo(Model):
        def parse(self, attributes, **options):
            return {**attributes, "done": bool(attributes.get("done"))}

    todo = Todo({"id": 1, "text": "write docs"}, parse=True)
    todo.set({"done": 1, "text": UNRESOLVED}, parse=True, strip_unresolved=True)
"""

from __future__ import annotations

import reprlib
from collections.abc import Iterable, Mapping
from typing import Any, Self

from idstore.core.identity import UNRESOLVED


class Model:
    """Entity whose fields are plain instance attributes.

    Args:
        attributes: Initial attributes, passed through `set()`.
        parse: Run `parse()` on attributes before assigning.
        strip_unresolved: Skip attributes whose value is `UNRESOLVED`.
        root_store: Registry this model belongs to, kept as `root_store`.
        **options: Forwarded to `parse()`.
    """

    root_store: Any = None

    def __init__(
        self,
        attributes: Mapping[str, Any] | None = None,
        *,
        parse: bool = False,
        strip_unresolved: bool = False,
        root_store: Any = None,
        **options: Any,
    ):
        # Set before attributes so parse() can reach other stores.
        if root_store is not None:
            self.root_store = root_store
        if attributes:
            self.set(attributes, parse=parse, strip_unresolved=strip_unresolved, **options)

    def set(
        self,
        attributes: Mapping[str, Any] | None,
        *,
        parse: bool = False,
        strip_unresolved: bool = False,
        **options: Any,
    ) -> Self:
        """Assign attributes onto this model.

        Args:
            attributes: Fields to assign. None or empty is a no-op.
            parse: Run `parse()` on attributes first.
            strip_unresolved: Skip attributes whose value is `UNRESOLVED`.
            **options: Forwarded to `parse()`.

        Returns:
            self, for chaining.
        """
        if not attributes:
            return self
        if parse:
            attributes = self.parse(attributes, **options)
        if strip_unresolved:
            attributes = {
                key: value for key, value in attributes.items() if value is not UNRESOLVED
            }
        for key, value in attributes.items():
            setattr(self, key, value)
        return self

    def parse(self, attributes: Mapping[str, Any], **options: Any) -> Mapping[str, Any]:
        """Convert raw attributes into the values to assign. Identity by default."""
        return attributes

    def pick(self, names: Iterable[str]) -> dict[str, Any]:
        """Subset of attributes; names the model does not have are left out."""
        return {name: getattr(self, name) for name in names if hasattr(self, name)}

    def to_dict(self) -> dict[str, Any]:
        """Public instance attributes, excluding the root store."""
        return {
            key: value
            for key, value in vars(self).items()
            if not key.startswith("_") and key != "root_store"
        }

    @reprlib.recursive_repr()
    def __repr__(self) -> str:
        fields = ", ".join(f"{key}={value!r}" for key, value in self.to_dict().items())
        return f"{type(self).__name__}({fields})"
