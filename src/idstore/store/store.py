"""Store base class: owns model-backed collections for one root store.

Usage:
    class UserStore(Store):
        def __init__(self, root_store=None):
            super().__init__(root_store)
            self.users = self.collection(User, id_attribute="_id")

    class TodoStore(Store):
        def __init__(self, root_store=None):
            super().__init__(root_store)
            self.todos = self.collection(Todo)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from idstore.collection import Collection
from idstore.config import StoreSettings
from idstore.core.factory import EntityFactory
from idstore.store.model import Model

M = TypeVar("M", bound=Model)

_MODEL_OPTIONS = ("parse", "strip_unresolved", "root_store")


def _parse_options(factory: EntityFactory) -> dict[str, Any]:
    """Context entries that are not model construction flags."""
    return {key: value for key, value in factory.context.items() if key not in _MODEL_OPTIONS}


def _model_flags(factory: EntityFactory) -> Mapping[str, Any]:
    return {
        "parse": factory.option("parse", False),
        "strip_unresolved": factory.option("strip_unresolved", False),
    }


class Store:
    """Base class for stores that group collections of one kind of model.

    Args:
        root_store: Registry holding this and sibling stores. Handed to
            every model the store's collections create.
        settings: Model construction defaults (read from the environment
            if None).
    """

    def __init__(self, root_store: Any = None, *, settings: StoreSettings | None = None):
        self.root_store = root_store
        self.settings = settings or StoreSettings()

    def collection(self, model: type[M], **options: Any) -> Collection[M]:
        """Create a collection that builds and updates instances of model.

        New records become `model(data, parse=..., strip_unresolved=...,
        root_store=...)`; repeated records go through `existing.set(...)`.

        Args:
            model: Model subclass to instantiate.
            **options: Collection-level factory overrides, e.g.
                `id_attribute`, `parse`, or extra options for `Model.parse`.

        Returns:
            New Collection bound to this store's root store.
        """

        def create(data: Mapping[str, Any], factory: EntityFactory) -> M:
            return model(
                data,
                root_store=factory.option("root_store"),
                **_model_flags(factory),
                **_parse_options(factory),
            )

        def update(existing: M, data: Mapping[str, Any], factory: EntityFactory) -> M:
            return existing.set(data, **_model_flags(factory), **_parse_options(factory))

        factory = EntityFactory(
            create=create,
            update=update,
            id_attribute=self.settings.id_attribute,
        ).with_overrides(
            root_store=self.root_store,
            parse=self.settings.parse,
            strip_unresolved=self.settings.strip_unresolved,
        )
        return Collection(factory, **options)
