"""Root store assembly.

Usage:
    root = create_root_store({
        "todo_store": TodoStore,
        "user_store": UserStore,
        "api": api_client,
    })
    root.todo_store.root_store is root  # True
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

StoreFactory = Callable[[Any, "RootStore"], Any]
"""Signature: (store_class_or_callable, root_store) -> store"""


class RootStore:
    """Registry object holding stores and shared values as attributes."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(vars(self))})"


def default_store_factory(store_class: Any, root_store: RootStore) -> Any:
    """Instantiate a store, passing the root store by keyword."""
    return store_class(root_store=root_store)


def create_root_store(
    stores: Mapping[str, Any],
    factory: StoreFactory | None = None,
) -> RootStore:
    """Build a root store, injecting it into every callable value.

    Values are processed in mapping order and each result is attached before
    the next is built, so a store's constructor can reach the stores listed
    before it.

    Args:
        stores: Attribute name -> store class, factory function, or plain value.
            Callables are built with factory; other values are attached as-is.
        factory: How to build a store from a callable (default:
            `value(root_store=root)`).

    Returns:
        The populated RootStore.
    """
    build = factory or default_store_factory
    root = RootStore()
    for name, value in stores.items():
        setattr(root, name, build(value, root) if callable(value) else value)
    return root
