"""Model/store layer built on identity-indexed collections."""

from idstore.store.model import Model
from idstore.store.root import RootStore, StoreFactory, create_root_store, default_store_factory
from idstore.store.store import Store

__all__ = [
    "Model",
    "Store",
    "RootStore",
    "StoreFactory",
    "create_root_store",
    "default_store_factory",
]
