"""idstore: one in-memory instance per entity, with cross-collection references.

Usage:
    from idstore import Collection, reference_many, reference_one

    users = Collection()
    todos = Collection()

    for record in api_response:
        record = dict(record, creator=users.set(record["creator"]))
        todos.set(record)

    users.get("2") is users.get(2)  # True, ids are compared as strings
    reference_many(todos, 2, "creator_id")  # every todo created by user 2
"""

__version__ = "0.1.0"

# Collection
from idstore.collection import Collection

# Configuration
from idstore.config import StoreSettings

# Core primitives
from idstore.core import (
    UNRESOLVED,
    EntityFactory,
    IndexOutOfRangeError,
    InvalidIdentityError,
    ModelId,
    RawData,
    ReferenceSource,
    move_item,
    moved,
    reference_many,
    reference_one,
)

# Model/store layer
from idstore.store import Model, RootStore, Store, create_root_store

__all__ = [
    # Version
    "__version__",
    # Core
    "UNRESOLVED",
    "EntityFactory",
    "ModelId",
    "RawData",
    "InvalidIdentityError",
    "IndexOutOfRangeError",
    "moved",
    "move_item",
    "ReferenceSource",
    "reference_one",
    "reference_many",
    # Collection
    "Collection",
    # Store
    "Model",
    "Store",
    "RootStore",
    "create_root_store",
    # Config
    "StoreSettings",
]
