"""Core functionalities: stateless protocols and primitives.

Architecture Note:
    core/ contains pure, stateless building blocks with no runtime state.
    For the stateful identity-indexed collection, see collection/; for the
    model/store layer built on top of it, see store/.
"""

from idstore.core.factory import (
    DEFAULT_ID_ATTRIBUTE,
    EntityFactory,
    default_create,
    default_get_id,
    default_update,
    read_field,
)
from idstore.core.identity import (
    UNRESOLVED,
    InvalidIdentityError,
    identity_key,
    is_primitive_id,
    is_resolved,
)
from idstore.core.reference import ReferenceSource, reference_many, reference_one
from idstore.core.sequence import IndexOutOfRangeError, move_item, moved
from idstore.core.types import ModelId, RawData

__all__ = [
    # Types
    "ModelId",
    "RawData",
    # Identity
    "UNRESOLVED",
    "InvalidIdentityError",
    "identity_key",
    "is_primitive_id",
    "is_resolved",
    # Factory
    "EntityFactory",
    "DEFAULT_ID_ATTRIBUTE",
    "default_create",
    "default_update",
    "default_get_id",
    "read_field",
    # Sequence
    "IndexOutOfRangeError",
    "moved",
    "move_item",
    # Reference
    "ReferenceSource",
    "reference_one",
    "reference_many",
]
