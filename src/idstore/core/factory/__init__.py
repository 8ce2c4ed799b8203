"""Entity factory contract: strategy record and its defaults."""

from idstore.core.factory.models import CreateFunc, EntityFactory, GetIdFunc, UpdateFunc
from idstore.core.factory.operations import (
    DEFAULT_ID_ATTRIBUTE,
    default_create,
    default_get_id,
    default_update,
    read_field,
)

__all__ = [
    # Models
    "EntityFactory",
    "CreateFunc",
    "UpdateFunc",
    "GetIdFunc",
    # Operations
    "DEFAULT_ID_ATTRIBUTE",
    "default_create",
    "default_update",
    "default_get_id",
    "read_field",
]
