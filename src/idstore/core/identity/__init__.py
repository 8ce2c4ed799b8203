"""Entity identity functionality: unresolved marker, id coercion and errors."""

from idstore.core.identity.models import UNRESOLVED, InvalidIdentityError
from idstore.core.identity.operations import (
    PRIMITIVE_ID_TYPES,
    data_key,
    identity_key,
    is_primitive_id,
    is_resolved,
)

__all__ = [
    # Models
    "UNRESOLVED",
    "InvalidIdentityError",
    # Operations
    "PRIMITIVE_ID_TYPES",
    "data_key",
    "identity_key",
    "is_primitive_id",
    "is_resolved",
]
