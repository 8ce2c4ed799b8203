"""Identity key coercion."""

from __future__ import annotations

from datetime import date
from uuid import UUID

from idstore.core.identity.models import UNRESOLVED, InvalidIdentityError

PRIMITIVE_ID_TYPES: tuple[type, ...] = (str, int, float, date, UUID)


def is_resolved(value: object) -> bool:
    """Check if an accessor result can be turned into an identity key.

    Args:
        value: Raw result of `get_data_id` / `get_model_id`.

    Returns:
        False for `UNRESOLVED` and `None`, True otherwise.
    """
    return value is not UNRESOLVED and value is not None


def identity_key(value: object) -> str:
    """Coerce a resolved id to its canonical string key.

    Args:
        value: Resolved id, e.g. `1`, `"1"` or a `UUID`.

    Returns:
        `str(value)`.

    Raises:
        InvalidIdentityError: If value is `None` or `UNRESOLVED`.
    """
    if not is_resolved(value):
        raise InvalidIdentityError(value)
    return str(value)


def data_key(value: object) -> str | None:
    """Resolve a `get_data_id` result to a key, enforcing the null-id rule.

    Args:
        value: Result of `get_data_id`.

    Returns:
        Identity key, or None when the id is `UNRESOLVED`.

    Raises:
        InvalidIdentityError: If value is `None`.
    """
    if value is UNRESOLVED:
        return None
    if value is None:
        raise InvalidIdentityError(value)
    return str(value)


def is_primitive_id(value: object) -> bool:
    """Check if value is a bare id rather than an entity reference."""
    return isinstance(value, PRIMITIVE_ID_TYPES)
