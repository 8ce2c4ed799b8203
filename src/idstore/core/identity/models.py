"""Identity models.

Usage:
    if data_id is UNRESOLVED:
        return None  # not identifiable yet
    if data_id is None:
        raise InvalidIdentityError(data_id)
"""

from typing import Final


class _Unresolved:
    """Marker type for an id that cannot be determined yet."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "UNRESOLVED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNRESOLVED"


UNRESOLVED: Final = _Unresolved()
"""Returned by id accessors when a record carries no id (yet).

Distinct from `None`: a missing id is an expected transient state, while an
explicit `None` id is a data-integrity violation.
"""


class InvalidIdentityError(TypeError):
    """Raised when input data resolves to a `None` id."""

    def __init__(self, value: object = None):
        super().__init__(f"{value!r} is not a valid ID")
        self.value = value
