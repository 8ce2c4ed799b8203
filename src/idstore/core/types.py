"""Core type definitions for idstore."""

from collections.abc import Mapping
from datetime import date
from typing import Any, TypeAlias
from uuid import UUID

ModelId: TypeAlias = str | int | float | date | UUID
"""Primitive values accepted as entity ids.

Whatever an id accessor returns is coerced with `str()` before indexing, so
`1` and `"1"` address the same entity.
"""

RawData: TypeAlias = Mapping[str, Any]
"""Untyped key-value record as received from the outside world (e.g. decoded JSON)."""
