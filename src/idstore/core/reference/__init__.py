"""Reference resolution: belongs-to and has-many lookups between collections."""

from idstore.core.reference.models import ReferenceSource
from idstore.core.reference.operations import reference_many, reference_one

__all__ = [
    "ReferenceSource",
    "reference_one",
    "reference_many",
]
