"""Identity-indexed collections."""

from idstore.collection.collection import Collection

__all__ = [
    "Collection",
]
