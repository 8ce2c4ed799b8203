"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from idstore import Collection


@pytest.fixture
def collection():
    """Fresh Collection with default strategies."""
    return Collection()


@pytest.fixture
def people():
    """Collection of three people, two of them sharing a gender."""
    c = Collection()
    c.set(
        [
            {"id": 1, "name": "Jeff", "gender": "male"},
            {"id": 2, "name": "Amanda", "gender": "female"},
            {"id": 3, "name": "Will", "gender": "male"},
        ]
    )
    return c
