"""Tests for the entity factory contract and its defaults."""

from dataclasses import dataclass

import pytest
from pydantic import BaseModel, ConfigDict

from idstore.core.factory import (
    EntityFactory,
    default_create,
    default_get_id,
    default_update,
    read_field,
)
from idstore.core.identity import UNRESOLVED


@dataclass
class Point:
    id: int
    x: float = 0.0


class Account(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    id: int
    owner: str = ""


def test_default_create_returns_input():
    data = {"id": 1}
    assert default_create(data, EntityFactory()) is data


def test_default_update_merges_into_mapping():
    existing = {"id": 1, "a": 1}
    result = default_update(existing, {"id": 1, "b": 2}, EntityFactory())
    assert result is existing
    assert existing == {"id": 1, "a": 1, "b": 2}


def test_default_update_sets_attributes_on_objects():
    point = Point(id=1)
    default_update(point, {"x": 2.5}, EntityFactory())
    assert point.x == 2.5


def test_default_update_on_pydantic_entity_validates():
    account = Account(id=1)
    default_update(account, {"owner": "ann"}, EntityFactory())
    assert account.owner == "ann"


def test_default_get_id_reads_mapping_and_attributes():
    factory = EntityFactory()
    assert default_get_id({"id": 7}, factory) == 7
    assert default_get_id(Point(id=8), factory) == 8
    assert default_get_id(Account(id=9), factory) == 9


def test_default_get_id_missing_is_unresolved():
    assert default_get_id({}, EntityFactory()) is UNRESOLVED
    assert default_get_id({"id": None}, EntityFactory()) is None


def test_default_get_id_uses_id_attribute():
    factory = EntityFactory(id_attribute="_id")
    assert default_get_id({"_id": "x", "id": "y"}, factory) == "x"


def test_empty_id_attribute_falls_back_to_id():
    factory = EntityFactory(id_attribute="")
    assert default_get_id({"id": 3}, factory) == 3


def test_read_field_default():
    assert read_field({}, "missing", default=5) == 5
    assert read_field(object(), "missing") is UNRESOLVED


def test_with_overrides_does_not_mutate_defaults():
    """CRITICAL: per-call overrides merge on top without touching defaults."""
    base = EntityFactory(id_attribute="id", context={"a": 1})
    derived = base.with_overrides(id_attribute="key", b=2)

    assert derived.id_attribute == "key"
    assert derived.option("a") == 1
    assert derived.option("b") == 2
    assert base.id_attribute == "id"
    assert base.option("b") is None


def test_with_overrides_none_keeps_field():
    base = EntityFactory()
    assert base.with_overrides(create=None).create is default_create


def test_with_overrides_without_arguments_is_identity():
    base = EntityFactory()
    assert base.with_overrides() is base


def test_with_overrides_merges_context_mapping():
    base = EntityFactory().with_overrides(context={"a": 1})
    assert base.with_overrides(context={"b": 2}).context == {"a": 1, "b": 2}


def test_factory_is_frozen():
    with pytest.raises(AttributeError):
        EntityFactory().id_attribute = "other"  # type: ignore[misc]
