"""Tests for re-entrant ingestion through circular references.

Critical Invariants:
- A factory that re-enters set() for the id being built never yields duplicates
- The innermost completed set() publishes the canonical instance
"""

from idstore import Collection, EntityFactory


def _linked_collections():
    def parse_parent(data):
        data = dict(data)
        data["child"] = children.set(data.pop("child", None))
        return data

    def parse_child(data):
        data = dict(data)
        data["parent"] = parents.set(data.pop("parent", None))
        return data

    parents: Collection[dict] = Collection(
        create=lambda data, f: parse_parent(data),
        update=lambda existing, data, f: existing.update(parse_parent(data)),
    )
    children: Collection[dict] = Collection(
        create=lambda data, f: parse_child(data),
        update=lambda existing, data, f: existing.update(parse_child(data)),
    )
    return parents, children


PAYLOAD = {
    "id": "p1",
    "prop1": "hello",
    "child": {
        "id": "c1",
        "parent": {"id": "p1", "prop2": "world"},
    },
}


def test_circular_reference_adds_one_of_each():
    """CRITICAL: parent → child → parent converges to one instance per id."""
    parents, children = _linked_collections()

    parent = parents.set(PAYLOAD)
    child = children.get("c1")

    assert len(parents) == 1
    assert len(children) == 1
    assert parent["prop1"] == "hello"
    assert parent["prop2"] == "world"
    assert parent["child"] is child
    assert child["parent"] is parent


def test_circular_reference_is_idempotent():
    parents, children = _linked_collections()

    first = parents.set(PAYLOAD)
    second = parents.set(PAYLOAD)

    assert first is second
    assert len(parents) == 1
    assert len(children) == 1
    assert children.get("c1")["parent"] is first


def test_circular_reference_from_child_side():
    parents, children = _linked_collections()

    child = children.set({"id": "c1", "parent": {"id": "p1", "child": {"id": "c1", "x": 1}}})

    assert len(children) == 1
    assert len(parents) == 1
    assert child["x"] == 1
    assert child["parent"] is parents.get("p1")
    assert parents.get("p1")["child"] is child


def test_nested_call_wins_publish_race():
    """CRITICAL: the outer candidate is discarded in favour of the nested one."""
    candidates = []

    def create(data, factory):
        candidate = {"id": data["id"], "depth": data.get("depth", 0)}
        candidates.append(candidate)
        if candidate["depth"] == 0:
            c.set({"id": data["id"], "depth": 1})
        return candidate

    def update(existing, data, factory):
        existing.setdefault("seen", []).append(data.get("depth", 0))
        return existing

    c: Collection[dict] = Collection(EntityFactory(create=create, update=update))

    result = c.set({"id": 7})

    outer, inner = candidates
    assert result is inner
    assert result is not outer
    assert c.get(7) is inner
    assert result["seen"] == [0]
    assert len(c) == 1


def test_reentry_for_other_ids_is_unaffected():
    def create(data, factory):
        for sibling in data.get("siblings", []):
            c.set(sibling)
        return dict(data)

    c: Collection[dict] = Collection(EntityFactory(create=create))

    c.set({"id": 1, "siblings": [{"id": 2}, {"id": 3}]})

    assert [entity["id"] for entity in c] == [2, 3, 1]
    assert c.get(1)["id"] == 1
