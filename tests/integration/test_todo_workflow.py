"""End-to-end: todos embedding their creators, normalized into two collections."""

import copy
import sys

sys.path.insert(0, "src")

from pydantic import BaseModel

from idstore import (
    Collection,
    EntityFactory,
    Model,
    Store,
    StoreSettings,
    create_root_store,
    reference_many,
    reference_one,
)

TODOS = [
    {"id": 1, "text": "Install", "creator": {"id": 1, "name": "Jeff"}},
    {"id": 2, "text": "Configure", "creator": {"id": 2, "name": "Amanda"}},
    {"id": 3, "text": "Ship", "creator": {"id": 2, "handle": "@amanda"}},
]


def test_plain_collections():
    """Embedded creators collapse to two users; has-many finds both todos."""
    users = Collection()

    def create_todo(data, factory):
        data = dict(data)
        creator = users.set(data.pop("creator"))
        data["creator_id"] = creator["id"]
        return data

    todos = Collection(create=create_todo)
    created = todos.set(copy.deepcopy(TODOS))

    assert len(users) == 2
    assert {user["id"] for user in users} == {1, 2}
    assert users.get(2) == {"id": 2, "name": "Amanda", "handle": "@amanda"}

    by_amanda = reference_many(todos, 2, "creator_id")
    assert by_amanda == [created[1], created[2]]
    assert reference_one(users, created[0]["creator_id"])["name"] == "Jeff"


class Creator(BaseModel):
    id: int
    name: str | None = None
    handle: str | None = None


def test_pydantic_entities():
    """Entities are opaque: pydantic models work through the factory."""
    users = Collection(EntityFactory(create=lambda data, f: Creator(**data)))
    todos = Collection(
        create=lambda data, f: {**data, "creator": users.set(data["creator"])},
        update=lambda existing, data, f: existing.update(
            {**data, "creator": users.set(data["creator"])}
        ),
    )
    todos.set(copy.deepcopy(TODOS))
    todos.set(copy.deepcopy(TODOS))

    assert len(todos) == 3
    assert len(users) == 2
    amanda = users.get("2")
    assert amanda.name == "Amanda"
    assert amanda.handle == "@amanda"
    assert todos.get(2)["creator"] is amanda
    assert todos.get(3)["creator"] is amanda
    assert reference_many(todos, [amanda], "creator") == [todos.get(2), todos.get(3)]


class User(Model):
    pass


class Todo(Model):
    def parse(self, attributes, **options):
        attributes = dict(attributes)
        creator = self.root_store.user_store.users.set(attributes.pop("creator"))
        return {**attributes, "creator": creator, "creator_id": creator.id}

    @property
    def creator_todos(self):
        return reference_many(self.root_store.todo_store.todos, self.creator_id, "creator_id")


class UserStore(Store):
    def __init__(self, root_store=None):
        super().__init__(root_store, settings=StoreSettings(_env_file=None))
        self.users = self.collection(User)


class TodoStore(Store):
    def __init__(self, root_store=None):
        super().__init__(root_store, settings=StoreSettings(_env_file=None))
        self.todos = self.collection(Todo)


def test_stores_with_root_store():
    root = create_root_store({"user_store": UserStore, "todo_store": TodoStore})

    todos = root.todo_store.todos.set(copy.deepcopy(TODOS))
    users = root.user_store.users

    assert len(users) == 2
    assert sorted(user.id for user in users) == [1, 2]
    assert todos[1].creator is todos[2].creator
    assert todos[2].creator.name == "Amanda"
    assert todos[1].creator_todos == [todos[1], todos[2]]
    assert reference_one(users, todos[0].creator_id) is todos[0].creator
