"""Todos and their creators, loaded from overlapping API responses.

Each todo embeds its creator; the user store ends up with one User per
creator id, shared by every todo that references it.
"""

from datetime import datetime
from typing import Any

from idstore import Model, Store, create_root_store, reference_many


def get_todos() -> list[dict[str, Any]]:
    """Stand-in for GET /api/todos."""
    return [
        {
            "id": "abcd123",
            "text": "Install idstore",
            "completed": False,
            "date_created": "2017-02-19T14:30:00",
            "creator": {"_id": 1, "name": "Michel"},
        },
        {
            "id": "123abcd",
            "text": "Wire up the stores",
            "completed": True,
            "date_created": "2017-02-19T14:54:00",
            "creator": {"_id": 2, "name": "Jeff"},
        },
        {
            "id": "a1b2c3",
            "text": "Build awesome things",
            "completed": False,
            "date_created": "2017-02-19T15:22:00",
            "creator": {"_id": 2, "name": "Jeff"},
        },
    ]


def get_user(user_id: int) -> dict[str, Any]:
    """Stand-in for GET /api/users/:id, which returns more fields."""
    return {"_id": user_id, "name": "Jeff", "twitter_handle": "@jeffijoe"}


class User(Model):
    @property
    def todos(self) -> list["Todo"]:
        return reference_many(self.root_store.todo_store.todos, self._id, "creator_id")


class Todo(Model):
    def parse(self, attributes, **options):
        # Creators live in their own store.
        attributes = dict(attributes)
        creator = self.root_store.user_store.users.set(attributes.pop("creator"))
        return {
            **attributes,
            "creator": creator,
            "creator_id": creator._id,
            "date_created": datetime.fromisoformat(attributes["date_created"]),
        }


class UserStore(Store):
    def __init__(self, root_store=None):
        super().__init__(root_store)
        self.users = self.collection(User, id_attribute="_id")

    def fetch_user(self, user_id: int) -> User:
        return self.users.set(get_user(user_id))


class TodoStore(Store):
    def __init__(self, root_store=None):
        super().__init__(root_store)
        self.todos = self.collection(Todo)

    def fetch_todos(self) -> list[Todo]:
        return self.todos.set(get_todos())


def main() -> None:
    root = create_root_store({"user_store": UserStore, "todo_store": TodoStore})

    todos = root.todo_store.fetch_todos()
    print(f"Todos: {len(root.todo_store.todos)}, users: {len(root.user_store.users)}")

    assert todos[1].creator is todos[2].creator
    jeff = root.user_store.fetch_user(2)
    assert jeff is todos[1].creator
    print(f"{jeff.name} ({jeff.twitter_handle}) created {len(jeff.todos)} todos:")
    for todo in jeff.todos:
        print(f"  - {todo.text} ({todo.date_created:%Y-%m-%d %H:%M})")


if __name__ == "__main__":
    main()
