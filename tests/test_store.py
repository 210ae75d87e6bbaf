"""
Tests for the state store.
"""

import pytest

from deptboard.core.api.models import User
from deptboard.core.store import Resource, StateStore, build_name_index, sort_users


class TestSortUsers:
    def test_priority_names_first_in_given_order(self):
        users = [
            User(id="1", name="Zed"),
            User(id="2", name="이혜진"),
            User(id="3", name="Amy"),
            User(id="4", name="강연석"),
        ]
        ordered = sort_users(users, ["강연석", "이진중", "이혜진"])
        assert [u.name for u in ordered] == ["강연석", "이혜진", "Amy", "Zed"]

    def test_remainder_alphabetical(self):
        users = [User(id="1", name="carol"), User(id="2", name="Bob"), User(id="3", name="alice")]
        assert [u.name for u in sort_users(users, [])] == ["alice", "Bob", "carol"]

    def test_does_not_mutate_input(self):
        users = [User(id="1", name="B"), User(id="2", name="A")]
        sort_users(users, [])
        assert [u.name for u in users] == ["B", "A"]


def test_build_name_index():
    assert build_name_index([User(id="u1", name="Alice")]) == {"u1": "Alice"}


class TestLoads:
    @pytest.mark.asyncio
    async def test_load_all(self, store):
        assert await store.load_all() is True

        assert [u.name for u in store.users] == ["강연석", "Alice", "Bob"]
        assert len(store.tasks) == 5
        assert [c.id for c in store.comments] == ["c1", "c2"]
        assert store.user_name("u1") == "Alice"
        assert store.user_names == {"u1": "Alice", "u2": "Bob", "u3": "강연석"}

    @pytest.mark.asyncio
    async def test_loads_are_sequential_in_order(self, store, backend):
        await store.load_all()
        paths = [request.url.path for request in backend.requests]
        assert paths == ["/tables/users", "/tables/tasks", "/tables/comments"]

    @pytest.mark.asyncio
    async def test_collections_are_read_only(self, store):
        await store.load_all()
        assert isinstance(store.tasks, tuple)
        with pytest.raises(TypeError):
            store.user_names["u9"] = "Eve"  # type: ignore[index]

    @pytest.mark.asyncio
    async def test_failed_load_keeps_previous_snapshot(self, store, backend, caplog):
        await store.load_all()
        before = store.tasks

        backend.fail[("GET", "tasks")] = 500
        assert await store.load_tasks() is False

        assert store.tasks is before
        assert "Failed to load tasks" in caplog.text

    @pytest.mark.asyncio
    async def test_failed_first_load_leaves_empty(self, store, backend):
        backend.fail[("GET", "users")] = 503
        assert await store.load_all() is False
        assert store.users == ()
        assert len(store.tasks) == 5

    @pytest.mark.asyncio
    async def test_reload_replaces_wholesale(self, store, backend):
        await store.load_users()
        first = store.users
        backend.tables["users"].append({"id": "u4", "name": "Dana"})

        await store.load_users()

        assert store.users is not first
        assert "Dana" in [u.name for u in store.users]
        assert store.user_name("u4") == "Dana"

    @pytest.mark.asyncio
    async def test_listeners_see_consistent_index(self, store):
        seen = []

        def listener(resource):
            seen.append((resource, store.user_name("u1"), len(store.users)))

        store.subscribe(listener)
        await store.load_users()

        assert seen == [(Resource.USERS, "Alice", 3)]

    @pytest.mark.asyncio
    async def test_listeners_not_called_on_failure(self, store, backend):
        calls = []
        store.subscribe(calls.append)
        backend.fail[("GET", "comments")] = 500

        await store.load_comments()

        assert calls == []


class TestLookups:
    @pytest.mark.asyncio
    async def test_user_name_defaults(self, store):
        await store.load_users()
        assert store.user_name(None, "Unassigned") == "Unassigned"
        assert store.user_name("ghost", "-") == "-"

    @pytest.mark.asyncio
    async def test_find(self, store):
        await store.load_all()
        assert store.find_task("t2").title == "Payroll review"
        assert store.find_task("nope") is None
        assert store.find_user("u2").position == "Officer"

    @pytest.mark.asyncio
    async def test_earlier_tuple_unchanged_by_reload(self, store, backend):
        await store.load_all()
        before = store.tasks

        backend.tables["tasks"].clear()
        await store.load_tasks()

        assert len(before) == 5
        assert store.tasks == ()
        assert store.user_name("u2") == "Bob"
