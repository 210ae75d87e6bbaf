"""
Pytest configuration and shared fixtures.

Provides sample users/tasks/comments, an in-memory fake backend served through
httpx.MockTransport, a recording prompter, and a fixed clock.
"""

import json
from datetime import datetime, timezone
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from deptboard.core.api.client import DeskApi
from deptboard.core.api.models import Comment, Task, User
from deptboard.core.config import clear_cache
from deptboard.core.config.models import DeskConfig
from deptboard.core.store import StateStore, build_name_index, sort_users

NOW = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)


# ==============================================================================
# Fakes
# ==============================================================================


class StaticStore:
    """Read-only store over fixed collections, for the pure view builders."""

    def __init__(
        self,
        users: tuple[User, ...] = (),
        tasks: tuple[Task, ...] = (),
        comments: tuple[Comment, ...] = (),
    ) -> None:
        self.users = tuple(users)
        self.tasks = tuple(tasks)
        self.comments = tuple(comments)
        self._names = build_name_index(self.users)

    def user_name(self, user_id: str | None, default: str = "") -> str:
        if not user_id:
            return default
        return self._names.get(user_id, default)


class FakeBackend:
    """
    In-memory stand-in for the department REST backend.

    Records every request and passes it to each of ``observers``. ``fail``
    maps ``(method, resource)`` to a status code the backend answers with
    instead of doing the work.
    """

    def __init__(
        self,
        users: list[dict[str, Any]] | None = None,
        tasks: list[dict[str, Any]] | None = None,
        comments: list[dict[str, Any]] | None = None,
        prefix: str = "tables",
    ):
        self.tables: dict[str, list[dict[str, Any]]] = {
            "users": [dict(row) for row in users or []],
            "tasks": [dict(row) for row in tasks or []],
            "comments": [dict(row) for row in comments or []],
        }
        self.prefix = prefix
        self.requests: list[httpx.Request] = []
        self.fail: dict[tuple[str, str], int] = {}
        self.observers: list[Callable[[httpx.Request], None]] = []
        self._next_id = 100

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def requests_for(self, method: str, resource: str) -> list[httpx.Request]:
        return [
            request
            for request in self.requests
            if request.method == method and self._route(request)[0] == resource
        ]

    def _route(self, request: httpx.Request) -> tuple[str, str | None]:
        parts = request.url.path.strip("/").split("/")
        if self.prefix:
            assert parts[0] == self.prefix, f"unexpected path {request.url.path}"
            parts = parts[1:]
        return parts[0], parts[1] if len(parts) > 1 else None

    def _find(self, resource: str, record_id: str) -> dict[str, Any] | None:
        return next(
            (row for row in self.tables[resource] if str(row["id"]) == record_id), None
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        for observer in self.observers:
            observer(request)
        resource, record_id = self._route(request)

        if status := self.fail.get((request.method, resource)):
            return httpx.Response(status, text="backend exploded")

        rows = self.tables[resource]

        if request.method == "GET" and record_id is None:
            data = list(rows)
            sort = request.url.params.get("sort")
            if sort:
                field = sort.lstrip("-")
                data.sort(key=lambda row: row.get(field) or "", reverse=sort.startswith("-"))
            limit = int(request.url.params.get("limit", len(data)))
            return httpx.Response(200, json={"data": data[:limit], "total": len(rows)})

        if request.method == "GET":
            row = self._find(resource, record_id)
            if row is None:
                return httpx.Response(404, text="not found")
            return httpx.Response(200, json=row)

        if request.method == "POST":
            self._next_id += 1
            row = {**json.loads(request.content), "id": f"{resource[0]}{self._next_id}"}
            rows.append(row)
            return httpx.Response(201, json=row)

        row = self._find(resource, record_id or "")
        if row is None:
            return httpx.Response(404, text="not found")

        if request.method == "PUT":
            row.update(json.loads(request.content))
            return httpx.Response(200, json=row)

        if request.method == "DELETE":
            rows.remove(row)
            return httpx.Response(204)

        return httpx.Response(405)


class RecordingPrompter:
    """Prompter that answers confirmations with ``answer`` and records everything."""

    def __init__(self, answer: bool = True):
        self.answer = answer
        self.confirms: list[str] = []
        self.alerts: list[str] = []

    def confirm(self, message: str) -> bool:
        self.confirms.append(message)
        return self.answer

    def alert(self, message: str) -> None:
        self.alerts.append(message)


# ==============================================================================
# Sample Data Fixtures
# ==============================================================================


@pytest.fixture
def sample_users() -> list[dict[str, Any]]:
    """Three staff members; one of them is in the default priority list."""
    return [
        {"id": "u2", "name": "Bob", "position": "Officer", "role_description": "Payroll\nSupplies"},
        {"id": "u1", "name": "Alice", "position": "Manager", "role_description": "Budget, Hiring"},
        {"id": "u3", "name": "강연석", "position": "처장", "role_description": None},
    ]


@pytest.fixture
def sample_tasks() -> list[dict[str, Any]]:
    """Tasks around NOW (2024-05-01 09:00 UTC)."""
    return [
        {
            "id": "t1",
            "title": "Budget report",
            "assignee_id": "u1",
            "due_date": "2024-05-03T12:00:00Z",
            "priority": "high",
            "status": "pending",
            "requester_name": "Director",
            "description": "Quarterly numbers",
        },
        {
            "id": "t2",
            "title": "Payroll review",
            "assignee_id": "u2",
            "due_date": "2024-05-02T12:00:00Z",
            "priority": "medium",
            "status": "in_progress",
        },
        {
            "id": "t3",
            "title": "Archive budget files",
            "assignee_id": "u1",
            "due_date": "2024-04-20T12:00:00Z",
            "priority": "low",
            "status": "completed",
        },
        {
            "id": "t4",
            "title": "Order supplies",
            "assignee_id": None,
            "due_date": None,
            "priority": "low",
            "status": "hold",
        },
        {
            "id": "t5",
            "title": "Budget forecast",
            "assignee_id": "u2",
            "due_date": "2024-05-20T12:00:00Z",
            "priority": "medium",
            "status": "pending",
        },
    ]


@pytest.fixture
def sample_comments() -> list[dict[str, Any]]:
    return [
        {
            "id": "c1",
            "author": "Kim",
            "content": "Meeting moved to 3pm",
            "created_at": "2024-05-01T12:00:00.000Z",
        },
        {"id": "c2", "author": None, "content": "Hello", "created_at": "2024-04-30T12:00:00.000Z"},
    ]


@pytest.fixture
def static_store() -> type[StaticStore]:
    """Factory for hand-built read-only stores."""
    return StaticStore


@pytest.fixture
def store_view(sample_users, sample_tasks, sample_comments) -> StaticStore:
    """Loaded-store equivalent for the pure view builders."""
    users = sort_users([User(**row) for row in sample_users], ["강연석"])
    return StaticStore(
        users=tuple(users),
        tasks=tuple(Task(**row) for row in sample_tasks),
        comments=tuple(Comment(**row) for row in sample_comments),
    )


# ==============================================================================
# Backend Fixtures
# ==============================================================================


@pytest.fixture
def backend(sample_users, sample_tasks, sample_comments) -> FakeBackend:
    return FakeBackend(sample_users, sample_tasks, sample_comments)


@pytest.fixture
def desk_config() -> DeskConfig:
    return DeskConfig(base_url="http://desk.test", staff={"priority_names": ["강연석"]})


@pytest.fixture
def api(backend, desk_config) -> DeskApi:
    return DeskApi.from_config(desk_config, transport=backend.transport())


@pytest.fixture
def store(api, desk_config) -> StateStore:
    return StateStore(api, priority_names=desk_config.staff.priority_names)


@pytest.fixture
def prompter() -> RecordingPrompter:
    return RecordingPrompter()


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    """Keep real user config and DEPTBOARD_* variables out of every test."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for name in ("DEPTBOARD_BASE_URL", "DEPTBOARD_API_PATH", "DEPTBOARD_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    clear_cache()
    yield
    clear_cache()
