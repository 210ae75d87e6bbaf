"""
In-memory snapshot of server data.

The :class:`StateStore` is the single owner of the user, task and comment
collections. Collections are only ever replaced wholesale by the load
methods; nothing patches them in place, and renderers receive read-only
tuples. A failed load leaves the previous snapshot of that resource intact.

Example:
    >>> store = StateStore(api, priority_names=["Alice"])
    >>> await store.load_all()
    >>> store.user_name("u1")
    'Alice'
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from enum import Enum
from types import MappingProxyType
from typing import Protocol

from deptboard.core.api.client import DeskApi
from deptboard.core.api.models import Comment, Task, User
from deptboard.core.errors import ApiError

logger = logging.getLogger(__name__)


class Resource(str, Enum):
    """Collections held by the store."""

    USERS = "users"
    TASKS = "tasks"
    COMMENTS = "comments"


StoreListener = Callable[[Resource], None]


class StoreView(Protocol):
    """Read-only surface the renderers depend on."""

    @property
    def users(self) -> Sequence[User]: ...

    @property
    def tasks(self) -> Sequence[Task]: ...

    @property
    def comments(self) -> Sequence[Comment]: ...

    def user_name(self, user_id: str | None, default: str = "") -> str: ...


def sort_users(users: Iterable[User], priority_names: Sequence[str]) -> list[User]:
    """
    Order users for display.

    Users whose name appears in ``priority_names`` come first, in that list's
    order; everyone else follows alphabetically by name.

    Args:
        users: Users in server order
        priority_names: Names that lead the roster

    Returns:
        New sorted list
    """
    rank = {name: index for index, name in enumerate(priority_names)}

    def key(user: User) -> tuple[int, int, str, str]:
        if user.name in rank:
            return (0, rank[user.name], "", "")
        return (1, 0, user.name.casefold(), user.name)

    return sorted(users, key=key)


def build_name_index(users: Iterable[User]) -> dict[str, str]:
    """Map user id to display name."""
    return {user.id: user.name for user in users}


class StateStore:
    """
    Process-wide snapshot of users, tasks and comments.

    Attributes:
        users: Users in display order
        tasks: Tasks in server order (ascending due date)
        comments: Comments in server order (newest first)
        user_names: Read-only id -> name index, consistent with ``users``
    """

    def __init__(self, api: DeskApi, priority_names: Sequence[str] = ()) -> None:
        self.api = api
        self.priority_names = list(priority_names)
        self._users: tuple[User, ...] = ()
        self._tasks: tuple[Task, ...] = ()
        self._comments: tuple[Comment, ...] = ()
        self._user_names: dict[str, str] = {}
        self._listeners: list[StoreListener] = []

    @property
    def users(self) -> tuple[User, ...]:
        return self._users

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._tasks

    @property
    def comments(self) -> tuple[Comment, ...]:
        return self._comments

    @property
    def user_names(self) -> Mapping[str, str]:
        return MappingProxyType(self._user_names)

    def subscribe(self, listener: StoreListener) -> None:
        """Call ``listener(resource)`` after every successful load."""
        self._listeners.append(listener)

    def user_name(self, user_id: str | None, default: str = "") -> str:
        """Display name for a user id, or ``default`` if unknown or unset."""
        if not user_id:
            return default
        return self._user_names.get(user_id, default)

    def find_user(self, user_id: str | None) -> User | None:
        return next((user for user in self._users if user.id == user_id), None)

    def find_task(self, task_id: str | None) -> Task | None:
        return next((task for task in self._tasks if task.id == task_id), None)

    async def load_users(self) -> bool:
        """
        Reload the user list.

        Sorts the users and rebuilds the name index before any listener runs.

        Returns:
            True if the snapshot was replaced, False if the load failed
        """
        try:
            page = await self.api.users.list()
        except ApiError as e:
            logger.error("Failed to load users: %s", e)
            return False

        users = sort_users(page.data, self.priority_names)
        self._users = tuple(users)
        self._user_names = build_name_index(users)
        logger.debug("Loaded %d users", len(users))
        self._notify(Resource.USERS)
        return True

    async def load_tasks(self) -> bool:
        """
        Reload the task list.

        Returns:
            True if the snapshot was replaced, False if the load failed
        """
        try:
            page = await self.api.tasks.list()
        except ApiError as e:
            logger.error("Failed to load tasks: %s", e)
            return False

        self._tasks = tuple(page.data)
        logger.debug("Loaded %d tasks", len(self._tasks))
        self._notify(Resource.TASKS)
        return True

    async def load_comments(self) -> bool:
        """
        Reload the comment feed.

        Returns:
            True if the snapshot was replaced, False if the load failed
        """
        try:
            page = await self.api.comments.list()
        except ApiError as e:
            logger.error("Failed to load comments: %s", e)
            return False

        self._comments = tuple(page.data)
        logger.debug("Loaded %d comments", len(self._comments))
        self._notify(Resource.COMMENTS)
        return True

    async def load_all(self) -> bool:
        """
        Load users, tasks and comments, one after another.

        Returns:
            True if all three loads succeeded
        """
        users_ok = await self.load_users()
        tasks_ok = await self.load_tasks()
        comments_ok = await self.load_comments()
        return users_ok and tasks_ok and comments_ok

    def _notify(self, resource: Resource) -> None:
        for listener in list(self._listeners):
            listener(resource)


__all__ = [
    "Resource",
    "StateStore",
    "StoreListener",
    "StoreView",
    "build_name_index",
    "sort_users",
]
