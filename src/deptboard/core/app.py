"""
Application wiring.

:class:`DeskApp` owns one API client, one store, one router and the three
form controllers, and runs the startup sequence: load users, tasks and
comments one after another, then show the dashboard.

Example:
    >>> async with DeskApp.from_config(load_config(), target=renderer) as app:
    ...     await app.startup()
    ...     app.router.show_page("kanban")
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from types import TracebackType

import httpx

from deptboard.core.api.client import DeskApi
from deptboard.core.config.models import DeskConfig
from deptboard.core.forms import (
    CommentFormController,
    DeclinePrompter,
    Prompter,
    StaffFormController,
    TaskFormController,
)
from deptboard.core.router import Page, RenderedPage, RenderTarget, ViewRouter
from deptboard.core.store import StateStore
from deptboard.utils.dates import now_local

logger = logging.getLogger(__name__)


class DeskApp:
    """
    One dashboard session.

    Attributes:
        api: REST client
        store: Snapshot of server data
        router: Page router bound to ``target``
        task_form: Task dialog controller
        staff_form: Staff dialog controller
        comment_form: Comment box controller
        prompter: Confirmation and alert channel. Without one, every
            confirmation is declined, so nothing gets deleted
    """

    def __init__(
        self,
        api: DeskApi,
        config: DeskConfig | None = None,
        target: RenderTarget | None = None,
        prompter: Prompter | None = None,
        *,
        clock: Callable[[], datetime] = now_local,
    ) -> None:
        self.config = config or DeskConfig()
        self.api = api
        self.prompter: Prompter = prompter or DeclinePrompter()
        self.store = StateStore(api, priority_names=self.config.staff.priority_names)
        self.router = ViewRouter(self.store, target, config=self.config, clock=clock)
        self.task_form = TaskFormController(self.store, self.prompter, clock=clock)
        self.staff_form = StaffFormController(self.store, self.router, self.prompter)
        self.comment_form = CommentFormController(self.store, self.prompter)

    @classmethod
    def from_config(
        cls,
        config: DeskConfig,
        target: RenderTarget | None = None,
        prompter: Prompter | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], datetime] = now_local,
    ) -> DeskApp:
        api = DeskApi.from_config(config, transport=transport)
        return cls(api, config, target, prompter, clock=clock)

    async def startup(self) -> RenderedPage:
        """Load every collection, then show the dashboard."""
        ok = await self.store.load_all()
        if not ok:
            logger.warning("Started with an incomplete snapshot")
        return self.router.show_page(Page.DASHBOARD)

    async def aclose(self) -> None:
        await self.api.aclose()

    async def __aenter__(self) -> DeskApp:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


__all__ = ["DeskApp"]
