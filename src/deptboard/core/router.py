"""
Page routing and render dispatch.

:class:`ViewRouter` is the single place that changes the visible page.
``show_page`` records the current page, tells the render target which
section to show, which navigation item to highlight and which title to
display, and then runs exactly one renderer. Because the page and the
navigation highlight are set by the same call they cannot drift apart.

The router also listens to the store: when a resource reloads and the current
page depends on it, the page is rendered again from the new snapshot.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Protocol

from deptboard.core.config.models import DeskConfig
from deptboard.core.store import Resource, StateStore
from deptboard.core.views import (
    build_calendar,
    build_comments,
    build_dashboard,
    build_kanban,
    build_staff,
    build_stats,
    build_task_list,
)
from deptboard.core.views.models import PageView, TaskFilters
from deptboard.utils.dates import now_local

logger = logging.getLogger(__name__)


class Page(str, Enum):
    """Page sections of the dashboard."""

    DASHBOARD = "dashboard"
    TASKS = "tasks"
    CALENDAR = "calendar"
    NAVER_CALENDAR = "naver-calendar"
    KANBAN = "kanban"
    STAFF = "staff"
    STATS = "stats"
    FILES = "files"
    COMMUNITY = "community"


PAGE_TITLES = {
    Page.DASHBOARD: "Dashboard",
    Page.TASKS: "All Tasks",
    Page.CALENDAR: "Task Calendar",
    Page.NAVER_CALENDAR: "Office Schedule",
    Page.KANBAN: "Kanban Board",
    Page.STAFF: "Staff Responsibilities",
    Page.STATS: "Workload Analysis",
    Page.FILES: "Department Files",
    Page.COMMUNITY: "Open Comments",
}

FALLBACK_TITLE = "Department Dashboard"

# Pages re-rendered when a resource reloads while they are visible
PAGE_DEPENDENCIES: dict[Resource, frozenset[Page]] = {
    Resource.USERS: frozenset(
        {Page.DASHBOARD, Page.TASKS, Page.CALENDAR, Page.KANBAN, Page.STAFF, Page.STATS}
    ),
    Resource.TASKS: frozenset(
        {Page.DASHBOARD, Page.TASKS, Page.CALENDAR, Page.KANBAN, Page.STATS}
    ),
    Resource.COMMENTS: frozenset({Page.COMMUNITY}),
}


def resolve_page(page_id: str | Page) -> Page | None:
    """Page for an id, or None if the id names no page."""
    try:
        return Page(page_id)
    except ValueError:
        return None


def page_title(page: Page | None) -> str:
    if page is None:
        return FALLBACK_TITLE
    return PAGE_TITLES.get(page, FALLBACK_TITLE)


class RenderTarget(Protocol):
    """
    Environment-specific output of the router.

    A browser adapter would toggle sections and swap container content; the
    terminal adapter in :mod:`deptboard.dashboard` builds Rich renderables.
    """

    def show_section(self, page: Page | None) -> None:
        """Hide every section, then show ``page`` (nothing when None)."""
        ...

    def highlight_nav(self, page: Page | None) -> None:
        ...

    def set_title(self, title: str) -> None:
        ...

    def render(self, page: Page, view: PageView) -> None:
        """Replace the content of the page's container with ``view``."""
        ...


class NullRenderTarget:
    """Render target that ignores everything."""

    def show_section(self, page: Page | None) -> None:
        pass

    def highlight_nav(self, page: Page | None) -> None:
        pass

    def set_title(self, title: str) -> None:
        pass

    def render(self, page: Page, view: PageView) -> None:
        pass


@dataclass(frozen=True)
class RenderedPage:
    """Outcome of one ``show_page`` call."""

    page: Page | None
    title: str
    view: PageView | None = None


class ViewRouter:
    """
    Shows one page at a time and renders it from the store.

    Example:
        >>> router = ViewRouter(store)
        >>> result = router.show_page("kanban")
        >>> result.title
        'Kanban Board'
        >>> router.current_page
        <Page.KANBAN: 'kanban'>
    """

    def __init__(
        self,
        store: StateStore,
        target: RenderTarget | None = None,
        *,
        config: DeskConfig | None = None,
        clock: Callable[[], datetime] = now_local,
    ) -> None:
        self.store = store
        self.target: RenderTarget = target or NullRenderTarget()
        self.config = config or DeskConfig()
        self.clock = clock
        self._current: Page | None = None
        self._filters = TaskFilters()
        self._renderers: dict[Page, Callable[[], PageView]] = {
            Page.DASHBOARD: self._render_dashboard,
            Page.TASKS: self._render_task_list,
            Page.CALENDAR: self._render_calendar,
            Page.KANBAN: self._render_kanban,
            Page.STAFF: self._render_staff,
            Page.STATS: self._render_stats,
            Page.COMMUNITY: self._render_comments,
        }
        store.subscribe(self._on_store_change)

    @property
    def current_page(self) -> Page | None:
        return self._current

    @property
    def task_filters(self) -> TaskFilters:
        return self._filters

    def show_page(self, page_id: str | Page) -> RenderedPage:
        """
        Switch to a page and render it.

        Unknown ids show no section, get the fallback title and render
        nothing. Static pages (files, the external schedule) have a title but
        no renderer.

        Args:
            page_id: Page identifier such as "kanban"

        Returns:
            RenderedPage with the page, the title and the view-model (if any)
        """
        page = resolve_page(page_id)
        title = page_title(page)

        self.target.show_section(page)
        self.target.highlight_nav(page)
        self.target.set_title(title)
        self._current = page

        if page is None:
            logger.debug("Unknown page id %r", page_id)
            return RenderedPage(page=None, title=title)

        renderer = self._renderers.get(page)
        if renderer is None:
            return RenderedPage(page=page, title=title)

        view = renderer()
        self.target.render(page, view)
        return RenderedPage(page=page, title=title, view=view)

    def refresh(self) -> RenderedPage | None:
        """Render the current page again; None when no page is showing."""
        if self._current is None:
            return None
        return self.show_page(self._current)

    def set_task_filters(
        self,
        *,
        assignee: str | None = None,
        status: str | None = None,
        search: str | None = None,
    ) -> TaskFilters:
        """
        Update the task list filter controls.

        Arguments left as None keep their current value; pass "" to clear.
        The task list is re-rendered if it is the current page.
        """
        changes = {
            key: value
            for key, value in (("assignee", assignee), ("status", status), ("search", search))
            if value is not None
        }
        self._filters = self._filters.model_copy(update=changes)
        if self._current == Page.TASKS:
            self.show_page(Page.TASKS)
        return self._filters

    def _on_store_change(self, resource: Resource) -> None:
        if self._current in PAGE_DEPENDENCIES.get(resource, frozenset()):
            logger.debug("Re-rendering %s after %s reload", self._current, resource.value)
            self.refresh()

    def _render_dashboard(self) -> PageView:
        return build_dashboard(
            self.store,
            now=self.clock(),
            window_days=self.config.dashboard.urgent_window_days,
            list_size=self.config.dashboard.urgent_list_size,
        )

    def _render_task_list(self) -> PageView:
        return build_task_list(self.store, self._filters)

    def _render_calendar(self) -> PageView:
        return build_calendar(self.store)

    def _render_kanban(self) -> PageView:
        return build_kanban(self.store)

    def _render_staff(self) -> PageView:
        return build_staff(self.store, self.config.staff.manager_positions)

    def _render_stats(self) -> PageView:
        return build_stats(self.store)

    def _render_comments(self) -> PageView:
        return build_comments(self.store)


__all__ = [
    "FALLBACK_TITLE",
    "NullRenderTarget",
    "PAGE_DEPENDENCIES",
    "PAGE_TITLES",
    "Page",
    "RenderTarget",
    "RenderedPage",
    "ViewRouter",
    "page_title",
    "resolve_page",
]
