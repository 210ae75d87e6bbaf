"""
Deptboard CLI - show command.

Render one dashboard page in the terminal.
"""

import logging

import typer

from deptboard.cli.session import console, run_session
from deptboard.core.app import DeskApp
from deptboard.core.router import Page, RenderedPage, resolve_page
from deptboard.dashboard import TerminalRenderer

logger = logging.getLogger(__name__)


def show(
    page: str = typer.Argument(
        Page.DASHBOARD.value,
        help="Page to show: dashboard, tasks, calendar, kanban, staff, stats, community",
    ),
    assignee: str | None = typer.Option(
        None,
        "--assignee",
        "-a",
        help="Task list: only tasks assigned to this user ID",
    ),
    status: str | None = typer.Option(
        None,
        "--status",
        "-s",
        help="Task list: only tasks with this status",
    ),
    search: str | None = typer.Option(
        None,
        "--search",
        "-q",
        help="Task list: case-insensitive title search",
    ),
) -> None:
    """
    Show a dashboard page.

    Examples:
        deptboard show                          # Overview with due-soon tasks
        deptboard show kanban                   # Kanban board
        deptboard show tasks --status pending   # Filtered task list
        deptboard show tasks -q budget          # Title search
    """
    target = resolve_page(page)
    if target is None:
        choices = ", ".join(p.value for p in Page)
        console.print(f"[red]Error:[/red] Unknown page '{page}'. Choose from: {choices}")
        raise typer.Exit(1)

    renderer = TerminalRenderer(console)

    async def _show(desk: DeskApp) -> RenderedPage:
        desk.router.set_task_filters(assignee=assignee, status=status, search=search)
        return desk.router.show_page(target)

    result = run_session(_show, target=renderer)
    logger.debug("Rendered %s", result.page)
    renderer.print_page()
