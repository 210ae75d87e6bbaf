"""
Deptboard CLI - task commands.

Create, inspect, edit and delete tasks through the task form.
"""

import typer
from rich.table import Table

from deptboard.cli.session import ConsolePrompter, console, finish, run_session
from deptboard.core.api.models import TaskPriority, TaskStatus
from deptboard.core.app import DeskApp
from deptboard.core.forms.task import due_date_from_click
from deptboard.core.views.labels import priority_label, status_label
from deptboard.utils.dates import format_datetime

app = typer.Typer(
    name="task",
    help="Create, edit and delete tasks",
    no_args_is_help=True,
)


def _due(value: str | None) -> str | None:
    """Accept YYYY-MM-DD or YYYY-MM-DDTHH:MM on the command line."""
    return due_date_from_click(value) if value else value


def _enum_value(value: TaskPriority | TaskStatus | None) -> str | None:
    return value.value if value is not None else None


@app.command()
def show(
    task_id: str = typer.Argument(..., help="Task ID to display"),
) -> None:
    """
    Show one task.

    Examples:
        deptboard task show 3f2a
    """

    async def _show(desk: DeskApp) -> Table | None:
        task = desk.store.find_task(task_id)
        if task is None:
            return None
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold cyan", justify="right")
        table.add_column()
        table.add_row("ID:", task.id)
        table.add_row("Title:", task.title)
        table.add_row("Assignee:", desk.store.user_name(task.assignee_id, "Unassigned"))
        table.add_row("Requester:", task.requester_name or "-")
        table.add_row("Priority:", priority_label(task.priority))
        table.add_row("Status:", status_label(task.status))
        table.add_row("Due:", format_datetime(task.due_date, empty="-"))
        if task.description:
            table.add_row("Description:", task.description)
        return table

    table = run_session(_show)
    if table is None:
        console.print(f"[red]Error:[/red] Task not found: {task_id}")
        raise typer.Exit(1)
    console.print(table)


@app.command()
def add(
    title: str = typer.Argument(..., help="Task title"),
    assignee: str | None = typer.Option(None, "--assignee", "-a", help="Assignee user ID"),
    due: str | None = typer.Option(
        None, "--due", "-d", help="Due date (YYYY-MM-DD or YYYY-MM-DDTHH:MM)"
    ),
    priority: TaskPriority = typer.Option(TaskPriority.MEDIUM, "--priority", "-p"),
    status: TaskStatus = typer.Option(TaskStatus.PENDING, "--status", "-s"),
    requester: str | None = typer.Option(None, "--requester", "-r", help="Who asked for it"),
    description: str | None = typer.Option(None, "--description", help="Task description"),
) -> None:
    """
    Create a task.

    Without --due the task is due now.

    Examples:
        deptboard task add "Budget report" --due 2024-05-10 --priority high
        deptboard task add "Order supplies" -a u2 -r "Front desk"
    """
    prompter = ConsolePrompter()

    async def _add(desk: DeskApp) -> bool:
        desk.task_form.open(default_date=_due(due))
        return await desk.task_form.submit(
            {
                "title": title,
                "assignee_id": assignee,
                "priority": priority.value,
                "status": status.value,
                "requester_name": requester,
                "description": description,
            }
        )

    ok = run_session(_add, prompter=prompter)
    finish(ok, prompter, f"[green]Created:[/green] {title}")


@app.command()
def edit(
    task_id: str = typer.Argument(..., help="Task ID to edit"),
    title: str | None = typer.Option(None, "--title", "-t", help="New title"),
    assignee: str | None = typer.Option(
        None, "--assignee", "-a", help="Assignee user ID ('' to unassign)"
    ),
    due: str | None = typer.Option(None, "--due", "-d", help="Due date ('' to clear)"),
    priority: TaskPriority | None = typer.Option(None, "--priority", "-p"),
    status: TaskStatus | None = typer.Option(None, "--status", "-s"),
    requester: str | None = typer.Option(None, "--requester", "-r"),
    description: str | None = typer.Option(None, "--description"),
) -> None:
    """
    Edit a task; options not given keep their current value.

    Examples:
        deptboard task edit 3f2a --status completed
        deptboard task edit 3f2a --assignee ""
    """
    prompter = ConsolePrompter()

    async def _edit(desk: DeskApp) -> bool | None:
        if desk.store.find_task(task_id) is None:
            return None
        desk.task_form.open(task_id)
        return await desk.task_form.submit(
            {
                "title": title,
                "assignee_id": assignee,
                "due_date": _due(due),
                "priority": _enum_value(priority),
                "status": _enum_value(status),
                "requester_name": requester,
                "description": description,
            }
        )

    ok = run_session(_edit, prompter=prompter)
    if ok is None:
        console.print(f"[red]Error:[/red] Task not found: {task_id}")
        raise typer.Exit(1)
    finish(ok, prompter, f"[green]Updated:[/green] {task_id}")


@app.command()
def delete(
    task_id: str = typer.Argument(..., help="Task ID to delete"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
) -> None:
    """
    Delete a task.

    Examples:
        deptboard task delete 3f2a          # Shows confirmation prompt
        deptboard task delete 3f2a --yes    # Skips prompt
    """
    prompter = ConsolePrompter(assume_yes=yes)

    async def _delete(desk: DeskApp) -> bool:
        return await desk.task_form.delete_task(task_id)

    ok = run_session(_delete, prompter=prompter)
    finish(ok, prompter, f"[green]Deleted:[/green] {task_id}")
