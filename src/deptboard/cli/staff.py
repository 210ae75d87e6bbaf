"""
Deptboard CLI - staff commands.
"""

import typer

from deptboard.cli.session import ConsolePrompter, console, finish, run_session
from deptboard.core.app import DeskApp
from deptboard.dashboard import TerminalRenderer

app = typer.Typer(
    name="staff",
    help="Add, edit and remove staff members",
    no_args_is_help=True,
)


@app.command()
def add(
    name: str = typer.Argument(..., help="Full name"),
    position: str = typer.Option("", "--position", "-p", help="Job title"),
    duties: str = typer.Option(
        "", "--duties", "-d", help="Responsibilities, separated by commas or newlines"
    ),
) -> None:
    """
    Add a staff member and show the staff page.

    Examples:
        deptboard staff add "Kim Minji" --position Officer --duties "Budget, Payroll"
    """
    prompter = ConsolePrompter()
    renderer = TerminalRenderer(console)

    async def _add(desk: DeskApp) -> bool:
        desk.staff_form.open()
        return await desk.staff_form.submit(
            {"name": name, "position": position, "role_description": duties}
        )

    ok = run_session(_add, target=renderer, prompter=prompter)
    if ok:
        renderer.print_page()
    finish(ok, prompter, f"[green]Added:[/green] {name}")


@app.command()
def edit(
    user_id: str = typer.Argument(..., help="Staff member ID"),
    name: str | None = typer.Option(None, "--name", "-n"),
    position: str | None = typer.Option(None, "--position", "-p"),
    duties: str | None = typer.Option(None, "--duties", "-d"),
) -> None:
    """
    Edit a staff member; options not given keep their current value.

    Examples:
        deptboard staff edit u2 --position "Team Lead"
    """
    prompter = ConsolePrompter()
    renderer = TerminalRenderer(console)

    async def _edit(desk: DeskApp) -> bool | None:
        desk.staff_form.open(user_id)
        if not desk.staff_form.is_open:
            return None
        return await desk.staff_form.submit(
            {"name": name, "position": position, "role_description": duties}
        )

    ok = run_session(_edit, target=renderer, prompter=prompter)
    if ok is None:
        console.print(f"[red]Error:[/red] Staff member not found: {user_id}")
        raise typer.Exit(1)
    if ok:
        renderer.print_page()
    finish(ok, prompter, f"[green]Updated:[/green] {user_id}")


@app.command()
def delete(
    user_id: str = typer.Argument(..., help="Staff member ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
) -> None:
    """
    Remove a staff member. Their tasks stay, without an assignee.

    Examples:
        deptboard staff delete u2 --yes
    """
    prompter = ConsolePrompter(assume_yes=yes)

    async def _delete(desk: DeskApp) -> bool:
        return await desk.staff_form.delete_staff(user_id)

    ok = run_session(_delete, prompter=prompter)
    finish(ok, prompter, f"[green]Deleted:[/green] {user_id}")
