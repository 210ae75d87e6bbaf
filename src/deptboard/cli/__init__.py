"""
Deptboard CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging

import typer

from deptboard import __version__
from deptboard.cli import comment, show, staff, task
from deptboard.cli.session import console
from deptboard.core.config.env import load_layered_env

app = typer.Typer(
    name="deptboard",
    help="Department task dashboard in the terminal",
    no_args_is_help=True,
    context_settings={"help_option_names": ["--help", "-h"]},
)


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
) -> None:
    """
    Deptboard - department task dashboard.

    Reads tasks, staff and comments from the department backend and shows
    them as an overview, task list, calendar, kanban board, staff roster,
    workload chart or comment feed.

    Common Workflows:
        deptboard show                       # Overview
        deptboard show kanban                # Kanban board
        deptboard task add "Budget report"   # Create a task
        deptboard staff add "Kim Minji"      # Add a staff member
        deptboard comment add "Hello"        # Post a comment

    Configuration:
        ~/.config/deptboard/config.json, .deptboard.json, or
        DEPTBOARD_BASE_URL / DEPTBOARD_API_PATH / DEPTBOARD_TIMEOUT
    """
    # DEPTBOARD_* from dotenv files; exported shell values win
    load_layered_env()

    ctx.obj = {"debug": debug}

    if debug:
        logging.basicConfig(level=logging.DEBUG)
        console.print("[dim]Debug mode enabled[/dim]")


app.command(name="show")(show.show)
app.add_typer(task.app, name="task")
app.add_typer(staff.app, name="staff")
app.add_typer(comment.app, name="comment")


@app.command(name="version")
def version() -> None:
    """Show deptboard version and exit."""
    console.print(f"deptboard version {__version__}")
    raise typer.Exit(0)


def cli_main() -> None:
    """Main CLI entry point."""
    app()


__all__ = ["app", "cli_main"]
