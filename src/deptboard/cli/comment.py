"""
Deptboard CLI - comment commands.
"""

import typer

from deptboard.cli.session import ConsolePrompter, console, finish, run_session
from deptboard.core.app import DeskApp

app = typer.Typer(
    name="comment",
    help="Post and delete comments",
    no_args_is_help=True,
)


@app.command()
def add(
    content: str = typer.Argument(..., help="Comment text"),
    author: str = typer.Option("", "--author", "-a", help="Name to post as (default: anonymous)"),
) -> None:
    """
    Post a comment.

    Examples:
        deptboard comment add "Meeting moved to 3pm" --author Kim
    """
    if not content.strip():
        console.print("[yellow]Nothing to post.[/yellow]")
        raise typer.Exit(1)

    prompter = ConsolePrompter()

    async def _add(desk: DeskApp) -> bool:
        return await desk.comment_form.submit({"content": content, "author": author})

    ok = run_session(_add, prompter=prompter)
    finish(ok, prompter, "[green]Posted.[/green]")


@app.command()
def delete(
    comment_id: str = typer.Argument(..., help="Comment ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
) -> None:
    """
    Delete a comment.

    Examples:
        deptboard comment delete c1 --yes
    """
    prompter = ConsolePrompter(assume_yes=yes)

    async def _delete(desk: DeskApp) -> bool:
        return await desk.comment_form.delete_comment(comment_id)

    ok = run_session(_delete, prompter=prompter)
    finish(ok, prompter, f"[green]Deleted:[/green] {comment_id}")
