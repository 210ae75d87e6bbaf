"""
Shared plumbing for CLI commands.

Every command runs one short dashboard session: load configuration, open the
API client, load the snapshot, do its work, close the client.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

import typer
from rich.console import Console

from deptboard.core.api.client import DeskApi
from deptboard.core.app import DeskApp
from deptboard.core.config import load_config
from deptboard.core.config.models import DeskConfig
from deptboard.core.errors import ConfigError
from deptboard.core.router import RenderTarget

console = Console()
logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConsolePrompter:
    """
    Prompter for the terminal.

    Confirmation uses ``typer.confirm`` unless ``assume_yes`` is set; alerts
    are printed as errors and remembered so commands can set the exit code.
    """

    def __init__(self, out: Console | None = None, assume_yes: bool = False):
        self.console = out or console
        self.assume_yes = assume_yes
        self.alerts: list[str] = []

    def confirm(self, message: str) -> bool:
        if self.assume_yes:
            return True
        return typer.confirm(message, default=False)

    def alert(self, message: str) -> None:
        self.alerts.append(message)
        self.console.print(f"[red]Error:[/red] {message}")


def create_api(config: DeskConfig) -> DeskApi:
    """Build the API client for a session (tests replace this)."""
    return DeskApi.from_config(config)


def get_config() -> DeskConfig:
    """
    Load configuration or exit.

    Raises:
        typer.Exit: If the configuration is invalid
    """
    try:
        return load_config()
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def run_session(
    action: Callable[[DeskApp], Awaitable[T]],
    *,
    target: RenderTarget | None = None,
    prompter: ConsolePrompter | None = None,
) -> T:
    """
    Load the snapshot and run ``action`` against it.

    Args:
        action: Coroutine function receiving the started app
        target: Render target for the router
        prompter: Prompter for confirmations and alerts

    Returns:
        Whatever ``action`` returns

    Raises:
        typer.Exit: If configuration is invalid or the data cannot be loaded
    """
    config = get_config()

    async def _main() -> T:
        async with DeskApp(create_api(config), config, target, prompter) as desk:
            if not await desk.store.load_all():
                console.print(f"[red]Error:[/red] Could not load data from {config.api_url}")
                raise typer.Exit(1)
            return await action(desk)

    logger.debug("Session against %s", config.api_url)
    return asyncio.run(_main())


def finish(ok: bool, prompter: ConsolePrompter, success: str) -> None:
    """
    Print the outcome of a form action and set the exit code.

    A declined confirmation is not an error; a failed request is.
    """
    if ok:
        console.print(success)
        return
    if prompter.alerts:
        raise typer.Exit(1)
    console.print("[yellow]Cancelled.[/yellow]")
