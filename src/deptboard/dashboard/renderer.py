"""
Rich-based render target for the department dashboard.

The router tells the renderer which section to show, which navigation item to
highlight and what the title is, and hands it one view-model per render. The
renderer turns view-models into Rich renderables and keeps the one for each
page so the console can show the current page at any time.
"""

from __future__ import annotations

from rich.columns import Columns
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.progress import BarColumn, Progress, TextColumn
from rich.table import Table
from rich.text import Text

from deptboard.core.router import PAGE_TITLES, Page
from deptboard.core.views.labels import status_label
from deptboard.core.views.models import (
    CalendarView,
    CommentsView,
    DashboardView,
    KanbanColumn,
    KanbanView,
    PageView,
    StaffView,
    StatsView,
    TaskListView,
)

TONE_COLORS = {
    "rose": "red",
    "amber": "yellow",
    "slate": "grey50",
    "indigo": "blue",
    "emerald": "green",
}

COLUMN_COLORS = {
    "pending": "yellow",
    "in_progress": "blue",
    "completed": "green",
}


def tone_color(tone: str) -> str:
    """Rich colour for a view-model tone."""
    return TONE_COLORS.get(tone, "white")


class TerminalRenderer:
    """
    Render dashboard pages to a Rich console.

    Example:
        >>> renderer = TerminalRenderer(Console(file=StringIO()))
        >>> router = ViewRouter(store, renderer)
        >>> router.show_page("stats")
        >>> renderer.print_page()
    """

    def __init__(self, console: Console | None = None):
        """
        Initialize the renderer.

        Args:
            console: Rich console for output. If None, creates a new one.
        """
        self.console = console or Console()
        self.section: Page | None = None
        self.nav: Page | None = None
        self.title = ""
        self.pages: dict[Page, RenderableType] = {}

    # RenderTarget

    def show_section(self, page: Page | None) -> None:
        self.section = page

    def highlight_nav(self, page: Page | None) -> None:
        self.nav = page

    def set_title(self, title: str) -> None:
        self.title = title

    def render(self, page: Page, view: PageView) -> None:
        """Replace the stored content of ``page`` with a rendering of ``view``."""
        self.pages[page] = self.render_view(view)

    # Output

    def current(self) -> RenderableType:
        """Header and body for the section being shown."""
        body: RenderableType
        if self.section is None:
            body = Text("Nothing to show", style="dim italic", justify="center")
        elif self.section in self.pages:
            body = self.pages[self.section]
        else:
            body = Text(
                f"{PAGE_TITLES[self.section]} is not available in the terminal",
                style="dim italic",
                justify="center",
            )
        return Group(self._render_header(), body)

    def print_page(self) -> None:
        self.console.print(self.current())

    def render_view(self, view: PageView) -> RenderableType:
        """Build the renderable for any page view-model."""
        if isinstance(view, DashboardView):
            return self._render_dashboard(view)
        if isinstance(view, TaskListView):
            return self._render_task_list(view)
        if isinstance(view, CalendarView):
            return self._render_calendar(view)
        if isinstance(view, KanbanView):
            return self._render_kanban(view)
        if isinstance(view, StaffView):
            return self._render_staff(view)
        if isinstance(view, StatsView):
            return self._render_stats(view)
        if isinstance(view, CommentsView):
            return self._render_comments(view)
        raise TypeError(f"Cannot render {type(view).__name__}")

    def _render_header(self) -> Panel:
        nav = Text()
        for page in PAGE_TITLES:
            style = "bold reverse cyan" if page == self.nav else "dim"
            nav.append(f" {page.value} ", style=style)
            nav.append(" ")
        return Panel(
            Group(Text(self.title, style="bold cyan", justify="center"), nav),
            padding=(0, 1),
        )

    def _render_dashboard(self, view: DashboardView) -> RenderableType:
        counts = Table.grid(padding=(0, 3), expand=True)
        for _ in range(4):
            counts.add_column(justify="center")
        counts.add_row(
            Text("Pending", style="yellow"),
            Text("In progress", style="blue"),
            Text("Completed", style="green"),
            Text("Due soon", style="red"),
        )
        counts.add_row(
            Text(str(view.counts.pending), style="bold"),
            Text(str(view.counts.in_progress), style="bold"),
            Text(str(view.counts.completed), style="bold"),
            Text(str(view.counts.urgent), style="bold"),
        )

        if view.urgent_tasks:
            urgent = Table(expand=True, show_edge=False)
            urgent.add_column("Priority", width=8)
            urgent.add_column("Task")
            urgent.add_column("Assignee")
            urgent.add_column("Due", justify="right")
            for card in view.urgent_tasks:
                urgent.add_row(
                    Text(card.priority_label, style=tone_color(card.priority_tone)),
                    card.title,
                    card.assignee,
                    card.due,
                )
            urgent_content: RenderableType = urgent
        else:
            urgent_content = Text(view.placeholder or "", style="dim italic", justify="center")

        return Group(
            Panel(counts, title="[bold]Status[/bold]", border_style="blue"),
            Panel(urgent_content, title="[bold]Due Soon[/bold]", border_style="red"),
        )

    def _render_task_list(self, view: TaskListView) -> RenderableType:
        if not view.rows:
            return Panel(Text(view.placeholder or "", style="dim italic", justify="center"))

        table = Table(expand=True)
        table.add_column("Task")
        table.add_column("Assignee")
        table.add_column("Priority")
        table.add_column("Due")
        table.add_column("Status")
        table.add_column("ID", style="dim")
        for row in view.rows:
            table.add_row(
                row.title,
                row.assignee,
                Text(row.priority_label, style=tone_color(row.priority_tone)),
                row.due,
                Text(row.status_label, style=tone_color(row.status_tone)),
                row.task_id,
            )
        return table

    def _render_calendar(self, view: CalendarView) -> RenderableType:
        # Agenda rather than a month grid
        if not view.events:
            return Panel(Text("No scheduled tasks", style="dim italic", justify="center"))

        table = Table(expand=True)
        table.add_column("Date", width=12)
        table.add_column("Event")
        table.add_column("Status")
        for event in sorted(view.events, key=lambda e: e.start or ""):
            table.add_row(
                (event.start or "-")[:10],
                Text(event.title, style=event.background_color),
                status_label(event.extended_props.status),
            )
        return table

    def _render_kanban(self, view: KanbanView) -> RenderableType:
        return Columns(
            [self._render_kanban_column(column) for column in view.columns],
            equal=True,
            expand=True,
        )

    def _render_kanban_column(self, column: KanbanColumn) -> Panel:
        if column.cards:
            cards: RenderableType = Group(
                *(
                    Panel(
                        Group(
                            Text(card.title, style="bold"),
                            Text.assemble(
                                (card.priority_label, tone_color(card.priority_tone)),
                                f"  {card.assignee}  ",
                                (card.due, "dim"),
                            ),
                        ),
                        padding=(0, 1),
                    )
                    for card in column.cards
                )
            )
        else:
            cards = Text("Empty", style="dim italic", justify="center")

        color = COLUMN_COLORS.get(column.status, "white")
        return Panel(
            cards,
            title=f"[bold {color}]{column.title}[/bold {color}] ({column.count})",
            border_style=color,
        )

    def _render_staff(self, view: StaffView) -> RenderableType:
        panels = []
        for card in view.cards:
            duties: RenderableType = (
                Group(*(Text(f"• {duty}") for duty in card.responsibilities))
                if card.responsibilities
                else Text("No responsibilities listed", style="dim italic")
            )
            panels.append(
                Panel(
                    duties,
                    title=f"[bold]{card.name}[/bold] {card.position}",
                    subtitle=card.user_id,
                    border_style="magenta" if card.is_manager else "blue",
                )
            )
        return Group(
            Text(f"{view.count} staff members", style="dim"),
            Columns(panels, expand=True),
        )

    def _render_stats(self, view: StatsView) -> RenderableType:
        if not view.bars:
            return Panel(Text("No staff members", style="dim italic", justify="center"))

        peak = max(bar.count for bar in view.bars)
        rows = Table.grid(padding=(0, 2), expand=True)
        rows.add_column(style="bold cyan", justify="right")
        rows.add_column(ratio=1)
        for bar in view.bars:
            rows.add_row(
                bar.name,
                self._create_progress_bar(bar.count, peak, str(bar.count)),
            )
        return Panel(rows, title="[bold]Assigned tasks[/bold]", border_style="blue")

    def _render_comments(self, view: CommentsView) -> RenderableType:
        if not view.items:
            return Panel(Text(view.placeholder or "", style="dim italic", justify="center"))

        return Group(
            *(
                Panel(
                    Text(item.content),
                    title=f"[bold]{item.author}[/bold]",
                    subtitle=f"{item.created} · {item.comment_id}",
                    title_align="left",
                    subtitle_align="right",
                )
                for item in view.items
            )
        )

    def _create_progress_bar(self, completed: int, total: int, label: str) -> Progress:
        """Create a progress bar with label."""
        progress = Progress(
            TextColumn("{task.description}"),
            BarColumn(bar_width=None),
            expand=True,
        )
        pct = (completed / total * 100) if total > 0 else 0
        progress.add_task(label, total=100, completed=int(pct))
        return progress
