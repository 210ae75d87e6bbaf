"""
Pydantic view-models produced by the page renderers.

Each page renderer maps the store snapshot to one of these models:
- DashboardView: status counts, urgent list and a doughnut chart payload
- TaskListView: filtered task rows plus the assignee select options
- CalendarView: all-day events and widget options for a calendar widget
- KanbanView: three status columns of cards
- StaffView: one card per staff member with parsed responsibilities
- StatsView: per-user task counts and a bar chart payload
- CommentsView: the comment feed

Chart and calendar payloads are plain data: the widgets that draw them are
external collaborators. ``to_config()`` / ``model_dump(by_alias=True)``
produce the camelCase structures those widgets expect.
"""

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field


class ViewModel(BaseModel):
    """Base for view-models; frozen so renders cannot mutate shared state."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class SelectOption(ViewModel):
    """An option of a select control."""

    value: str
    label: str


# ==============================================================================
# Widget payloads
# ==============================================================================


class ChartDataset(ViewModel):
    """One dataset of a chart widget."""

    label: str = ""
    data: list[int] = Field(default_factory=list)
    background_color: Union[str, list[str]] = Field(alias="backgroundColor")
    border_width: int | None = Field(default=None, alias="borderWidth")
    border_radius: int | None = Field(default=None, alias="borderRadius")
    bar_thickness: int | None = Field(default=None, alias="barThickness")
    hover_offset: int | None = Field(default=None, alias="hoverOffset")


class ChartPayload(ViewModel):
    """Data and options handed to a chart widget."""

    type: str
    labels: list[str] = Field(default_factory=list)
    datasets: list[ChartDataset] = Field(default_factory=list)
    options: dict[str, Any] = Field(default_factory=dict)

    @property
    def values(self) -> list[int]:
        """Values of the first dataset."""
        return self.datasets[0].data if self.datasets else []

    def to_config(self) -> dict[str, Any]:
        """Widget configuration: ``{type, data: {labels, datasets}, options}``."""
        return {
            "type": self.type,
            "data": {
                "labels": list(self.labels),
                "datasets": [
                    dataset.model_dump(by_alias=True, exclude_none=True)
                    for dataset in self.datasets
                ],
            },
            "options": self.options,
        }


# ==============================================================================
# Dashboard
# ==============================================================================


class StatusCounts(ViewModel):
    """Dashboard stat cards."""

    pending: int = 0
    in_progress: int = 0
    completed: int = 0
    urgent: int = 0


class UrgentCard(ViewModel):
    """A soon-due task on the dashboard."""

    task_id: str
    title: str
    priority_label: str
    priority_tone: str
    due: str
    assignee: str


class DashboardView(ViewModel):
    counts: StatusCounts
    urgent_tasks: list[UrgentCard] = Field(default_factory=list)
    placeholder: str | None = None
    chart: ChartPayload


# ==============================================================================
# Task list
# ==============================================================================


class TaskFilters(ViewModel):
    """Live values of the task list filter controls (empty means 'any')."""

    assignee: str = ""
    status: str = ""
    search: str = ""


class TaskRow(ViewModel):
    task_id: str
    title: str
    assignee: str
    assignee_initial: str
    priority_label: str
    priority_tone: str
    due: str
    status: str
    status_label: str
    status_tone: str


class TaskListView(ViewModel):
    filters: TaskFilters = Field(default_factory=TaskFilters)
    rows: list[TaskRow] = Field(default_factory=list)
    placeholder: str | None = None
    assignee_options: list[SelectOption] = Field(
        default_factory=list, description="Task form assignee select"
    )
    filter_options: list[SelectOption] = Field(
        default_factory=list, description="Assignee filter select"
    )


# ==============================================================================
# Calendar
# ==============================================================================


class CalendarEventProps(ViewModel):
    priority: str
    status: str


class CalendarEvent(ViewModel):
    """An all-day calendar event for one task."""

    id: str
    title: str
    start: str | None
    all_day: bool = Field(default=True, alias="allDay")
    background_color: str = Field(alias="backgroundColor")
    border_color: str = Field(alias="borderColor")
    extended_props: CalendarEventProps = Field(alias="extendedProps")


class CalendarView(ViewModel):
    events: list[CalendarEvent] = Field(default_factory=list)
    options: dict[str, Any] = Field(default_factory=dict)

    def to_config(self) -> dict[str, Any]:
        """Widget configuration with the events inlined."""
        return {
            **self.options,
            "events": [event.model_dump(by_alias=True) for event in self.events],
        }


# ==============================================================================
# Kanban
# ==============================================================================


class KanbanCard(ViewModel):
    task_id: str
    title: str
    status: str
    priority_label: str
    priority_tone: str
    assignee: str
    assignee_initial: str
    due: str


class KanbanColumn(ViewModel):
    status: str
    title: str
    cards: list[KanbanCard] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.cards)


class KanbanView(ViewModel):
    columns: list[KanbanColumn] = Field(default_factory=list)

    def column(self, status: str) -> KanbanColumn | None:
        return next((column for column in self.columns if column.status == status), None)


# ==============================================================================
# Staff
# ==============================================================================


class StaffCard(ViewModel):
    user_id: str
    name: str
    initial: str
    position: str
    responsibilities: list[str] = Field(default_factory=list)
    is_manager: bool = False


class StaffView(ViewModel):
    cards: list[StaffCard] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.cards)


# ==============================================================================
# Stats
# ==============================================================================


class WorkloadBar(ViewModel):
    user_id: str
    name: str
    count: int


class StatsView(ViewModel):
    bars: list[WorkloadBar] = Field(default_factory=list)
    chart: ChartPayload


# ==============================================================================
# Comments
# ==============================================================================


class CommentItem(ViewModel):
    comment_id: str
    author: str
    content: str
    created: str


class CommentsView(ViewModel):
    items: list[CommentItem] = Field(default_factory=list)
    placeholder: str | None = None


PageView = Union[
    DashboardView,
    TaskListView,
    CalendarView,
    KanbanView,
    StaffView,
    StatsView,
    CommentsView,
]


__all__ = [
    "CalendarEvent",
    "CalendarEventProps",
    "CalendarView",
    "ChartDataset",
    "ChartPayload",
    "CommentItem",
    "CommentsView",
    "DashboardView",
    "KanbanCard",
    "KanbanColumn",
    "KanbanView",
    "PageView",
    "SelectOption",
    "StaffCard",
    "StaffView",
    "StatsView",
    "StatusCounts",
    "TaskFilters",
    "TaskListView",
    "TaskRow",
    "UrgentCard",
    "ViewModel",
    "WorkloadBar",
]
