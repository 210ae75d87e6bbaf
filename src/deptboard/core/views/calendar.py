"""
Calendar events for the task calendar widget.

Every task becomes an all-day event. Clicking an empty date opens the task
form in create mode for that date; clicking an event opens it in edit mode
(see ``TaskFormController.open``).
"""

from deptboard.core.api.models import Task, TaskPriority, TaskStatus
from deptboard.core.store import StoreView
from deptboard.core.views.models import CalendarEvent, CalendarEventProps, CalendarView

COMPLETED_COLOR = "#10b981"
HIGH_PRIORITY_COLOR = "#f43f5e"
PENDING_COLOR = "#f59e0b"
DEFAULT_COLOR = "#6366f1"

CALENDAR_OPTIONS = {
    "initialView": "dayGridMonth",
    "headerToolbar": {
        "left": "prev,next today",
        "center": "title",
        "right": "dayGridMonth,listWeek",
    },
    "selectable": True,
    "dayMaxEvents": True,
    "height": "auto",
    "contentHeight": 650,
}


def event_color(task: Task) -> str:
    """Completed beats high priority, which beats pending."""
    if task.status == TaskStatus.COMPLETED:
        return COMPLETED_COLOR
    if task.priority == TaskPriority.HIGH:
        return HIGH_PRIORITY_COLOR
    if task.status == TaskStatus.PENDING:
        return PENDING_COLOR
    return DEFAULT_COLOR


def build_calendar(store: StoreView) -> CalendarView:
    events = []
    for task in store.tasks:
        color = event_color(task)
        events.append(
            CalendarEvent(
                id=task.id,
                title=f"{store.user_name(task.assignee_id)} - {task.title}",
                start=task.due_date,
                all_day=True,
                background_color=color,
                border_color=color,
                extended_props=CalendarEventProps(priority=task.priority, status=task.status),
            )
        )
    return CalendarView(events=events, options=dict(CALENDAR_OPTIONS))
