"""
Dashboard summary.

Status counts, the urgent counter, the soonest-due list and the status
distribution chart.
"""

from datetime import datetime, timedelta

from deptboard.core.api.models import TaskStatus
from deptboard.core.store import StoreView
from deptboard.core.views.labels import priority_label, priority_tone
from deptboard.core.views.models import (
    ChartDataset,
    ChartPayload,
    DashboardView,
    StatusCounts,
    UrgentCard,
)
from deptboard.utils.dates import format_date, now_local, parse_timestamp

EMPTY_URGENT = "No tasks due soon."
UNASSIGNED = "Unassigned"

STATUS_CHART_LABELS = ["Pending", "In progress", "Completed"]
STATUS_CHART_COLORS = ["#fbbf24", "#6366f1", "#10b981"]


def count_statuses(
    store: StoreView, now: datetime | None = None, window_days: int = 7
) -> StatusCounts:
    """
    Count tasks per status and the urgent ones.

    A task is urgent when it is not completed and its due date falls within
    ``[now, now + window_days]``, both ends inclusive.
    A naive ``now`` is taken as local time.
    """
    now = now or now_local()
    if now.tzinfo is None:
        now = now.astimezone()
    window_end = now + timedelta(days=window_days)

    pending = in_progress = completed = urgent = 0
    for task in store.tasks:
        if task.status == TaskStatus.PENDING:
            pending += 1
        elif task.status == TaskStatus.IN_PROGRESS:
            in_progress += 1
        elif task.status == TaskStatus.COMPLETED:
            completed += 1

        if task.is_completed:
            continue
        due = parse_timestamp(task.due_date)
        if due is not None and now <= due <= window_end:
            urgent += 1

    return StatusCounts(
        pending=pending, in_progress=in_progress, completed=completed, urgent=urgent
    )


def status_chart(counts: StatusCounts) -> ChartPayload:
    """Doughnut chart of the pending / in progress / completed split."""
    return ChartPayload(
        type="doughnut",
        labels=STATUS_CHART_LABELS,
        datasets=[
            ChartDataset(
                data=[counts.pending, counts.in_progress, counts.completed],
                background_color=STATUS_CHART_COLORS,
                border_width=0,
                hover_offset=4,
            )
        ],
        options={
            "responsive": True,
            "maintainAspectRatio": False,
            "cutout": "75%",
            "plugins": {
                "legend": {
                    "position": "bottom",
                    "labels": {
                        "boxWidth": 10,
                        "usePointStyle": True,
                        "pointStyle": "circle",
                        "padding": 20,
                    },
                }
            },
        },
    )


def build_dashboard(
    store: StoreView,
    *,
    now: datetime | None = None,
    window_days: int = 7,
    list_size: int = 5,
) -> DashboardView:
    """
    Build the dashboard page.

    The urgent list holds the ``list_size`` soonest-due incomplete tasks that
    have a due date, overdue ones included, in ascending due order.

    Args:
        store: Snapshot to read
        now: Reference time (defaults to the current local time)
        window_days: Width of the urgent window in days
        list_size: Length of the urgent list

    Returns:
        DashboardView
    """
    counts = count_statuses(store, now=now, window_days=window_days)

    dated = []
    for task in store.tasks:
        if task.is_completed:
            continue
        due = parse_timestamp(task.due_date)
        if due is not None:
            dated.append((due, task))
    dated.sort(key=lambda pair: pair[0])

    cards = [
        UrgentCard(
            task_id=task.id,
            title=task.title,
            priority_label=priority_label(task.priority),
            priority_tone=priority_tone(task.priority),
            due=format_date(task.due_date),
            assignee=store.user_name(task.assignee_id, UNASSIGNED),
        )
        for _, task in dated[:list_size]
    ]

    return DashboardView(
        counts=counts,
        urgent_tasks=cards,
        placeholder=None if cards else EMPTY_URGENT,
        chart=status_chart(counts),
    )
