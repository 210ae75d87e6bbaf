"""
Kanban board.

Tasks are bucketed into pending, in progress and completed columns. Tasks on
hold, and tasks with a status the board does not know, are shown in the
pending column; their stored status is not changed.
"""

from deptboard.core.api.models import Task, TaskStatus
from deptboard.core.store import StoreView
from deptboard.core.views.labels import STATUS_LABELS, initial, priority_label, priority_tone
from deptboard.core.views.models import KanbanCard, KanbanColumn, KanbanView
from deptboard.utils.dates import format_date

BOARD_STATUSES = (TaskStatus.PENDING, TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED)


def board_status(task: Task) -> TaskStatus:
    """Column a task is displayed in."""
    for status in BOARD_STATUSES:
        if task.status == status:
            return status
    # TODO: give "hold" its own column once the department confirms it wants one
    return TaskStatus.PENDING


def build_kanban(store: StoreView) -> KanbanView:
    buckets: dict[TaskStatus, list[KanbanCard]] = {status: [] for status in BOARD_STATUSES}

    for task in store.tasks:
        assignee = store.user_name(task.assignee_id, "Unassigned")
        buckets[board_status(task)].append(
            KanbanCard(
                task_id=task.id,
                title=task.title,
                status=task.status,
                priority_label=priority_label(task.priority),
                priority_tone=priority_tone(task.priority),
                assignee=assignee,
                assignee_initial=initial(assignee),
                due=format_date(task.due_date, empty=""),
            )
        )

    return KanbanView(
        columns=[
            KanbanColumn(status=status.value, title=STATUS_LABELS[status], cards=buckets[status])
            for status in BOARD_STATUSES
        ]
    )
