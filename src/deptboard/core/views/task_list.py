"""
Task table with assignee, status and title filters.
"""

from collections.abc import Iterable

from deptboard.core.api.models import Task, User
from deptboard.core.store import StoreView
from deptboard.core.views.labels import (
    initial,
    priority_label,
    priority_tone,
    status_label,
    status_tone,
)
from deptboard.core.views.models import SelectOption, TaskFilters, TaskListView, TaskRow
from deptboard.utils.dates import format_date

EMPTY_TASKS = "No matching tasks."


def filter_tasks(tasks: Iterable[Task], filters: TaskFilters) -> list[Task]:
    """
    Apply the three list filters, combined with AND.

    Empty filter values match everything. The search is a case-insensitive
    substring match on the title.
    """
    search = filters.search.lower()
    matched = []
    for task in tasks:
        if filters.assignee and task.assignee_id != filters.assignee:
            continue
        if filters.status and task.status != filters.status:
            continue
        if search and search not in task.title.lower():
            continue
        matched.append(task)
    return matched


def assignee_options(users: Iterable[User]) -> list[SelectOption]:
    """Options for the task form's assignee select: ``name (position)``."""
    options = []
    for user in users:
        label = f"{user.name} ({user.position})" if user.position else user.name
        options.append(SelectOption(value=user.id, label=label))
    return options


def filter_options(users: Iterable[User]) -> list[SelectOption]:
    """Options for the assignee filter: names only."""
    return [SelectOption(value=user.id, label=user.name) for user in users]


def build_task_list(store: StoreView, filters: TaskFilters | None = None) -> TaskListView:
    """Build the task list page for the current filter values."""
    filters = filters or TaskFilters()

    rows = []
    for task in filter_tasks(store.tasks, filters):
        assignee = store.user_name(task.assignee_id, "-")
        rows.append(
            TaskRow(
                task_id=task.id,
                title=task.title,
                assignee=assignee,
                assignee_initial=initial(assignee),
                priority_label=priority_label(task.priority),
                priority_tone=priority_tone(task.priority),
                due=format_date(task.due_date),
                status=task.status,
                status_label=status_label(task.status),
                status_tone=status_tone(task.status),
            )
        )

    return TaskListView(
        filters=filters,
        rows=rows,
        placeholder=None if rows else EMPTY_TASKS,
        assignee_options=assignee_options(store.users),
        filter_options=filter_options(store.users),
    )
