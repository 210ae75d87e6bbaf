"""
Page renderers.

Every renderer is a pure function of the store snapshot (plus view
parameters such as the task list filters) that returns a view-model from
:mod:`deptboard.core.views.models`. Nothing here keeps state between renders.

Example:
    >>> from deptboard.core.views import build_kanban
    >>> view = build_kanban(store)
    >>> [column.count for column in view.columns]
    [3, 1, 2]
"""

from deptboard.core.views.calendar import build_calendar
from deptboard.core.views.comments import build_comments
from deptboard.core.views.dashboard import build_dashboard, count_statuses
from deptboard.core.views.kanban import build_kanban
from deptboard.core.views.models import PageView, TaskFilters
from deptboard.core.views.staff import build_staff
from deptboard.core.views.stats import build_stats
from deptboard.core.views.task_list import build_task_list, filter_tasks

__all__ = [
    "PageView",
    "TaskFilters",
    "build_calendar",
    "build_comments",
    "build_dashboard",
    "build_kanban",
    "build_staff",
    "build_stats",
    "build_task_list",
    "count_statuses",
    "filter_tasks",
]
