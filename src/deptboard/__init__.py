"""
Deptboard - Department Task Dashboard

A client that mirrors a department's users, tasks and comments from a REST
backend and projects them into dashboard, task list, calendar, kanban, staff,
workload and comment views.
"""

__version__ = "0.3.0"

# Re-export core models for convenience
from deptboard.core.api.models import Comment, Task, TaskPriority, TaskStatus, User
from deptboard.core.config.models import DeskConfig

__all__ = [
    "Comment",
    "DeskConfig",
    "Task",
    "TaskPriority",
    "TaskStatus",
    "User",
    "__version__",
]
