"""
REST API access for deptboard.

Provides the async resource clients and the record models they return.
"""

from deptboard.core.api.client import DeskApi, ResourceClient, handle_response
from deptboard.core.api.models import (
    Comment,
    ListPage,
    Record,
    Task,
    TaskPriority,
    TaskStatus,
    User,
)

__all__ = [
    "Comment",
    "DeskApi",
    "ListPage",
    "Record",
    "ResourceClient",
    "Task",
    "TaskPriority",
    "TaskStatus",
    "User",
    "handle_response",
]
