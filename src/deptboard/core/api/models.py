"""
Pydantic models for the records served by the backend.

These models describe:
- User: a staff member of the department
- Task: a unit of delegated work, optionally assigned to a user
- Comment: a free-form message on the community board
- ListPage: the ``{"data": [...]}`` envelope returned by list endpoints

The backend may attach bookkeeping fields (timestamps, table names, etc.);
those are ignored. Numeric ids are accepted and coerced to strings so that
id comparisons behave the same for every backend.
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class TaskStatus(str, Enum):
    """Task lifecycle stages known to the dashboard."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    HOLD = "hold"


class TaskPriority(str, Enum):
    """Task urgency classification."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Record(BaseModel):
    """Common configuration for backend records."""

    id: str = Field(..., description="Server-assigned identifier")

    model_config = ConfigDict(
        extra="ignore",
        coerce_numbers_to_str=True,
        populate_by_name=True,
    )


class User(Record):
    """
    A staff member.

    Example:
        >>> user = User(id="u1", name="Alice", position="Manager",
        ...             role_description="Budget, Hiring")
        >>> user.responsibilities
        ['Budget', 'Hiring']
    """

    name: str = Field(default="", description="Display name")
    position: str = Field(default="", description="Job title")
    role_description: str = Field(
        default="",
        description="Responsibilities, separated by commas or newlines",
    )

    @field_validator("name", "position", "role_description", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        """Treat null text fields as empty strings."""
        return "" if v is None else v

    @property
    def responsibilities(self) -> list[str]:
        """Responsibility items split on commas or newlines, trimmed."""
        items = self.role_description.replace("\n", ",").split(",")
        return [item.strip() for item in items if item.strip()]


class Task(Record):
    """
    A unit of delegated work.

    ``status`` and ``priority`` keep the raw server value so that statuses
    the dashboard does not know about survive a load; compare them against
    :class:`TaskStatus` and :class:`TaskPriority`.

    Example:
        >>> task = Task(id="t1", title="Budget report", status="pending",
        ...             priority="high", assignee_id="u1")
        >>> task.status == TaskStatus.PENDING
        True
    """

    title: str = Field(default="", description="Short title")
    assignee_id: str | None = Field(default=None, description="Assigned user id")
    due_date: str | None = Field(default=None, description="Due timestamp as stored")
    priority: str = Field(default=TaskPriority.MEDIUM.value, description="high, medium or low")
    status: str = Field(default=TaskStatus.PENDING.value, description="Lifecycle stage")
    requester_name: str = Field(default="", description="Who asked for the work")
    description: str = Field(default="", description="Free-form details")

    @field_validator("title", "requester_name", "description", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        """Treat null text fields as empty strings."""
        return "" if v is None else v

    @field_validator("assignee_id", "due_date", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        """An empty reference or date means 'not set'."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("priority", "status", mode="before")
    @classmethod
    def enum_to_value(cls, v: Any, info: ValidationInfo) -> Any:
        """Accept enum members as well as raw strings; null means the default."""
        if v is None:
            return cls.model_fields[info.field_name].default
        if isinstance(v, Enum):
            return v.value
        return v

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED


class Comment(Record):
    """A message posted to the community board."""

    author: str | None = Field(default=None, description="Optional author name")
    content: str = Field(default="", description="Message body")
    created_at: str | None = Field(default=None, description="Client-stamped creation time")

    @property
    def display_author(self) -> str:
        """Author name, or 'anonymous' when none was given."""
        return self.author or "anonymous"


RecordT = TypeVar("RecordT", bound=Record)


class ListPage(BaseModel, Generic[RecordT]):
    """List endpoint envelope."""

    data: list[RecordT] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


__all__ = [
    "Comment",
    "ListPage",
    "Record",
    "RecordT",
    "Task",
    "TaskPriority",
    "TaskStatus",
    "User",
]
