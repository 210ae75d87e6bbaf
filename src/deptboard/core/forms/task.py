"""
Task dialog: create, edit and delete tasks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

from deptboard.core.api.models import TaskPriority, TaskStatus
from deptboard.core.errors import ApiError
from deptboard.core.forms.base import FormController, Prompter
from deptboard.core.store import StateStore
from deptboard.utils.dates import local_input_value, now_local

logger = logging.getLogger(__name__)

DEFAULT_DUE_TIME = "09:00"


def due_date_from_click(date_str: str) -> str:
    """Value for the due field when a calendar date is clicked."""
    return date_str if "T" in date_str else f"{date_str}T{DEFAULT_DUE_TIME}"


class TaskFormController(FormController):
    """
    Controller for the task dialog.

    Example:
        >>> form = TaskFormController(store, prompter)
        >>> form.open(default_date="2024-05-10")
        >>> form.fields["due_date"]
        '2024-05-10T09:00'
        >>> await form.submit({"title": "Budget report"})
        True
    """

    FIELDS = (
        "id",
        "title",
        "assignee_id",
        "due_date",
        "priority",
        "requester_name",
        "status",
        "description",
    )
    CREATE_TITLE = "New Task"
    EDIT_TITLE = "Edit Task"
    SUBMIT_LABEL = "Save"
    BUSY_LABEL = "Processing..."

    def __init__(
        self,
        store: StateStore,
        prompter: Prompter,
        *,
        clock: Callable[[], datetime] = now_local,
    ) -> None:
        super().__init__()
        self.store = store
        self.prompter = prompter
        self.clock = clock

    def open(self, task_id: str | None = None, default_date: str | None = None) -> None:
        """
        Open the dialog.

        Args:
            task_id: Task to edit; None opens the dialog in create mode
            default_date: Clicked calendar date (``YYYY-MM-DD``) to prefill
                the due field with
        """
        self.reset()

        if default_date:
            self.fields["due_date"] = due_date_from_click(default_date)

        if task_id:
            self.state.title = self.EDIT_TITLE
            self.state.show_delete = True
            task = self.store.find_task(task_id)
            if task is not None:
                self.fields.update(
                    {
                        "id": task.id,
                        "title": task.title,
                        "assignee_id": task.assignee_id or "",
                        "due_date": task.due_date[:16] if task.due_date else "",
                        "priority": task.priority,
                        "requester_name": task.requester_name or "",
                        "status": task.status,
                        "description": task.description or "",
                    }
                )
        else:
            self.state.title = self.CREATE_TITLE
            self.state.show_delete = False
            self.fields["status"] = TaskStatus.PENDING.value
            self.fields["priority"] = TaskPriority.MEDIUM.value
            if not default_date:
                self.fields["due_date"] = local_input_value(self.clock())

        self.state.is_open = True

    def payload(self) -> dict[str, Any]:
        """Request body built from the current field values."""
        return {
            "title": self.fields.get("title", ""),
            "assignee_id": self.fields.get("assignee_id") or None,
            "due_date": self.fields.get("due_date") or None,
            "priority": self.fields.get("priority", ""),
            "requester_name": self.fields.get("requester_name", ""),
            "status": self.fields.get("status", ""),
            "description": self.fields.get("description", ""),
        }

    async def submit(self, values: Mapping[str, str | None] | None = None) -> bool:
        """
        Save the task and reload the task list.

        Creates when the id field is empty, updates otherwise. On failure the
        user is alerted and the dialog stays open.

        Args:
            values: Field values typed into the dialog before submitting

        Returns:
            True if the task was saved
        """
        self.fill(values)
        task_id = self.fields.get("id")

        with self.submit_control.busy(self.BUSY_LABEL):
            try:
                if task_id:
                    await self.store.api.tasks.update(task_id, self.payload())
                else:
                    await self.store.api.tasks.create(self.payload())
                await self.store.load_tasks()
                self.close()
                return True
            except ApiError as e:
                logger.error("Task save error: %s", e)
                self.prompter.alert(f"Failed to save the task. (Error: {e})")
                return False

    async def delete_task(self, task_id: str) -> bool:
        """
        Delete a task after confirmation and reload the task list.

        Returns:
            True if the task was deleted
        """
        if not self.prompter.confirm("Delete this task?"):
            return False
        try:
            await self.store.api.tasks.delete(task_id)
            await self.store.load_tasks()
            return True
        except ApiError as e:
            logger.error("Delete task error: %s", e)
            self.prompter.alert(f"Delete failed: {e}")
            return False

    async def delete_from_form(self) -> bool:
        """Delete the task being edited; the dialog closes once it is gone."""
        task_id = self.fields.get("id")
        if not task_id:
            return False
        deleted = await self.delete_task(task_id)
        if deleted:
            self.close()
        return deleted
