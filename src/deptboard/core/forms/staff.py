"""
Staff dialog: add, edit and remove staff members.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from deptboard.core.errors import ApiError
from deptboard.core.forms.base import FormController, Prompter
from deptboard.core.router import Page, ViewRouter
from deptboard.core.store import StateStore

logger = logging.getLogger(__name__)

DELETE_STAFF_PROMPT = (
    "Delete this staff member? Their tasks are kept but will no longer show an assignee."
)


class StaffFormController(FormController):
    """Controller for the staff dialog."""

    FIELDS = ("id", "name", "position", "role_description")
    CREATE_TITLE = "New Staff Member"
    EDIT_TITLE = "Edit Staff Member"
    SUBMIT_LABEL = "Save"
    BUSY_LABEL = "Saving..."

    def __init__(self, store: StateStore, router: ViewRouter, prompter: Prompter) -> None:
        super().__init__()
        self.store = store
        self.router = router
        self.prompter = prompter

    def open(self, user_id: str | None = None) -> None:
        """
        Open the dialog, empty or filled from an existing user.

        Editing a user that is not in the snapshot leaves the dialog closed.
        """
        if user_id:
            user = self.store.find_user(user_id)
            if user is None:
                logger.debug("No user %s to edit", user_id)
                return
            self.reset()
            self.fields.update(
                {
                    "id": user.id,
                    "name": user.name,
                    "position": user.position,
                    "role_description": user.role_description,
                }
            )
            self.state.title = self.EDIT_TITLE
        else:
            self.reset()
            self.state.title = self.CREATE_TITLE
        self.state.is_open = True

    def payload(self) -> dict[str, str]:
        return {
            "name": self.fields.get("name", ""),
            "position": self.fields.get("position", ""),
            "role_description": self.fields.get("role_description", ""),
        }

    async def submit(self, values: Mapping[str, str | None] | None = None) -> bool:
        """
        Save the staff member, reload users and show the staff page.

        Returns:
            True if the staff member was saved
        """
        self.fill(values)
        user_id = self.fields.get("id")

        with self.submit_control.busy(self.BUSY_LABEL):
            try:
                if user_id:
                    await self.store.api.users.update(user_id, self.payload())
                else:
                    await self.store.api.users.create(self.payload())
                await self.store.load_users()
                self.close()
                self.router.show_page(Page.STAFF)
                return True
            except ApiError as e:
                logger.error("Staff save error: %s", e)
                self.prompter.alert(f"Failed to save staff member: {e}")
                return False

    async def delete_staff(self, user_id: str) -> bool:
        """
        Remove a staff member after confirmation.

        Tasks assigned to the user are left alone; they render as unassigned.

        Returns:
            True if the staff member was deleted
        """
        if not self.prompter.confirm(DELETE_STAFF_PROMPT):
            return False
        try:
            await self.store.api.users.delete(user_id)
            await self.store.load_users()
            return True
        except ApiError as e:
            logger.error("Staff delete error: %s", e)
            self.prompter.alert(f"Failed to delete staff member. (Error: {e})")
            return False
