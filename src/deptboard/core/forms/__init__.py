"""
Form controllers for the task, staff and comment dialogs.

Controllers never touch the store's collections: they call the API and then
reload the collection they changed.
"""

from deptboard.core.forms.base import (
    DeclinePrompter,
    FormController,
    FormState,
    Prompter,
    SubmitControl,
)
from deptboard.core.forms.comment import CommentFormController
from deptboard.core.forms.staff import StaffFormController
from deptboard.core.forms.task import TaskFormController

__all__ = [
    "CommentFormController",
    "DeclinePrompter",
    "FormController",
    "FormState",
    "Prompter",
    "StaffFormController",
    "SubmitControl",
    "TaskFormController",
]
