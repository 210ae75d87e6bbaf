"""
Shared pieces of the form controllers.

A form controller owns the state of one dialog: its title, whether it is
open, whether the delete control is shown, the field values, and the submit
control. User interaction that blocks (confirmation, error alerts) goes
through a :class:`Prompter` so the same controller works in a browser
adapter, the terminal, or a test.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Protocol

logger = logging.getLogger(__name__)


class Prompter(Protocol):
    """Blocking user interaction."""

    def confirm(self, message: str) -> bool:
        """Ask a yes/no question; True means go ahead."""
        ...

    def alert(self, message: str) -> None:
        """Show an error the user has to acknowledge."""
        ...


class DeclinePrompter:
    """
    Prompter for sessions with nobody to ask.

    Every confirmation is declined, so destructive actions do nothing until a
    real prompter is supplied. Alerts are logged and kept in ``alerts``.
    """

    def __init__(self) -> None:
        self.alerts: list[str] = []

    def confirm(self, message: str) -> bool:
        logger.info("Declined without a prompter: %s", message)
        return False

    def alert(self, message: str) -> None:
        logger.warning(message)
        self.alerts.append(message)


@dataclass
class SubmitControl:
    """The submit button of a form."""

    label: str
    disabled: bool = False

    @contextmanager
    def busy(self, busy_label: str) -> Iterator[None]:
        """Disable the control and show ``busy_label`` until the block exits."""
        original = self.label
        self.label = busy_label
        self.disabled = True
        try:
            yield
        finally:
            self.label = original
            self.disabled = False


@dataclass
class FormState:
    """What the dialog currently shows."""

    title: str = ""
    is_open: bool = False
    show_delete: bool = False
    fields: dict[str, str] = field(default_factory=dict)


class FormController:
    """
    Base for dialog-backed forms.

    Subclasses list their field names in ``FIELDS`` and set the titles and
    submit labels.
    """

    FIELDS: tuple[str, ...] = ()
    CREATE_TITLE = ""
    EDIT_TITLE = ""
    SUBMIT_LABEL = "Save"
    BUSY_LABEL = "Saving..."

    def __init__(self) -> None:
        self.state = FormState()
        self.submit_control = SubmitControl(self.SUBMIT_LABEL)

    @property
    def is_open(self) -> bool:
        return self.state.is_open

    @property
    def fields(self) -> dict[str, str]:
        return self.state.fields

    def reset(self) -> None:
        """Clear every field."""
        self.state.fields = {name: "" for name in self.FIELDS}

    def close(self) -> None:
        self.state.is_open = False

    def fill(self, values: Mapping[str, str | None] | None) -> None:
        """Set field values as the user would type them; unknown names are ignored."""
        if not values:
            return
        for name, value in values.items():
            if name in self.FIELDS and value is not None:
                self.state.fields[name] = value
