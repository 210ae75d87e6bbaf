"""
Display labels and tones for task priority and status.

Tones are colour family names (``rose``, ``amber``, ...). Render targets map
them to whatever their environment styles with.
"""

from deptboard.core.api.models import TaskPriority, TaskStatus

PRIORITY_LABELS = {
    TaskPriority.HIGH: "High",
    TaskPriority.MEDIUM: "Medium",
    TaskPriority.LOW: "Low",
}

PRIORITY_TONES = {
    TaskPriority.HIGH: "rose",
    TaskPriority.MEDIUM: "amber",
    TaskPriority.LOW: "slate",
}

STATUS_LABELS = {
    TaskStatus.PENDING: "Pending",
    TaskStatus.IN_PROGRESS: "In progress",
    TaskStatus.COMPLETED: "Completed",
    TaskStatus.HOLD: "On hold",
}

STATUS_TONES = {
    TaskStatus.PENDING: "amber",
    TaskStatus.IN_PROGRESS: "indigo",
    TaskStatus.COMPLETED: "emerald",
    TaskStatus.HOLD: "slate",
}


def _priority(value: str) -> TaskPriority:
    try:
        return TaskPriority(value)
    except ValueError:
        return TaskPriority.LOW


def _status(value: str) -> TaskStatus:
    try:
        return TaskStatus(value)
    except ValueError:
        return TaskStatus.PENDING


def priority_label(priority: str) -> str:
    """Label for a priority; anything unrecognized reads as Low."""
    return PRIORITY_LABELS[_priority(priority)]


def priority_tone(priority: str) -> str:
    return PRIORITY_TONES[_priority(priority)]


def status_label(status: str) -> str:
    """Label for a status; anything unrecognized reads as Pending."""
    return STATUS_LABELS[_status(status)]


def status_tone(status: str) -> str:
    return STATUS_TONES[_status(status)]


def initial(name: str) -> str:
    """First character of a name, used for avatar badges."""
    return name[:1]
