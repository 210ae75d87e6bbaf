"""
Timestamp helpers shared by the views and the forms.

Due dates arrive in whatever form the backend stored them: a form value such
as ``2024-05-01T09:00`` (local time, no offset), a date such as
``2024-05-01``, or a full ISO-8601 string with ``Z`` or an offset. Naive
values are read as local time. Everything is returned timezone-aware so
comparisons never mix naive and aware datetimes.
"""

from __future__ import annotations

from datetime import date, datetime


def now_local() -> datetime:
    """Current time as an aware datetime in the local zone."""
    return datetime.now().astimezone()


def parse_timestamp(value: str | None) -> datetime | None:
    """
    Parse a stored timestamp.

    Args:
        value: Timestamp string, or None

    Returns:
        Aware datetime, or None when the value is empty or unparseable

    Example:
        >>> parse_timestamp("2024-05-01T09:00").hour
        9
        >>> parse_timestamp("not a date") is None
        True
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        try:
            parsed = datetime.combine(date.fromisoformat(text[:10]), datetime.min.time())
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.astimezone()
    return parsed


def format_date(value: str | None, empty: str = "-") -> str:
    """Local calendar date of a timestamp (``2024-05-01``), or ``empty``."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return empty
    return parsed.astimezone().strftime("%Y-%m-%d")


def format_datetime(value: str | None, empty: str = "") -> str:
    """Local date and time of a timestamp (``2024-05-01 09:30``), or ``empty``."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return empty
    return parsed.astimezone().strftime("%Y-%m-%d %H:%M")


def local_input_value(moment: datetime | None = None) -> str:
    """
    Format a moment the way a datetime-local form field holds it.

    Args:
        moment: Time to format (defaults to now); aware values are
            converted to local time first

    Returns:
        ``YYYY-MM-DDTHH:MM`` in local time
    """
    if moment is None:
        moment = now_local()
    elif moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.strftime("%Y-%m-%dT%H:%M")
