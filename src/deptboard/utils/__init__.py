"""Utility modules for deptboard."""

from .dates import format_date, format_datetime, local_input_value, now_local, parse_timestamp

__all__ = [
    "format_date",
    "format_datetime",
    "local_input_value",
    "now_local",
    "parse_timestamp",
]
