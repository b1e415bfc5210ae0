"""Date and label formatting helpers - no I/O dependencies."""

import math
from datetime import date, datetime


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_due_date(due: date | None, as_of: date | None = None) -> str:
    """
    Human label for a due date relative to as_of.

    Pure function - no I/O.
    """
    if not due:
        return "No deadline"
    as_of = as_of or date.today()
    days = (due - as_of).days

    if days == 0:
        return "Due today"
    if days == 1:
        return "Due tomorrow"
    if days < 0:
        return f"Overdue by {_plural(-days, 'day')}"

    return f"{due:%a}, {due:%b} {due.day}"


def is_overdue(due: date | None, as_of: date | None = None) -> bool:
    if not due:
        return False
    as_of = as_of or date.today()
    return due < as_of


def time_since(instant: datetime | None, as_of: datetime | None = None) -> str:
    """Coarse elapsed time label: minutes, hours, then days."""
    if not instant:
        return "moments"
    as_of = as_of or datetime.now()
    minutes = round_half_up((as_of - instant).total_seconds() / 60)
    if minutes < 60:
        return f"{minutes} min"
    hours = round_half_up(minutes / 60)
    if hours < 24:
        return f"{hours} hr"
    days = round_half_up(hours / 24)
    return _plural(days, "day")
