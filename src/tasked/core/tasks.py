"""Pure task domain logic - no I/O dependencies."""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum


class InvalidTaskError(ValueError):
    """Raised when a task record breaks the data model."""

    pass


class Status(Enum):
    """Board column a task lives in."""

    TODAY = "today"
    UPCOMING = "upcoming"
    BACKLOG = "backlog"
    COMPLETED = "completed"


class Priority(Enum):
    """Task priority, totally ordered high > medium > low."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def weight(self) -> int:
        return PRIORITY_WEIGHTS[self]


# Canonical column order
STATUSES: tuple[Status, ...] = (Status.TODAY, Status.UPCOMING, Status.BACKLOG, Status.COMPLETED)

PRIORITY_WEIGHTS = {Priority.HIGH: 3, Priority.MEDIUM: 2, Priority.LOW: 1}

FILTER_ALL = "all"
FILTER_HIGH = "high"
FILTERS: tuple[str, ...] = (FILTER_ALL, *(s.value for s in STATUSES), FILTER_HIGH)

SORT_PRIORITY = "priority"
SORT_DUE_DATE = "dueDate"
SORT_CREATED_AT = "createdAt"
SORT_MODES: tuple[str, ...] = (SORT_PRIORITY, SORT_DUE_DATE, SORT_CREATED_AT)


def parse_status(value: str | Status) -> Status:
    """Coerce a raw value into a Status, failing fast on unknown values."""
    if isinstance(value, Status):
        return value
    try:
        return Status(value)
    except ValueError:
        raise InvalidTaskError(f"Unknown status: {value!r}")


def parse_priority(value: str | Priority) -> Priority:
    """Coerce a raw value into a Priority, failing fast on unknown values."""
    if isinstance(value, Priority):
        return value
    try:
        return Priority(value)
    except ValueError:
        raise InvalidTaskError(f"Unknown priority: {value!r}")


def _from_millis(value: int | float) -> datetime:
    try:
        return datetime.fromtimestamp(value / 1000)
    except (OverflowError, OSError, ValueError):
        raise InvalidTaskError(f"Timestamp out of range: {value!r}")


def _to_local(value: datetime) -> datetime:
    """Aware datetimes become naive local time; naive ones are kept."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def _parse_instant(value) -> datetime | None:
    """Parse an ISO datetime or epoch milliseconds into naive local time."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return _to_local(value)
    if isinstance(value, (int, float)):
        return _from_millis(value)
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return _to_local(datetime.fromisoformat(text))
    except ValueError:
        raise InvalidTaskError(f"Invalid timestamp: {value!r}")


def _parse_due(value) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)):
        return _from_millis(value).date()
    try:
        return date.fromisoformat(str(value).split("T")[0])
    except ValueError:
        raise InvalidTaskError(f"Invalid due date: {value!r}")


@dataclass
class Task:
    """A unit of work on the board."""

    id: str
    title: str
    status: Status
    priority: Priority
    created_at: datetime | None
    description: str | None = None
    due_date: date | None = None
    tags: list[str] = field(default_factory=list)
    completed_at: datetime | None = None

    def __post_init__(self):
        if not self.title or not self.title.strip():
            raise InvalidTaskError(f"Task {self.id!r} has an empty title")
        self.status = parse_status(self.status)
        self.priority = parse_priority(self.priority)

    @property
    def is_completed(self) -> bool:
        return self.status == Status.COMPLETED

    def days_until_due(self, as_of: date | None = None) -> int | None:
        """Days until due date (negative if overdue)."""
        if not self.due_date:
            return None
        as_of = as_of or date.today()
        return (self.due_date - as_of).days

    def haystack(self) -> str:
        """Searchable text: title, description and tags."""
        return f"{self.title} {self.description or ''} {' '.join(self.tags)}".casefold()

    def completion_day(self) -> date | None:
        """Calendar day this task counts toward for the streak."""
        if self.completed_at:
            return self.completed_at.date()
        if self.due_date:
            return self.due_date
        if self.created_at:
            return self.created_at.date()
        return None

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create Task from a persisted record."""
        if not data.get("id"):
            raise InvalidTaskError("Task record has no id")
        tags = data.get("tags") or []
        if not isinstance(tags, (list, tuple)):
            raise InvalidTaskError(f"Task {data['id']!r} has non-list tags: {tags!r}")
        return cls(
            id=str(data["id"]),
            title=str(data.get("title") or ""),
            status=parse_status(data.get("status")),
            priority=parse_priority(data.get("priority")),
            created_at=_parse_instant(data.get("createdAt")),
            description=data.get("description") or None,
            due_date=_parse_due(data.get("dueDate")),
            tags=[str(t) for t in tags],
            completed_at=_parse_instant(data.get("completedAt")),
        )

    def to_dict(self) -> dict:
        """Serialize to a persisted record."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "dueDate": self.due_date.isoformat() if self.due_date else None,
            "status": self.status.value,
            "priority": self.priority.value,
            "tags": list(self.tags),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "completedAt": self.completed_at.isoformat() if self.completed_at else None,
        }


def matches_criterion(task: Task, criterion: str) -> bool:
    """Status/priority filter: "all", "high", or a status value."""
    if criterion == FILTER_ALL:
        return True
    if criterion == FILTER_HIGH:
        return task.priority == Priority.HIGH
    return task.status.value == criterion


def filter_tasks(tasks: list[Task], criterion: str = FILTER_ALL, search_term: str = "") -> list[Task]:
    """
    Filter by criterion and free-text search, preserving input order.

    Pure function - no I/O.
    """
    needle = search_term.strip().casefold()
    return [
        t
        for t in tasks
        if matches_criterion(t, criterion) and (not needle or needle in t.haystack())
    ]


def sort_tasks(tasks: list[Task], mode: str) -> list[Task]:
    """
    Sort by priority, due date, or creation time (the fallback).

    Stable for equal keys. Pure function - no I/O.
    """
    if mode == SORT_PRIORITY:
        return sorted(tasks, key=lambda t: -t.priority.weight)

    if mode == SORT_DUE_DATE:
        # No due date sorts last
        return sorted(tasks, key=lambda t: t.due_date.toordinal() if t.due_date else math.inf)

    return sorted(tasks, key=lambda t: -(t.created_at.timestamp() if t.created_at else 0))


def group_by_status(tasks: list[Task]) -> dict[Status, list[Task]]:
    """
    Partition tasks into board columns, keeping order within each column.

    Statuses with no tasks are absent from the result.
    """
    groups: dict[Status, list[Task]] = {}
    for t in tasks:
        groups.setdefault(t.status, []).append(t)
    return groups


def active_tasks(tasks: list[Task]) -> list[Task]:
    return [t for t in tasks if not t.is_completed]


def completed_tasks(tasks: list[Task]) -> list[Task]:
    return [t for t in tasks if t.is_completed]


def focus_trio(tasks: list[Task]) -> list[Task]:
    """Top three active tasks by soonest due date."""
    return sort_tasks(active_tasks(tasks), SORT_DUE_DATE)[:3]


def recent_completions(tasks: list[Task]) -> list[Task]:
    """Latest four completed tasks, newest created first."""
    return sort_tasks(completed_tasks(tasks), SORT_CREATED_AT)[:4]


def find_task(tasks: list[Task], task_id: str) -> Task | None:
    return next((t for t in tasks if t.id == task_id), None)
