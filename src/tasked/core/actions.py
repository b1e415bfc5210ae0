"""Pure task mutations - each returns the next collection snapshot."""

import random
import string
from dataclasses import replace
from datetime import date, datetime
from typing import Callable

from .tasks import InvalidTaskError, Priority, Status, Task, parse_priority, parse_status

_BASE36 = string.digits + string.ascii_lowercase


class TaskNotFoundError(KeyError):
    """Raised when a task id is not in the collection."""

    pass


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_task_id(now: datetime | None = None) -> str:
    """Millisecond timestamp in base 36 plus a short random suffix."""
    now = now or datetime.now()
    suffix = "".join(random.choices(_BASE36, k=4))
    return f"{_to_base36(int(now.timestamp() * 1000))}-{suffix}"


def _index_of(tasks: list[Task], task_id: str) -> int:
    for i, t in enumerate(tasks):
        if t.id == task_id:
            return i
    raise TaskNotFoundError(task_id)


def _replace_at(tasks: list[Task], index: int, task: Task) -> list[Task]:
    return tasks[:index] + [task] + tasks[index + 1 :]


def create_task(
    tasks: list[Task],
    title: str,
    *,
    description: str = "",
    due_date: date | None = None,
    status: Status | str = Status.TODAY,
    priority: Priority | str = Priority.MEDIUM,
    tags: list[str] | None = None,
    now: datetime | None = None,
    id_factory: Callable[[datetime], str] = generate_task_id,
) -> list[Task]:
    """
    Add a new task at the front of the collection.

    The title is trimmed and must not be empty; a blank description is dropped.
    """
    title = title.strip()
    if not title:
        raise InvalidTaskError("Task title cannot be empty")
    now = now or datetime.now()

    existing = {t.id for t in tasks}
    task_id = id_factory(now)
    while task_id in existing:
        task_id = id_factory(now)

    task = Task(
        id=task_id,
        title=title,
        status=parse_status(status),
        priority=parse_priority(priority),
        created_at=now,
        description=description.strip() or None,
        due_date=due_date,
        tags=[t.strip() for t in tags or [] if t.strip()],
    )
    return [task] + list(tasks)


def toggle_complete(tasks: list[Task], task_id: str, now: datetime | None = None) -> list[Task]:
    """Flip a task between completed and today, stamping completed_at."""
    index = _index_of(tasks, task_id)
    task = tasks[index]
    if task.is_completed:
        updated = replace(task, status=Status.TODAY, completed_at=None)
    else:
        updated = replace(task, status=Status.COMPLETED, completed_at=now or datetime.now())
    return _replace_at(tasks, index, updated)


def move_task(
    tasks: list[Task],
    task_id: str,
    status: Status | str,
    now: datetime | None = None,
    stamp_completion: bool = False,
) -> list[Task]:
    """
    Move a task to another column.

    completed_at is only touched when stamp_completion is set: entering
    completed stamps it, leaving completed clears it.
    """
    status = parse_status(status)
    index = _index_of(tasks, task_id)
    task = tasks[index]
    completed_at = task.completed_at
    if stamp_completion:
        if status == Status.COMPLETED:
            completed_at = completed_at or now or datetime.now()
        else:
            completed_at = None
    return _replace_at(tasks, index, replace(task, status=status, completed_at=completed_at))


def delete_task(tasks: list[Task], task_id: str) -> list[Task]:
    index = _index_of(tasks, task_id)
    return tasks[:index] + tasks[index + 1 :]
