"""Shared fixtures: a fixed reference instant and a task factory."""

from datetime import datetime, timedelta
from itertools import count

import pytest

from tasked.core.tasks import Priority, Status, Task


@pytest.fixture
def now():
    return datetime(2025, 1, 15, 10, 0)


@pytest.fixture
def today(now):
    return now.date()


@pytest.fixture
def make_task(now):
    """Build tasks with sensible defaults; ids are sequential."""
    ids = count(1)

    def _make(
        title: str = "Task",
        status: Status | str = Status.TODAY,
        priority: Priority | str = Priority.MEDIUM,
        due_in: int | None = None,
        created_hours_ago: int | None = 1,
        **kwargs,
    ) -> Task:
        due_date = now.date() + timedelta(days=due_in) if due_in is not None else None
        created_at = now - timedelta(hours=created_hours_ago) if created_hours_ago is not None else None
        task_id = kwargs.pop("id", None) or str(next(ids))
        return Task(
            id=task_id,
            title=title,
            status=status,
            priority=priority,
            created_at=created_at,
            due_date=due_date,
            **kwargs,
        )

    return _make
