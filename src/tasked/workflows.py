"""Shared workflow layer between the CLI and the task store.

Each mutating workflow loads the collection, applies a pure action,
saves the result, and returns the affected task.
"""

import logging
from datetime import date, datetime

from .adapters.json_store import JsonTaskStore
from .config import Config
from .core import actions
from .core.board import BoardView, assemble_board
from .core.metrics import MetricsReport, compute_metrics
from .core.tasks import Task, find_task
from .ports import TaskStore

logger = logging.getLogger(__name__)


def get_store(config: Config) -> TaskStore:
    """Resolve the task file from config."""
    return JsonTaskStore(config.tasks_path)


def load_board(
    config: Config,
    criterion: str | None = None,
    search_term: str = "",
    sort_mode: str | None = None,
    as_of: datetime | None = None,
) -> BoardView:
    """Load tasks and assemble the board using config defaults."""
    tasks = get_store(config).load()
    return assemble_board(
        tasks,
        criterion=criterion or config.default_filter,
        search_term=search_term,
        sort_mode=sort_mode or config.default_sort,
        as_of=as_of,
        due_soon_days=config.due_soon_days,
    )


def load_metrics(config: Config, as_of: datetime | None = None) -> MetricsReport:
    tasks = get_store(config).load()
    return compute_metrics(tasks, as_of, config.due_soon_days)


def add_task(
    config: Config,
    title: str,
    description: str = "",
    due_date: date | None = None,
    status: str = "today",
    priority: str = "medium",
    tags: list[str] | None = None,
    now: datetime | None = None,
) -> Task:
    """Create a task and save it. Returns the new task."""
    store = get_store(config)
    tasks = actions.create_task(
        store.load(),
        title,
        description=description,
        due_date=due_date,
        status=status,
        priority=priority,
        tags=tags,
        now=now,
    )
    store.save(tasks)
    logger.info(f"Created task {tasks[0].id}")
    return tasks[0]


def complete_task(config: Config, task_id: str, now: datetime | None = None) -> Task:
    """Toggle a task's completion and save. Returns the updated task."""
    store = get_store(config)
    tasks = actions.toggle_complete(store.load(), task_id, now)
    store.save(tasks)
    task = find_task(tasks, task_id)
    logger.info(f"Toggled task {task_id} to {task.status.value}")
    return task


def move_task(config: Config, task_id: str, status: str, now: datetime | None = None) -> Task:
    """Move a task to another status and save. Returns the updated task."""
    store = get_store(config)
    tasks = actions.move_task(
        store.load(),
        task_id,
        status,
        now=now,
        stamp_completion=config.move_stamps_completion,
    )
    store.save(tasks)
    logger.info(f"Moved task {task_id} to {status}")
    return find_task(tasks, task_id)


def remove_task(config: Config, task_id: str) -> Task:
    """Delete a task and save. Returns the removed task."""
    store = get_store(config)
    tasks = store.load()
    removed = find_task(tasks, task_id)
    store.save(actions.delete_task(tasks, task_id))
    logger.info(f"Removed task {task_id}")
    return removed
