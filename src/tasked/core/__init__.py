"""Functional core - pure business logic with no I/O."""

from .tasks import (
    InvalidTaskError,
    Priority,
    Status,
    Task,
    filter_tasks,
    focus_trio,
    group_by_status,
    recent_completions,
    sort_tasks,
)
from .metrics import FocusArea, MetricsReport, StatusCount, calculate_streak, compute_metrics
from .formatting import format_due_date, time_since
from .board import BoardView, assemble_board, format_board_sections, format_summary
from .actions import TaskNotFoundError, create_task, delete_task, move_task, toggle_complete
from .seed import default_tasks

__all__ = [
    # Tasks
    "InvalidTaskError",
    "Priority",
    "Status",
    "Task",
    "filter_tasks",
    "focus_trio",
    "group_by_status",
    "recent_completions",
    "sort_tasks",
    # Metrics
    "FocusArea",
    "MetricsReport",
    "StatusCount",
    "calculate_streak",
    "compute_metrics",
    # Formatting
    "format_due_date",
    "time_since",
    # Board
    "BoardView",
    "assemble_board",
    "format_board_sections",
    "format_summary",
    # Actions
    "TaskNotFoundError",
    "create_task",
    "delete_task",
    "move_task",
    "toggle_complete",
    # Seed
    "default_tasks",
]
