"""Pure board assembly and rendering logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime

from .formatting import format_due_date, is_overdue, round_half_up, time_since
from .metrics import DUE_SOON_DAYS, MetricsReport, compute_metrics
from .tasks import (
    FILTER_ALL,
    SORT_PRIORITY,
    STATUSES,
    Priority,
    Status,
    Task,
    filter_tasks,
    focus_trio,
    group_by_status,
    recent_completions,
    sort_tasks,
)

STATUS_LABELS = {
    Status.TODAY: "Today",
    Status.UPCOMING: "Upcoming",
    Status.BACKLOG: "Backlog",
    Status.COMPLETED: "Completed",
}

STATUS_DESCRIPTIONS = {
    Status.TODAY: "What needs your attention now",
    Status.UPCOMING: "On deck for later this week",
    Status.BACKLOG: "Parked ideas and nice-to-haves",
    Status.COMPLETED: "Wins to celebrate",
}

EMPTY_STATES = {
    Status.TODAY: "Nothing urgent. Take a moment to plan or breathe.",
    Status.UPCOMING: "Line up what's next so there are no surprises later.",
    Status.BACKLOG: "Ideas go here until they earn focus.",
    Status.COMPLETED: "Celebrate the progress. You're on a roll!",
}

PRIORITY_LABELS = {
    Priority.HIGH: "High",
    Priority.MEDIUM: "Medium",
    Priority.LOW: "Low",
}


@dataclass
class BoardView:
    """Filtered, sorted and grouped board plus the side panels."""

    columns: dict[Status, list[Task]]
    showing: int
    focus: list[Task]
    recent: list[Task]
    metrics: MetricsReport

    def column(self, status: Status) -> list[Task]:
        return self.columns.get(status, [])


def assemble_board(
    tasks: list[Task],
    criterion: str = FILTER_ALL,
    search_term: str = "",
    sort_mode: str = SORT_PRIORITY,
    as_of: datetime | None = None,
    due_soon_days: int = DUE_SOON_DAYS,
) -> BoardView:
    """
    Assemble the board view from the raw collection.

    Pure function - no I/O. The board path filters, sorts and groups;
    metrics and the side lists are computed over the full collection.
    """
    as_of = as_of or datetime.now()

    filtered = filter_tasks(tasks, criterion, search_term)
    columns = group_by_status(sort_tasks(filtered, sort_mode))

    return BoardView(
        columns=columns,
        showing=len(filtered),
        focus=focus_trio(tasks),
        recent=recent_completions(tasks),
        metrics=compute_metrics(tasks, as_of, due_soon_days),
    )


def format_task_line(task: Task, as_of: date | None = None) -> str:
    """
    Format a single task card as a markdown list item.

    Pure function - no I/O.
    """
    as_of = as_of or date.today()
    due = format_due_date(task.due_date, as_of)
    if is_overdue(task.due_date, as_of):
        due = f"**{due}**"
    check = "x" if task.is_completed else " "
    tags = f" #{' #'.join(task.tags)}" if task.tags else ""
    return f"- [{check}] {task.title} ({due}, {PRIORITY_LABELS[task.priority]}){tags} `{task.id}`"


def format_board_sections(view: BoardView, as_of: datetime | None = None) -> dict[str, str]:
    """
    Format board data into markdown sections.

    Pure function - no I/O.
    Returns dict with keys: board, focus, wins
    """
    as_of = as_of or datetime.now()
    today = as_of.date()

    columns = []
    for status in STATUSES:
        tasks = view.column(status)
        lines = "\n".join(format_task_line(t, today) for t in tasks) or f"_{EMPTY_STATES[status]}_"
        columns.append(
            f"### {STATUS_LABELS[status]} ({len(tasks)})\n"
            f"{STATUS_DESCRIPTIONS[status]}\n\n{lines}"
        )
    board_md = f"{view.showing} showing\n\n" + "\n\n".join(columns)

    focus_md = "\n".join(
        f"- {t.title} ({format_due_date(t.due_date, today)}, {PRIORITY_LABELS[t.priority]})"
        for t in view.focus
    ) or "Choose up to three commitments to stay sharp."

    wins_md = "\n".join(
        f"- {t.title} ({time_since(t.completed_at or t.created_at, as_of)} ago)"
        for t in view.recent
    ) or "Complete a task to start the celebration feed."

    return {
        "board": board_md,
        "focus": focus_md,
        "wins": wins_md,
    }


def format_summary(report: MetricsReport, details: bool = True) -> str:
    """Render the metrics report as markdown."""
    percent = round_half_up(report.completion_rate * 100)
    lines = [
        f"Completion: {percent}%",
        f"Active: {report.active_count} | Due soon: {report.due_soon} | "
        f"High priority: {report.high_priority} | Streak: {report.streak} days",
        "",
        f"**{report.focus_area.title}**: {report.focus_area.body}",
        "",
        report.momentum_comment,
    ]
    if details:
        lines.append("")
        lines.extend(
            f"- {STATUS_LABELS[item.status]}: {item.count} · {item.percentage}%"
            for item in report.by_status
        )
    return "\n".join(lines)
