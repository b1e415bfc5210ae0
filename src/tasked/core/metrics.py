"""Pure completion analytics - no I/O dependencies."""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable

from .formatting import round_half_up
from .tasks import STATUSES, Priority, Status, Task, active_tasks, completed_tasks

# Streak walks back at most this many days, so it never reports more.
STREAK_LIMIT = 10

DUE_SOON_DAYS = 3


@dataclass
class StatusCount:
    """Share of the collection in one status."""

    status: Status
    count: int
    percentage: int


@dataclass
class FocusArea:
    """A single recommended action."""

    key: str
    title: str
    body: str


@dataclass
class Signals:
    """Inputs the focus-area rules are evaluated against."""

    completion_rate: float
    active_count: int
    due_soon: int


@dataclass
class MetricsReport:
    """Aggregate analytics over the full task collection."""

    total: int
    completed_count: int
    active_count: int
    completion_rate: float
    due_soon: int
    high_priority: int
    streak: int
    by_status: list[StatusCount]
    focus_area: FocusArea
    momentum_comment: str
    theme: str


CELEBRATE = FocusArea(
    key="celebrate",
    title="Celebrate & optimize",
    body="Completion is above 80%. Look for light refactors, share updates, "
    "and tee up tomorrow's wins.",
)
DEADLINES = FocusArea(
    key="deadlines",
    title="Tackle upcoming deadlines",
    body="Several tasks land within the next three days. Block focus time or "
    "reassign where needed.",
)
STREAMLINE = FocusArea(
    key="streamline",
    title="Streamline the workload",
    body="There's a lot in play. Prioritize the top three outcomes and nudge the "
    "rest to backlog or delegate.",
)
HABIT = FocusArea(
    key="habit",
    title="Build the habit",
    body="Light load today. Claim a quick win and set stretch goals for the week.",
)

# Evaluated top-down, first match wins
FOCUS_RULES: list[tuple[Callable[[Signals], bool], FocusArea]] = [
    (lambda s: s.completion_rate >= 0.8, CELEBRATE),
    (lambda s: s.due_soon >= max(2, math.ceil(s.active_count * 0.4)), DEADLINES),
    (lambda s: s.active_count >= 6, STREAMLINE),
    (lambda s: True, HABIT),
]

MOMENTUM_RULES: list[tuple[Callable[[float], bool], str]] = [
    (lambda rate: rate >= 0.8, "Momentum high. Keep stacking wins!"),
    (lambda rate: rate >= 0.5, "Solid pace. What's the next domino?"),
    (lambda rate: True, "Plot your next move and reclaim the day."),
]

THEME_RULES: list[tuple[Callable[[float], bool], str]] = [
    (lambda rate: rate >= 0.85, "celebrate"),
    (lambda rate: rate >= 0.5, "momentum"),
    (lambda rate: True, "plan"),
]


def _first_match(rules, value):
    return next(result for predicate, result in rules if predicate(value))


def determine_focus_area(signals: Signals) -> FocusArea:
    return _first_match(FOCUS_RULES, signals)


def momentum_comment(completion_rate: float) -> str:
    return _first_match(MOMENTUM_RULES, completion_rate)


def theme_variant(completion_rate: float) -> str:
    """Visual theme for the dashboard: celebrate, momentum or plan."""
    return _first_match(THEME_RULES, completion_rate)


def calculate_streak(completed: list[Task], as_of: datetime | None = None) -> int:
    """
    Consecutive days up to and including today with a completed task.

    Only the last STREAK_LIMIT days are checked, so longer streaks
    report as STREAK_LIMIT.
    """
    if not completed:
        return 0
    as_of = as_of or datetime.now()
    days = {d for d in (t.completion_day() for t in completed) if d is not None}

    today = as_of.date()
    streak = 0
    for offset in range(STREAK_LIMIT):
        if today - timedelta(days=offset) not in days:
            break
        streak += 1
    return streak


def count_due_soon(
    tasks: list[Task],
    as_of: datetime | None = None,
    due_soon_days: int = DUE_SOON_DAYS,
) -> int:
    """Active tasks due between today and due_soon_days ahead, inclusive."""
    as_of = as_of or datetime.now()
    today = as_of.date()
    count = 0
    for t in active_tasks(tasks):
        days = t.days_until_due(today)
        if days is not None and 0 <= days <= due_soon_days:
            count += 1
    return count


def compute_metrics(
    tasks: list[Task],
    as_of: datetime | None = None,
    due_soon_days: int = DUE_SOON_DAYS,
) -> MetricsReport:
    """
    Compute the summary analytics over the full collection.

    Pure function - no I/O. Recomputed from scratch on every call.
    """
    as_of = as_of or datetime.now()
    total = len(tasks)
    completed = completed_tasks(tasks)
    active = active_tasks(tasks)
    completion_rate = len(completed) / max(1, total)

    due_soon = count_due_soon(tasks, as_of, due_soon_days)
    high_priority = sum(1 for t in active if t.priority == Priority.HIGH)

    by_status = []
    for status in STATUSES:
        count = sum(1 for t in tasks if t.status == status)
        percentage = round_half_up(count / total * 100) if total else 0
        by_status.append(StatusCount(status=status, count=count, percentage=percentage))

    signals = Signals(
        completion_rate=completion_rate,
        active_count=len(active),
        due_soon=due_soon,
    )

    return MetricsReport(
        total=total,
        completed_count=len(completed),
        active_count=len(active),
        completion_rate=completion_rate,
        due_soon=due_soon,
        high_priority=high_priority,
        streak=calculate_streak(completed, as_of),
        by_status=by_status,
        focus_area=determine_focus_area(signals),
        momentum_comment=momentum_comment(completion_rate),
        theme=theme_variant(completion_rate),
    )
