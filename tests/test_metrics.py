"""Tests for completion analytics."""

from datetime import datetime, timedelta

import pytest

from tasked.core.metrics import (
    STREAK_LIMIT,
    Signals,
    calculate_streak,
    compute_metrics,
    count_due_soon,
    determine_focus_area,
    momentum_comment,
    theme_variant,
)
from tasked.core.tasks import STATUSES, Priority, Status


def done_on(make_task, now, days_ago: int, **kwargs):
    """Completed task stamped at noon, days_ago days before now."""
    stamp = datetime.combine(now.date() - timedelta(days=days_ago), datetime.min.time()) + timedelta(hours=12)
    return make_task(status=Status.COMPLETED, completed_at=stamp, **kwargs)


class TestComputeMetrics:
    def test_empty_collection(self, now):
        report = compute_metrics([], now)
        assert report.total == 0
        assert report.completion_rate == 0
        assert report.streak == 0
        assert report.due_soon == 0
        assert report.high_priority == 0
        assert report.active_count == 0
        assert [s.status for s in report.by_status] == list(STATUSES)
        assert all(s.count == 0 and s.percentage == 0 for s in report.by_status)

    def test_completion_rate(self, make_task, now):
        tasks = [make_task(status="completed") for _ in range(3)] + [make_task()]
        report = compute_metrics(tasks, now)
        assert report.completion_rate == 0.75
        assert report.completed_count == 3
        assert report.active_count == 1

    def test_high_priority_counts_only_active(self, make_task, now):
        tasks = [
            make_task(priority=Priority.HIGH),
            make_task(priority=Priority.HIGH, status="backlog"),
            make_task(priority=Priority.HIGH, status="completed"),
            make_task(priority=Priority.LOW),
        ]
        assert compute_metrics(tasks, now).high_priority == 2

    def test_by_status_percentages(self, make_task, now):
        tasks = [
            make_task(status="today"),
            make_task(status="upcoming"),
            make_task(status="upcoming"),
        ]
        report = compute_metrics(tasks, now)
        shares = {s.status: (s.count, s.percentage) for s in report.by_status}
        assert shares[Status.TODAY] == (1, 33)
        assert shares[Status.UPCOMING] == (2, 67)
        assert shares[Status.BACKLOG] == (0, 0)
        assert shares[Status.COMPLETED] == (0, 0)

    def test_percentages_round_half_up(self, make_task, now):
        tasks = [make_task(status="today")] + [make_task(status="backlog") for _ in range(7)]
        report = compute_metrics(tasks, now)
        assert report.by_status[0].percentage == 13  # 12.5

    def test_percentages_sum_close_to_100(self, make_task, now):
        tasks = [make_task(status=s) for s in ("today", "upcoming", "backlog", "completed", "today", "backlog")]
        report = compute_metrics(tasks, now)
        assert abs(sum(s.percentage for s in report.by_status) - 100) <= len(STATUSES)

    def test_eight_of_ten_completed_celebrates(self, make_task, now):
        tasks = [make_task(status="completed") for _ in range(8)]
        tasks += [make_task(due_in=0), make_task(due_in=1)]
        report = compute_metrics(tasks, now)
        assert report.completion_rate == 0.8
        assert report.due_soon == 2
        assert report.focus_area.key == "celebrate"
        assert report.momentum_comment == "Momentum high. Keep stacking wins!"

    def test_bounds(self, make_task, now):
        tasks = [done_on(make_task, now, d) for d in range(15)] + [make_task()]
        report = compute_metrics(tasks, now)
        assert 0 <= report.completion_rate <= 1
        assert 0 <= report.streak <= STREAK_LIMIT


class TestDueSoon:
    def test_due_today_counts(self, make_task, now):
        assert count_due_soon([make_task(due_in=0)], now) == 1

    def test_due_yesterday_excluded(self, make_task, now):
        assert count_due_soon([make_task(due_in=-1)], now) == 0

    def test_window_is_inclusive(self, make_task, now):
        tasks = [make_task(due_in=3), make_task(due_in=4)]
        assert count_due_soon(tasks, now) == 1

    def test_no_due_date_never_counts(self, make_task, now):
        assert count_due_soon([make_task()], now) == 0

    def test_completed_tasks_excluded(self, make_task, now):
        assert count_due_soon([make_task(status="completed", due_in=1)], now) == 0

    def test_custom_window(self, make_task, now):
        tasks = [make_task(due_in=5)]
        assert count_due_soon(tasks, now, due_soon_days=3) == 0
        assert count_due_soon(tasks, now, due_soon_days=7) == 1


class TestStreak:
    def test_no_completed_tasks(self, now):
        assert calculate_streak([], now) == 0

    def test_three_consecutive_days_then_gap(self, make_task, now):
        tasks = [done_on(make_task, now, d) for d in (0, 1, 2, 4)]
        assert calculate_streak(tasks, now) == 3

    def test_nothing_today_breaks_streak(self, make_task, now):
        tasks = [done_on(make_task, now, d) for d in (1, 2, 3)]
        assert calculate_streak(tasks, now) == 0

    def test_multiple_completions_same_day_count_once(self, make_task, now):
        tasks = [done_on(make_task, now, 0), done_on(make_task, now, 0), done_on(make_task, now, 1)]
        assert calculate_streak(tasks, now) == 2

    def test_capped_at_limit(self, make_task, now):
        tasks = [done_on(make_task, now, d) for d in range(30)]
        assert calculate_streak(tasks, now) == STREAK_LIMIT == 10

    def test_falls_back_to_due_date(self, make_task, now):
        tasks = [make_task(status="completed", due_in=0), make_task(status="completed", due_in=-1)]
        assert calculate_streak(tasks, now) == 2

    def test_falls_back_to_created_at(self, make_task, now):
        tasks = [make_task(status="completed", created_hours_ago=2)]
        assert calculate_streak(tasks, now) == 1


class TestFocusArea:
    @pytest.mark.parametrize(
        "rate, active, due_soon, expected",
        [
            (0.8, 10, 10, "celebrate"),
            (0.5, 5, 2, "deadlines"),
            (0.0, 10, 4, "deadlines"),
            (0.0, 10, 3, "streamline"),
            (0.0, 6, 0, "streamline"),
            (0.0, 5, 1, "habit"),
            (0.0, 0, 0, "habit"),
        ],
    )
    def test_rules_in_order(self, rate, active, due_soon, expected):
        signals = Signals(completion_rate=rate, active_count=active, due_soon=due_soon)
        assert determine_focus_area(signals).key == expected

    def test_deadline_threshold_never_below_two(self):
        signals = Signals(completion_rate=0.0, active_count=1, due_soon=1)
        assert determine_focus_area(signals).key == "habit"


class TestMessages:
    @pytest.mark.parametrize(
        "rate, expected",
        [
            (1.0, "Momentum high. Keep stacking wins!"),
            (0.8, "Momentum high. Keep stacking wins!"),
            (0.79, "Solid pace. What's the next domino?"),
            (0.5, "Solid pace. What's the next domino?"),
            (0.49, "Plot your next move and reclaim the day."),
        ],
    )
    def test_momentum_comment(self, rate, expected):
        assert momentum_comment(rate) == expected

    @pytest.mark.parametrize(
        "rate, expected",
        [(0.85, "celebrate"), (0.84, "momentum"), (0.5, "momentum"), (0.2, "plan")],
    )
    def test_theme_variant(self, rate, expected):
        assert theme_variant(rate) == expected
