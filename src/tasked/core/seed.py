"""Default task collection used when nothing has been saved yet."""

from datetime import datetime, timedelta

from .tasks import Priority, Status, Task


def default_tasks(now: datetime | None = None) -> list[Task]:
    """Sample board with due dates relative to now."""
    now = now or datetime.now()
    today = now.date()

    def hours_ago(hours: int) -> datetime:
        return now - timedelta(hours=hours)

    return [
        Task(
            id="kickoff",
            title="Sprint planning for Q4",
            description="Finalize scope, align owners, and set capacity targets for the upcoming sprint.",
            due_date=today,
            status=Status.TODAY,
            priority=Priority.HIGH,
            tags=["Planning", "Team"],
            created_at=hours_ago(12),
        ),
        Task(
            id="retro",
            title="Gather retro notes",
            description="Collect learnings and kudos from the previous iteration in Confluence.",
            due_date=today + timedelta(days=1),
            status=Status.UPCOMING,
            priority=Priority.MEDIUM,
            tags=["Process"],
            created_at=hours_ago(6),
        ),
        Task(
            id="ux-audit",
            title="UX polish checklist",
            description="Audit empty states, micro-copy, and accessibility contrast before launch.",
            due_date=today + timedelta(days=3),
            status=Status.UPCOMING,
            priority=Priority.HIGH,
            tags=["Design"],
            created_at=hours_ago(24),
        ),
        Task(
            id="pipeline",
            title="Pipeline hardening",
            description="Add automated smoke tests and flaky test quarantine to CI.",
            due_date=today + timedelta(days=5),
            status=Status.BACKLOG,
            priority=Priority.MEDIUM,
            tags=["DevOps", "Automation"],
            created_at=hours_ago(48),
        ),
        Task(
            id="docs",
            title="Update api docs",
            description="Document the new webhook endpoints and example payloads.",
            due_date=today - timedelta(days=1),
            status=Status.COMPLETED,
            priority=Priority.LOW,
            tags=["Docs"],
            created_at=hours_ago(36),
            completed_at=hours_ago(2),
        ),
    ]
