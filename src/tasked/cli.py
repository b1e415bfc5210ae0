"""Tasked CLI - task board and momentum summary."""

import json
import logging
import sys
from dataclasses import asdict
from datetime import datetime

import click

from .config import load_config
from .core.actions import TaskNotFoundError
from .core.board import format_board_sections, format_summary
from .core.tasks import FILTERS, SORT_MODES, STATUSES, InvalidTaskError, Priority
from .workflows import add_task, complete_task, load_board, load_metrics, move_task, remove_task

STATUS_CHOICES = [s.value for s in STATUSES]
PRIORITY_CHOICES = [p.value for p in Priority]


def _fail(e: Exception) -> None:
    if isinstance(e, TaskNotFoundError):
        click.echo(f"Error: No task with id {e.args[0]}", err=True)
    else:
        click.echo(f"Error: {e}", err=True)
    sys.exit(1)


def _report_to_json(report) -> dict:
    data = asdict(report)
    data["by_status"] = [
        {"status": item.status.value, "count": item.count, "percentage": item.percentage}
        for item in report.by_status
    ]
    return data


@click.group()
@click.version_option(package_name="tasked")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Tasked - your command center for meaningful work."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command()
@click.option("--filter", "-f", "criterion", type=click.Choice(FILTERS), default=None,
              help="Status filter, or 'high' for high priority")
@click.option("--search", "-s", "search_term", default="", help="Search title, notes and tags")
@click.option("--sort", "sort_mode", type=click.Choice(SORT_MODES), default=None,
              help="Sort order within each column")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def board(criterion: str | None, search_term: str, sort_mode: str | None, as_json: bool):
    """Show the task board."""
    config = load_config()
    now = datetime.now()
    view = load_board(config, criterion, search_term, sort_mode, as_of=now)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "showing": view.showing,
                    "columns": {
                        s.value: [t.to_dict() for t in view.column(s)] for s in STATUSES
                    },
                },
                indent=2,
            )
        )
        return

    click.echo(format_board_sections(view, now)["board"])


@main.command()
@click.option("--details/--no-details", default=True, help="Show per-status breakdown")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def summary(details: bool, as_json: bool):
    """Show completion metrics and the focus recommendation."""
    config = load_config()
    report = load_metrics(config)

    if as_json:
        click.echo(json.dumps(_report_to_json(report), indent=2))
    else:
        click.echo(format_summary(report, details))


@main.command()
def focus():
    """Show the three most pressing active tasks."""
    config = load_config()
    now = datetime.now()
    view = load_board(config, as_of=now)
    click.echo(format_board_sections(view, now)["focus"])


@main.command()
def wins():
    """Show recently completed tasks."""
    config = load_config()
    now = datetime.now()
    view = load_board(config, as_of=now)
    click.echo(format_board_sections(view, now)["wins"])


@main.command()
@click.argument("title")
@click.option("--notes", "-n", default="", help="Optional notes or next steps")
@click.option("--status", type=click.Choice(STATUS_CHOICES), default="today")
@click.option("--priority", "-p", type=click.Choice(PRIORITY_CHOICES), default="medium")
@click.option("--due", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="Due date (YYYY-MM-DD)")
@click.option("--tag", "-t", "tags", multiple=True, help="Tag (repeatable)")
def add(title: str, notes: str, status: str, priority: str, due: datetime | None, tags: tuple[str, ...]):
    """Add a task."""
    config = load_config()
    try:
        task = add_task(
            config,
            title,
            description=notes,
            due_date=due.date() if due else None,
            status=status,
            priority=priority,
            tags=list(tags),
        )
    except InvalidTaskError as e:
        _fail(e)
    click.echo(f"✓ Added {task.title} ({task.id})")


@main.command()
@click.argument("task_id")
def done(task_id: str):
    """Toggle a task between completed and today."""
    config = load_config()
    try:
        task = complete_task(config, task_id)
    except TaskNotFoundError as e:
        _fail(e)
    if task.is_completed:
        click.echo(f"✓ Completed {task.title}")
    else:
        click.echo(f"↺ Reopened {task.title}")


@main.command()
@click.argument("task_id")
@click.argument("status", type=click.Choice(STATUS_CHOICES))
def move(task_id: str, status: str):
    """Move a task to another column."""
    config = load_config()
    try:
        task = move_task(config, task_id, status)
    except TaskNotFoundError as e:
        _fail(e)
    click.echo(f"Moved {task.title} to {status}")


@main.command("rm")
@click.argument("task_id")
def rm(task_id: str):
    """Remove a task."""
    config = load_config()
    try:
        task = remove_task(config, task_id)
    except TaskNotFoundError as e:
        _fail(e)
    click.echo(f"Removed {task.title}")


if __name__ == "__main__":
    main()
