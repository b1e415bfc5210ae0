"""File-based task storage adapter."""

import json
import logging
from pathlib import Path
from typing import Callable

from tasked.core.seed import default_tasks
from tasked.core.tasks import InvalidTaskError, Task

logger = logging.getLogger(__name__)


class JsonTaskStore:
    """
    JSON file task storage.

    Implements TaskStore protocol. The whole collection is one JSON array,
    in positional order.
    """

    def __init__(self, path: Path | str, seed: Callable[[], list[Task]] = default_tasks):
        self.path = Path(path).expanduser()
        self.seed = seed

    def load(self) -> list[Task]:
        """Load tasks, falling back to the seed on a missing or malformed file."""
        if not self.path.exists():
            logger.debug(f"No task file at {self.path}, using seed tasks")
            return self.seed()

        try:
            data = json.loads(self.path.read_text())
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Unable to read tasks from {self.path}: {e}")
            return self.seed()

        if not isinstance(data, list) or not data:
            logger.warning(f"Task file {self.path} holds no task list, using seed tasks")
            return self.seed()

        tasks = []
        seen = set()
        for record in data:
            if not isinstance(record, dict):
                logger.warning(f"Skipping non-object task record: {record!r}")
                continue
            try:
                task = Task.from_dict(record)
            except InvalidTaskError as e:
                logger.warning(f"Skipping invalid task record: {e}")
                continue
            if task.id in seen:
                logger.warning(f"Skipping duplicate task id {task.id!r}")
                continue
            seen.add(task.id)
            tasks.append(task)
        return tasks

    def save(self, tasks: list[Task]) -> None:
        """Write the full collection, replacing the file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps([t.to_dict() for t in tasks], indent=2))
        logger.debug(f"Saved {len(tasks)} tasks to {self.path}")
