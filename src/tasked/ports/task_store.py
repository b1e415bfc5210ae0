"""Task store interface."""

from typing import Protocol, runtime_checkable

from tasked.core.tasks import Task


@runtime_checkable
class TaskStore(Protocol):
    """Interface for loading and saving the full task collection."""

    def load(self) -> list[Task]:
        """Load all tasks. Falls back to a seed collection when empty."""
        ...

    def save(self, tasks: list[Task]) -> None:
        """Persist the full collection, replacing what was stored."""
        ...
