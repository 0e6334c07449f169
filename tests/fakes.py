# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable, Sequence

from jivox.errors import DataHandlerError
from jivox.tasks.task_models import Task


class InMemoryTaskRepo:
    """
    TaskRepo that keeps everything in memory.

    - load() returns the seeded tasks
    - save() records a rendered snapshot so tests can assert what was persisted
    """

    def __init__(self, tasks: Sequence[Task] | None = None) -> None:
        self.tasks: list[Task] = list(tasks or [])
        self.snapshots: list[list[str]] = []

    def load(self) -> Sequence[Task]:
        return list(self.tasks)

    def save(self, tasks: Iterable[Task]) -> None:
        self.tasks = list(tasks)
        self.snapshots.append([str(t) for t in self.tasks])

    @property
    def save_count(self) -> int:
        return len(self.snapshots)


class FailingTaskRepo(InMemoryTaskRepo):
    """Loads fine, but every save fails like a full disk would."""

    def save(self, tasks: Iterable[Task]) -> None:
        raise DataHandlerError("Could not save tasks: disk full")


class CorruptTaskRepo(InMemoryTaskRepo):
    def load(self) -> Sequence[Task]:
        raise DataHandlerError("Corrupt task record at jivox.txt:1: unknown task type 'X'")
