# src/jivox/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date
from typing import overload

from ..errors import TaskIndexError
from .task_models import Task


class TaskView(Sequence[Task]):
    """Read-only, restartable view over the live task list."""

    __slots__ = ("_items",)

    def __init__(self, items: list[Task]) -> None:
        self._items = items

    @overload
    def __getitem__(self, index: int) -> Task: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Task]: ...

    def __getitem__(self, index: int | slice) -> Task | Sequence[Task]:
        if isinstance(index, slice):
            return tuple(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)


class TaskList:
    """
    Ordered, mutable collection of tasks.

    Insertion order is the display order. Indices here are 0-based;
    translation from the user's 1-based numbers happens in the Engine.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def _check_index(self, index: int) -> None:
        # Negative indices must not wrap around to the end of the list.
        if index < 0 or index >= len(self._tasks):
            raise TaskIndexError(f"Oops! There are only {len(self._tasks)} Tasks!")

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def delete(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks.pop(index)

    def insert(self, index: int, task: Task) -> None:
        """Put a task back at a position (used to undo a failed delete)."""
        self._tasks.insert(index, task)

    @property
    def length(self) -> int:
        return len(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def all(self) -> TaskView:
        return TaskView(self._tasks)

    def find(self, text: str) -> list[tuple[int, Task]]:
        """Case-sensitive substring match on descriptions, with 1-based positions."""
        return [(i, t) for i, t in enumerate(self._tasks, start=1) if text in t.description]

    def on_date(self, day: date) -> list[tuple[int, Task]]:
        return [(i, t) for i, t in enumerate(self._tasks, start=1) if t.falls_on(day)]
