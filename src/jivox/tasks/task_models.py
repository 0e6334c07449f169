# src/jivox/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from typing import Any, ClassVar

from ..errors import ValidationError

DISPLAY_FORMAT = "%d %b %Y %H:%M"


class TaskKind(StrEnum):
    """
    Single-letter tag of a task variant.

    The same letter is shown in rendered tasks and written to the store.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


def format_display(value: datetime) -> str:
    return value.strftime(DISPLAY_FORMAT)


@dataclass(slots=True)
class Task:
    """
    Shared part of every task.

    The variants below form a closed set; code that dispatches on tasks
    should handle exactly Todo, Deadline and Event (see AnyTask).
    """

    kind: ClassVar[TaskKind]

    description: str
    done: bool = field(default=False, kw_only=True)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "description" and hasattr(self, "description"):
            raise AttributeError("task description is read-only")
        object.__setattr__(self, name, value)

    def mark(self) -> None:
        self.done = True

    def unmark(self) -> None:
        self.done = False

    @property
    def deadline(self) -> datetime | None:
        """Primary datetime used for date queries; None when the task is undated."""
        return None

    def falls_on(self, day: date) -> bool:
        return False

    def _suffix(self) -> str:
        return ""

    def __str__(self) -> str:
        mark = "X" if self.done else " "
        return f"[{self.kind}][{mark}] {self.description}{self._suffix()}"


@dataclass(slots=True)
class Todo(Task):
    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass(slots=True)
class Deadline(Task):
    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    due: datetime

    @property
    def deadline(self) -> datetime | None:
        return self.due

    def falls_on(self, day: date) -> bool:
        return self.due.date() == day

    def _suffix(self) -> str:
        return f" (by: {format_display(self.due)})"


@dataclass(slots=True)
class Event(Task):
    kind: ClassVar[TaskKind] = TaskKind.EVENT

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValidationError("Invalid event! The end time is before the start time.")

    @property
    def deadline(self) -> datetime | None:
        return self.start

    def falls_on(self, day: date) -> bool:
        return self.start.date() <= day <= self.end.date()

    def _suffix(self) -> str:
        return f" (from: {format_display(self.start)} to: {format_display(self.end)})"


AnyTask = Todo | Deadline | Event
