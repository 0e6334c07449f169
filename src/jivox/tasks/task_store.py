# src/jivox/tasks/task_store.py

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from ..errors import DataHandlerError, ValidationError
from .task_models import Deadline, Event, Task, TaskKind, Todo

logger = logging.getLogger(__name__)

SEPARATOR = " | "

# Total fields per record, including the kind tag and the done flag.
_FIELD_COUNTS: dict[TaskKind, int] = {
    TaskKind.TODO: 3,
    TaskKind.DEADLINE: 4,
    TaskKind.EVENT: 5,
}


def _dt_to_str(value: datetime) -> str:
    # isoformat always zero-pads the year to four digits.
    return value.isoformat(timespec="minutes")


def _str_to_dt(raw: str) -> datetime:
    value = datetime.fromisoformat(raw)
    if value.tzinfo is not None or value.second or value.microsecond:
        raise ValueError(f"unexpected timestamp {raw!r}")
    return value


def encode_task(task: Task) -> str:
    """
    Serialize one task into a single record line (without the newline).

    Raises ValueError if the description would span more than one record.
    """
    if "\n" in task.description:
        raise ValueError("task description contains a newline")
    fields = [str(task.kind), "1" if task.done else "0", task.description]
    if isinstance(task, Deadline):
        fields.append(_dt_to_str(task.due))
    elif isinstance(task, Event):
        fields.extend((_dt_to_str(task.start), _dt_to_str(task.end)))
    return SEPARATOR.join(fields)


def decode_task(line: str) -> Task:
    """
    Parse one record line.

    The kind tag and done flag are split off the left, temporal fields off
    the right, so whatever is left in the middle is the description even
    when it contains the separator itself.

    Raises ValueError on any malformed record.
    """
    head = line.split(SEPARATOR, 2)
    if len(head) != 3:
        raise ValueError(f"expected at least 3 fields, got {len(head)}")
    tag, flag, rest = head

    try:
        kind = TaskKind(tag)
    except ValueError:
        raise ValueError(f"unknown task type {tag!r}") from None

    if flag not in ("0", "1"):
        raise ValueError(f"invalid done flag {flag!r}")
    done = flag == "1"

    extra = _FIELD_COUNTS[kind] - 3
    parts = rest.rsplit(SEPARATOR, extra) if extra else [rest]
    if len(parts) != extra + 1:
        raise ValueError(f"expected {_FIELD_COUNTS[kind]} fields for type {tag}")
    description, *stamps = parts

    task: Task
    if kind is TaskKind.TODO:
        task = Todo(description, done=done)
    elif kind is TaskKind.DEADLINE:
        task = Deadline(description, _str_to_dt(stamps[0]), done=done)
    else:
        try:
            task = Event(description, _str_to_dt(stamps[0]), _str_to_dt(stamps[1]), done=done)
        except ValidationError as e:
            raise ValueError(e.message) from None
    return task


class TaskStore:
    """
    Line-oriented text file holding the full task set.

    - load() on a missing or empty file yields an empty list
    - save() always rewrites the whole file (temp file + os.replace)
    - the parent directory is expected to exist (see cli/bootstrap.py)
    """

    def __init__(self, path: str | Path = "jivox.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.info("TaskStore: %s not found, starting empty", self._path)
            return []

        try:
            # Records end with "\n" only; other line boundaries belong to descriptions.
            raw = self._path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DataHandlerError(f"Could not read saved tasks from {self._path}: {e}") from e

        tasks: list[Task] = []
        for lineno, line in enumerate(raw.split("\n"), start=1):
            if not line.strip():
                continue
            try:
                tasks.append(decode_task(line))
            except ValueError as e:
                raise DataHandlerError(
                    f"Corrupt task record at {self._path}:{lineno}: {e}"
                ) from e

        logger.info("TaskStore loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        try:
            lines = [encode_task(t) + "\n" for t in tasks]
        except ValueError as e:
            raise DataHandlerError(f"Could not save tasks to {self._path}: {e}") from e

        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_text("".join(lines), "utf-8", newline="\n")
            os.replace(tmp, self._path)
        except OSError as e:
            raise DataHandlerError(f"Could not save tasks to {self._path}: {e}") from e
        logger.debug("TaskStore saved %d tasks to %s", len(lines), self._path)
