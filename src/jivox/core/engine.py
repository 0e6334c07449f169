# src/jivox/core/engine.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..errors import DataHandlerError, JivoxError, TaskIndexError, ValidationError
from ..tasks.task_list import TaskList
from ..tasks.task_models import Deadline, Event, Task, Todo
from . import messages
from .parser import (
    BY_MARKER,
    FROM_MARKER,
    ON_MARKER,
    TO_MARKER,
    CommandKind,
    parse_command,
    parse_date,
    parse_datetime,
    parse_input,
    split,
)
from .ports import TaskRepo

logger = logging.getLogger(__name__)

CommandHandler = Callable[[str | None], str]


@dataclass(frozen=True, slots=True)
class Response:
    text: str
    ok: bool
    command: CommandKind


class Engine:
    """
    Command interpreter over one task list.

    One Engine per session. It owns the TaskList and the repo handle;
    every mutation is followed by a full save before the reply is built.
    """

    def __init__(self, store: TaskRepo) -> None:
        self._store = store
        self._tasks = TaskList(store.load())
        self._running = True
        self._handlers: dict[CommandKind, CommandHandler] = {
            CommandKind.BYE: self._cmd_bye,
            CommandKind.LIST: self._cmd_list,
            CommandKind.TODO: self._cmd_todo,
            CommandKind.DEADLINE: self._cmd_deadline,
            CommandKind.EVENT: self._cmd_event,
            CommandKind.MARK: self._cmd_mark,
            CommandKind.UNMARK: self._cmd_unmark,
            CommandKind.DELETE: self._cmd_delete,
            CommandKind.SHOW: self._cmd_show,
            CommandKind.FIND: self._cmd_find,
        }
        logger.info("Engine ready with %d tasks", len(self._tasks))

    @property
    def running(self) -> bool:
        return self._running

    @property
    def tasks(self) -> TaskList:
        return self._tasks

    # ---- entry points ----

    def get_response(self, raw_input: str) -> str:
        return self.handle(raw_input).text

    def handle(self, raw_input: str) -> Response:
        kind = parse_command(raw_input)

        if not self._running:
            return Response("This session has ended.", ok=False, command=kind)

        parts = parse_input(raw_input)
        arg = parts[1] if len(parts) > 1 else None
        logger.debug("Handling command=%s arg=%r", kind, arg)

        try:
            handler = self._handlers.get(kind)
            if handler is None:
                raise ValidationError("Sorry! I can't understand your command.")
            return Response(handler(arg), ok=True, command=kind)
        except DataHandlerError as e:
            logger.exception("Persistence failed while handling %s", kind)
            self._running = False
            return Response(messages.fatal(e.message), ok=False, command=kind)
        except JivoxError as e:
            logger.info("Rejected %s: %s", kind, e.message)
            return Response(e.message, ok=False, command=kind)

    # ---- helpers ----

    def _persist(self, rollback: Callable[[], None]) -> None:
        """Save a full snapshot; undo the in-memory change if the save fails."""
        try:
            self._store.save(self._tasks.all())
        except DataHandlerError:
            rollback()
            raise

    def _add(self, task: Task) -> str:
        self._tasks.add(task)
        self._persist(lambda: self._tasks.delete(len(self._tasks) - 1))
        logger.info("Added %s task (total=%d)", task.kind.name.lower(), len(self._tasks))
        return messages.added(task, len(self._tasks))

    def _index(self, arg: str | None, action: str) -> int:
        """Turn a 1-based task number into a 0-based index; valid range is [1, length]."""
        if arg is None:
            raise ValidationError(f"Please provide a task number to {action}.")
        try:
            number = int(arg.strip())
        except ValueError:
            raise ValidationError(f"{arg.strip()!r} is not a valid task number.") from None
        if number < 1 or number > len(self._tasks):
            raise TaskIndexError(f"Oops! There are only {len(self._tasks)} Tasks!")
        return number - 1

    @staticmethod
    def _description(text: str) -> str:
        description = text.strip()
        if not description:
            raise ValidationError("Ooops! Please provide a description!")
        if len(description.splitlines()) > 1:
            raise ValidationError("A task description must fit on a single line.")
        return description

    # ---- handlers ----

    def _cmd_bye(self, arg: str | None) -> str:
        self._running = False
        logger.info("Exit requested")
        return messages.FAREWELL

    def _cmd_list(self, arg: str | None) -> str:
        return messages.task_listing(enumerate(self._tasks.all(), start=1))

    def _cmd_todo(self, arg: str | None) -> str:
        if arg is None:
            raise ValidationError("Ooops! Please provide a description!")
        return self._add(Todo(self._description(arg)))

    def _cmd_deadline(self, arg: str | None) -> str:
        if arg is None:
            raise ValidationError("Ooops! Please provide a description!")
        parts = split(arg, BY_MARKER, 2)
        if len(parts) == 1:
            raise ValidationError("Oooops! Please provide a deadline (/by d/MM/yyyy HH:mm).")
        description = self._description(parts[0])
        return self._add(Deadline(description, parse_datetime(parts[1])))

    def _cmd_event(self, arg: str | None) -> str:
        if arg is None:
            raise ValidationError("Ooops! Please provide a description!")
        first = split(arg, FROM_MARKER, 2)
        if len(first) == 1:
            raise ValidationError("No start time (/from) received for the event, please try again!")
        second = split(first[1], TO_MARKER, 2)
        if len(second) == 1:
            raise ValidationError("No end time (/to) received for the event, please try again!")
        description = self._description(first[0])
        start = parse_datetime(second[0])
        end = parse_datetime(second[1])
        return self._add(Event(description, start, end))

    def _cmd_mark(self, arg: str | None) -> str:
        index = self._index(arg, "mark")
        task = self._tasks.get(index)
        was_done = task.done
        task.mark()
        self._persist(lambda: setattr(task, "done", was_done))
        logger.info("Marked task %d", index + 1)
        return messages.marked(task)

    def _cmd_unmark(self, arg: str | None) -> str:
        index = self._index(arg, "unmark")
        task = self._tasks.get(index)
        was_done = task.done
        task.unmark()
        self._persist(lambda: setattr(task, "done", was_done))
        logger.info("Unmarked task %d", index + 1)
        return messages.unmarked(task)

    def _cmd_delete(self, arg: str | None) -> str:
        index = self._index(arg, "delete")
        task = self._tasks.delete(index)
        self._persist(lambda: self._tasks.insert(index, task))
        logger.info("Deleted task %d (total=%d)", index + 1, len(self._tasks))
        return messages.deleted(task, len(self._tasks))

    def _cmd_show(self, arg: str | None) -> str:
        parts = split(arg or "", ON_MARKER, 2)
        if len(parts) == 1 or not parts[1].strip():
            raise ValidationError("Please provide a date: show /on d/MM/yyyy")
        day = parse_date(parts[1])
        label = day.strftime("%d %b %Y")
        return messages.matches(
            self._tasks.on_date(day),
            header=f"Here are the tasks on {label}:",
            empty=f"No tasks on {label}.",
        )

    def _cmd_find(self, arg: str | None) -> str:
        if arg is None:
            raise ValidationError("Please provide a keyword to find.")
        return messages.matches(
            self._tasks.find(arg),
            header="Here are the matching tasks in your list:",
            empty="No matching tasks found.",
        )
