# src/jivox/core/messages.py

"""Response texts. Everything the user reads back from the Engine is built here."""

from __future__ import annotations

from collections.abc import Iterable

from ..tasks.task_models import Task

FAREWELL = "Bye. Hope to see you again soon!"


def greeting(app_name: str) -> str:
    return f"Hello! I'm {app_name}\nWhat can I do for you?"


def _count(n: int) -> str:
    return f"{n} task" if n == 1 else f"{n} tasks"


def added(task: Task, total: int) -> str:
    return f"Got it. I've added this task:\n  {task}\nNow you have {_count(total)} in the list."


def marked(task: Task) -> str:
    return f"Nice! I've marked this task as done:\n  {task}"


def unmarked(task: Task) -> str:
    return f"OK, I've marked this task as not done yet:\n  {task}"


def deleted(task: Task, total: int) -> str:
    return f"Noted. I've removed this task:\n  {task}\nNow you have {_count(total)} in the list."


def numbered(entries: Iterable[tuple[int, Task]]) -> list[str]:
    return [f"{i}. {t}" for i, t in entries]


def task_listing(entries: Iterable[tuple[int, Task]]) -> str:
    lines = numbered(entries)
    if not lines:
        return "Your task list is empty."
    return "\n".join(["Here are the tasks in your list:", *lines])


def matches(entries: Iterable[tuple[int, Task]], header: str, empty: str) -> str:
    lines = numbered(entries)
    if not lines:
        return empty
    return "\n".join([header, *lines])


def fatal(message: str) -> str:
    return f"Something went wrong while saving your tasks, so I have to stop.\n{message}"
