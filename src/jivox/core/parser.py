# src/jivox/core/parser.py

"""
Pure text helpers that turn a raw input line into a command and its arguments.

Nothing here touches the task list; validation that needs state lives in
the Engine.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from enum import StrEnum

from ..errors import ValidationError

DATETIME_INPUT_FORMAT = "%d/%m/%Y %H:%M"
DATE_INPUT_FORMAT = "%d/%m/%Y"

# d/MM/yyyy HH:mm: month, hour and minute are always two digits.
_DATETIME_SHAPE = re.compile(r"\d{1,2}/\d{2}/\d{4} \d{2}:\d{2}", re.ASCII)
_DATE_SHAPE = re.compile(r"\d{1,2}/\d{2}/\d{4}", re.ASCII)

# Argument markers. Surrounding spaces keep words like "a/b" or "/byte" intact.
BY_MARKER = " /by "
FROM_MARKER = " /from "
TO_MARKER = " /to "
ON_MARKER = "/on"


class CommandKind(StrEnum):
    BYE = "bye"
    LIST = "list"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    SHOW = "show"
    FIND = "find"
    UNKNOWN = "unknown"


_COMMAND_WORDS: dict[str, CommandKind] = {
    kind.value: kind for kind in CommandKind if kind is not CommandKind.UNKNOWN
}


def parse_input(raw: str) -> list[str]:
    """
    Split into [command-token, remainder] on the first whitespace run.

    The result has length 1 when there is no remainder.
    """
    parts = raw.strip().split(None, 1)
    return parts or [""]


def parse_command(raw: str) -> CommandKind:
    """Map the first token (case-sensitively) to a CommandKind; UNKNOWN if unrecognized."""
    return _COMMAND_WORDS.get(parse_input(raw)[0], CommandKind.UNKNOWN)


def split(text: str, delimiter: str, limit: int | None = None) -> list[str]:
    """
    Split text on delimiter.

    With limit, at most `limit` parts are returned and any later occurrence
    of the delimiter stays inside the last part.
    """
    if limit is None or limit <= 0:
        return text.split(delimiter)
    return text.split(delimiter, limit - 1)


def parse_datetime(text: str) -> datetime:
    value = text.strip()
    try:
        if not _DATETIME_SHAPE.fullmatch(value):
            raise ValueError(value)
        return datetime.strptime(value, DATETIME_INPUT_FORMAT)
    except ValueError:
        raise ValidationError(
            f"Invalid date/time {value!r}. Please use the format d/MM/yyyy HH:mm."
        ) from None


def parse_date(text: str) -> date:
    value = text.strip()
    try:
        if not _DATE_SHAPE.fullmatch(value):
            raise ValueError(value)
        return datetime.strptime(value, DATE_INPUT_FORMAT).date()
    except ValueError:
        raise ValidationError(
            f"Invalid date {value!r}. Please use the format d/MM/yyyy."
        ) from None
