# tests/test_task_models.py

from __future__ import annotations

from datetime import date, datetime

import pytest

from jivox.errors import ValidationError
from jivox.tasks.task_models import Deadline, Event, TaskKind, Todo

DUE = datetime(2024, 12, 2, 18, 0)


def test_rendering_per_variant() -> None:
    assert str(Todo("Buy milk")) == "[T][ ] Buy milk"
    assert str(Deadline("Submit report", DUE)) == "[D][ ] Submit report (by: 02 Dec 2024 18:00)"
    assert (
        str(Event("Workshop", datetime(2024, 12, 2, 9, 0), datetime(2024, 12, 3, 17, 30)))
        == "[E][ ] Workshop (from: 02 Dec 2024 09:00 to: 03 Dec 2024 17:30)"
    )


def test_kind_tags() -> None:
    assert Todo("a").kind is TaskKind.TODO
    assert Deadline("a", DUE).kind is TaskKind.DEADLINE
    assert Event("a", DUE, DUE).kind is TaskKind.EVENT
    assert [str(k) for k in TaskKind] == ["T", "D", "E"]


def test_mark_then_unmark_restores_rendering() -> None:
    task = Deadline("Submit report", DUE)
    before = str(task)

    task.mark()
    assert task.done is True
    assert str(task) == "[D][X] Submit report (by: 02 Dec 2024 18:00)"

    task.unmark()
    assert task.done is False
    assert str(task) == before


def test_new_tasks_start_not_done() -> None:
    assert Todo("x").done is False
    assert Todo("x", done=True).done is True


def test_description_is_read_only() -> None:
    task = Todo("Buy milk")
    with pytest.raises(AttributeError):
        task.description = "Buy bread"  # type: ignore[misc]
    assert task.description == "Buy milk"


def test_event_end_before_start_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Event("Backwards", datetime(2024, 12, 2, 10, 0), datetime(2024, 12, 2, 9, 59))


def test_event_zero_length_is_allowed() -> None:
    event = Event("Instant", DUE, DUE)
    assert event.start == event.end


def test_deadline_property() -> None:
    assert Todo("x").deadline is None
    assert Deadline("x", DUE).deadline == DUE
    start = datetime(2024, 1, 1, 8, 0)
    assert Event("x", start, DUE).deadline == start


def test_falls_on() -> None:
    assert not Todo("x").falls_on(date(2024, 12, 2))

    deadline = Deadline("x", DUE)
    assert deadline.falls_on(date(2024, 12, 2))
    assert not deadline.falls_on(date(2024, 12, 3))

    event = Event("x", datetime(2024, 12, 1, 22, 0), datetime(2024, 12, 3, 2, 0))
    assert event.falls_on(date(2024, 12, 1))
    assert event.falls_on(date(2024, 12, 2))
    assert event.falls_on(date(2024, 12, 3))
    assert not event.falls_on(date(2024, 11, 30))
    assert not event.falls_on(date(2024, 12, 4))


def test_equality_is_per_variant() -> None:
    assert Todo("a") == Todo("a")
    assert Todo("a") != Todo("a", done=True)
    assert Deadline("a", DUE) != Event("a", DUE, DUE)
