# src/jivox/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The Engine depends on this Protocol instead of the concrete file store,
which keeps the storage medium swappable and makes testing easier.
"""

from collections.abc import Iterable, Sequence
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Loads the initial task set and persists full snapshots of it."""

    def load(self) -> Sequence[Task]: ...

    def save(self, tasks: Iterable[Task]) -> None: ...
