# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from jivox.core.engine import Engine
from jivox.tasks.task_store import TaskStore

from .fakes import InMemoryTaskRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with cli/bootstrap.py.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="Jivox",
        log_level="WARNING",
        log_to_file=False,
        data_dir=data_dir,
        tasks_path=data_dir / "jivox.txt",
        log_dir=data_dir,
    )


@pytest.fixture()
def task_file(tmp_path: Path) -> Path:
    return tmp_path / "jivox.txt"


@pytest.fixture()
def store(task_file: Path) -> TaskStore:
    return TaskStore(task_file)


@pytest.fixture()
def repo() -> InMemoryTaskRepo:
    return InMemoryTaskRepo()


@pytest.fixture()
def engine(repo: InMemoryTaskRepo) -> Engine:
    """Engine over an in-memory repo, starting with an empty task list."""
    return Engine(repo)
