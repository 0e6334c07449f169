# src/jivox/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- ensures local (gitignored) directories exist,
- wires the file-backed TaskStore into a fresh Engine.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.engine import Engine
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings: Settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_engine(*, settings: Settings | None = None) -> Engine:
    """
    Create an Engine backed by the task file from settings.

    Keeping settings injectable makes the app easier to test.
    Raises DataHandlerError if the stored tasks cannot be loaded.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(settings.tasks_path)
    logger.debug("Using task file %s", store.path)
    return Engine(store)
