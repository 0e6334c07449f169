# src/jivox/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "jivox.log"

_FORMATTER = logging.Formatter(
    fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


class _ConsoleNoiseFilter(logging.Filter):
    """Pass jivox records through; anything else reaches stderr only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "jivox" or record.name.startswith("jivox."):
            return True
        return record.levelno >= logging.ERROR


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_FORMATTER)
    handler.addFilter(_ConsoleNoiseFilter())
    return handler


def _file_handler(log_dir: Path, level: int) -> tuple[logging.Handler, Path]:
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME
    handler = logging.FileHandler(str(log_file), encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(_FORMATTER)
    return handler, log_file


def setup_logging(
    *,
    log_dir: str | Path = ".local/jivox",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    log_to_file: bool = True,
) -> Path | None:
    """
    Install the root handlers for a session.

    Replies go to stdout, so log records go to stderr; with log_to_file the
    full DEBUG trail is also kept in <log_dir>/jivox.log. Replaces whatever
    handlers the root logger had. Returns the log file path, or None.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    root.addHandler(_console_handler(console_level))

    log_file: Path | None = None
    if log_to_file:
        handler, log_file = _file_handler(Path(log_dir), file_level)
        root.addHandler(handler)

    # warnings.warn(...) arrives as 'py.warnings', which the console filter holds back.
    logging.captureWarnings(True)
    return log_file
