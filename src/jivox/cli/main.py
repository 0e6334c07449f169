# src/jivox/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the Engine from the stored tasks, then runs
the console REPL in the main thread.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_engine
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..errors import DataHandlerError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.INFO)
    setup_logging(
        log_dir=settings.log_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s...", settings.app_name)

    try:
        engine = create_engine(settings=settings)
    except DataHandlerError as e:
        logger.exception("Failed to load tasks.")
        print(f"Cannot start {settings.app_name}: {e.message}", file=sys.stderr)
        sys.exit(1)

    run_console_loop(engine, app_name=settings.app_name)
    logger.info("Bye.")


if __name__ == "__main__":
    main()
