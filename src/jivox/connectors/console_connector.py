# src/jivox/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core import messages
from ..core.engine import Engine

logger = logging.getLogger(__name__)

DIVIDER = "_" * 60


def _print_block(text: str) -> None:
    print(DIVIDER)
    for line in text.splitlines():
        print(f" {line}")
    print(DIVIDER)


def run_console_loop(
    engine: Engine,
    *,
    app_name: str = "Jivox",
    read: Callable[[str], str] = input,
) -> None:
    """Read commands line by line until bye, EOF or Ctrl+C."""
    logger.info("Console connector started.")
    _print_block(messages.greeting(app_name))

    while engine.running:
        try:
            user_input = read("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        try:
            reply = engine.get_response(user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        _print_block(reply)

    logger.info("Console connector finished.")
