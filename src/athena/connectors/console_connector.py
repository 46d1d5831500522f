# src/athena/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core import messages
from ..core.session import handle
from ..core.state import AppState

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], str]
Write = Callable[[str], None]


def run_console_loop(
    state: AppState,
    *,
    read_line: ReadLine = input,
    write: Write = print,
) -> None:
    """
    Line-based read/print loop around core.session.handle.

    Runs until "bye" deactivates the session, or on EOF / Ctrl+C.
    """
    app_name = str(getattr(state.settings, "app_name", "Athena"))

    def say(text: str) -> None:
        write(f"{app_name}: {text}")

    logger.info("Console connector started.")
    say(messages.GREETING)

    while state.is_active:
        try:
            user_input = read_line("> ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        # The parser owns whitespace handling; a find phrase keeps trailing spaces.
        if not user_input.strip():
            continue

        try:
            response = handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed on %r.", user_input)
            response = messages.INTERNAL_ERROR

        say(response)

    logger.info("Console connector finished.")
