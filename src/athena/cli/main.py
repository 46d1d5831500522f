# src/athena/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the save file), then runs the
console REPL in the main thread.
"""

from __future__ import annotations

import logging
import signal
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.errors import PersistenceError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _handle_sigterm(signum, _frame) -> None:
    # Unwind through the console loop exactly like Ctrl+C.
    logger.info("Signal %s received, shutting down...", signum)
    raise KeyboardInterrupt


def main() -> int:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    setup_logging(
        log_dir=settings.log_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except PersistenceError as e:
        logger.error("Could not load tasks: %s", e)
        print(f"Fatal error: could not load tasks from disk ({e}).", file=sys.stderr)
        return 1

    try:
        signal.signal(signal.SIGTERM, _handle_sigterm)
    except (ValueError, OSError, AttributeError):
        # Not in the main thread, or the platform has no SIGTERM.
        logger.debug("SIGTERM handler not installed.", exc_info=True)

    run_console_loop(state)
    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
