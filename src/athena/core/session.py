# src/athena/core/session.py

"""
Session entry point shared by every connector.

handle() is the only call a front-end needs: it parses, executes, saves if
the list changed, and always returns text to show the user.
"""

from __future__ import annotations

import logging

from . import messages
from .commands import ShutdownCommand, execute_command
from .errors import InputError, PersistenceError
from .parser import parse_command
from .state import AppState

logger = logging.getLogger(__name__)


def save_if_modified(state: AppState) -> None:
    """
    Write the list out if it has unsaved changes.

    On failure the dirty flag stays set, so the next successful command
    tries again.
    """
    if not state.task_list.modified:
        return
    state.task_store.save(state.task_list)
    state.task_list.clear_modified()


def handle(state: AppState, text: str) -> str:
    try:
        command = parse_command(text)
        response = execute_command(command, state.task_list)
    except InputError as e:
        logger.info("Rejected input %r: %s", text, e.code)
        return str(e)

    if isinstance(command, ShutdownCommand):
        logger.info("Shutdown requested.")
        state.is_active = False

    try:
        save_if_modified(state)
    except PersistenceError as e:
        # The command itself succeeded; keep the in-memory change and tell the user.
        logger.error("Save failed: %s", e)
        response += "\n" + messages.SAVE_ERROR + str(e)

    return response
