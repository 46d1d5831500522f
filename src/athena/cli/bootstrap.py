# src/athena/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it wires the flat-file TaskStore into
AppState and loads the saved list. The save directory itself is created
lazily by the first save.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().

    Raises PersistenceError if a save file exists but can't be read: starting
    with an empty list would overwrite the user's tasks on the next save.
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.save_path)
    task_list = store.load()
    logger.info("Session ready: %d tasks from %s", task_list.count(), store.path)

    return AppState(settings=settings, task_list=task_list, task_store=store)
