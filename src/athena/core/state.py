# src/athena/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    """Everything one session owns. Built once in cli.bootstrap and passed around explicitly."""

    # Settings (or a SimpleNamespace in tests); only app_name and paths are read.
    settings: object

    task_list: TaskList
    task_store: TaskRepo

    # Cleared by the "bye" command; connectors stop reading input once False.
    is_active: bool = True
