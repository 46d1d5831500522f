# src/athena/core/ports.py

"""
Ports (interfaces) used by the core.

The session depends on a Protocol instead of the concrete flat-file store,
so tests can swap in in-memory or failing stores.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_list import TaskList


class TaskRepo(Protocol):
    def has_existing_save(self) -> bool: ...

    def load(self) -> TaskList:
        """Return the saved list (empty if nothing is saved). Raises PersistenceError."""
        ...

    def save(self, task_list: TaskList) -> None:
        """Rewrite the whole saved list. Raises PersistenceError."""
        ...
