# src/athena/tasks/task_list.py

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Iterator

from ..core.errors import InputError, InputErrorCode
from .task_models import Task, format_task

logger = logging.getLogger(__name__)


class TaskList:
    """
    Ordered, in-memory task collection addressed by 1-based position.

    Positions are not stable: deleting task n shifts every later task down by
    one. Every mutation sets `modified`; the session clears it after a
    successful save.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = list(tasks)
        self._modified = False

    # ---- dirty flag ----

    @property
    def modified(self) -> bool:
        return self._modified

    def clear_modified(self) -> None:
        self._modified = False

    # ---- helpers ----

    def _offset(self, index: int) -> int:
        if not 1 <= index <= len(self._tasks):
            logger.debug("Task index out of range: %s (count=%d)", index, len(self._tasks))
            raise InputError(InputErrorCode.TASK_NOT_FOUND)
        return index - 1

    def _set_done(self, index: int, done: bool) -> Task:
        offset = self._offset(index)
        task = dataclasses.replace(self._tasks[offset], is_done=done)
        self._tasks[offset] = task
        self._modified = True
        return task

    # ---- mutations ----

    def add(self, task: Task) -> int:
        """Append a task and return its 1-based position."""
        self._tasks.append(task)
        self._modified = True
        return len(self._tasks)

    def remove(self, index: int) -> Task:
        task = self._tasks.pop(self._offset(index))
        self._modified = True
        return task

    def mark_done(self, index: int) -> Task:
        return self._set_done(index, True)

    def mark_not_done(self, index: int) -> Task:
        return self._set_done(index, False)

    # ---- queries ----

    def get(self, index: int) -> Task:
        return self._tasks[self._offset(index)]

    def search(self, phrase: str) -> list[tuple[int, Task]]:
        """Case-sensitive substring match on descriptions, in list order."""
        return [
            (i, task)
            for i, task in enumerate(self._tasks, start=1)
            if phrase in task.description
        ]

    def count(self) -> int:
        return len(self._tasks)

    def to_display_string(self) -> str:
        return format_numbered(enumerate(self._tasks, start=1))

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)


def format_numbered(items: Iterable[tuple[int, Task]]) -> str:
    return "\n".join(f"{i}. {format_task(task)}" for i, task in items)
