# src/athena/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path
from typing import assert_never

from ..core.errors import PersistenceError
from .task_list import TaskList
from .task_models import (
    Deadline,
    Event,
    Task,
    TaskKind,
    Todo,
    format_datetime,
    parse_display_datetime,
    task_kind,
)

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "|"
DONE_FLAGS = {"0": False, "1": True}


def task_to_record(task: Task) -> str:
    """One save-file line: <icon>|<0/1>|<description>[|<date>]."""
    fields = [str(task_kind(task)), "1" if task.is_done else "0", task.description]
    match task:
        case Todo():
            pass
        case Deadline(due_date=due_date):
            fields.append(format_datetime(due_date))
        case Event(event_date=event_date):
            fields.append(format_datetime(event_date))
        case _:
            assert_never(task)
    return FIELD_SEPARATOR.join(fields)


def record_to_task(line: str) -> Task:
    """
    Parse one save-file line. Raises ValueError on anything malformed.

    The description may itself contain the separator, so the date of a
    deadline/event is always taken from the last field.
    """
    parts = line.split(FIELD_SEPARATOR, 2)
    if len(parts) != 3:
        raise ValueError(f"expected at least 3 fields, got {len(parts)}")
    icon, flag, rest = parts

    if flag not in DONE_FLAGS:
        raise ValueError(f"bad done flag {flag!r}")
    is_done = DONE_FLAGS[flag]

    try:
        kind = TaskKind(icon)
    except ValueError:
        raise ValueError(f"unknown task icon {icon!r}") from None

    if kind is TaskKind.TODO:
        return Todo(rest, is_done=is_done)

    description, sep, raw_date = rest.rpartition(FIELD_SEPARATOR)
    if not sep:
        raise ValueError(f"missing date field for {kind.name.lower()}")
    when = parse_display_datetime(raw_date)
    if kind is TaskKind.DEADLINE:
        return Deadline(description, when, is_done=is_done)
    return Event(description, when, is_done=is_done)


class TaskStore:
    """
    Flat-file task store, one record per line.

    save() always rewrites the whole file through a temp file + os.replace,
    so a crash mid-write leaves the previous save intact. A missing file means
    "no tasks yet"; anything unreadable fails the whole load.
    """

    def __init__(self, path: str | Path = "data/athena.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def has_existing_save(self) -> bool:
        return self._path.is_file()

    def load(self) -> TaskList:
        if not self._path.exists():
            logger.info("No save file at %s, starting with an empty list.", self._path)
            return TaskList()

        try:
            text = self._path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceError(f"could not read {self._path}: {exc}") from exc

        tasks: list[Task] = []
        for lineno, line in enumerate(text.split("\n"), start=1):
            if not line.strip():
                continue
            try:
                tasks.append(record_to_task(line))
            except ValueError as exc:
                raise PersistenceError(
                    f"malformed record at {self._path}:{lineno}: {exc}"
                ) from exc

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return TaskList(tasks)

    def save(self, task_list: TaskList) -> None:
        body = "".join(task_to_record(task) + "\n" for task in task_list)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(body, "utf-8")
            os.replace(tmp, self._path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise PersistenceError(f"could not write {self._path}: {exc}") from exc
        logger.debug("Saved %d tasks to %s", task_list.count(), self._path)
