# src/athena/tasks/task_models.py

"""
Task variants and their text renderings.

The variant set is closed: Task is a union of three frozen dataclasses and
every consumer matches on it exhaustively. A task never changes after
creation; marking it done produces a copy (see TaskList.mark_done).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import TypeAlias, assert_never

# Display/storage pattern, Java-style "MMM d yyyy hh:mma" (e.g. "Oct 15 2024 02:00PM").
# Kept separate from the input pattern in core.parser: the save file depends on it.
DISPLAY_DATETIME_PARSE_FORMAT = "%b %d %Y %I:%M%p"


class TaskKind(StrEnum):
    """Icon letter of each task variant (also the record tag in the save file)."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


def _check_description(description: str) -> None:
    if not description or not description.strip():
        raise ValueError("description is required")


@dataclass(frozen=True, slots=True)
class Todo:
    description: str
    is_done: bool = False

    def __post_init__(self) -> None:
        _check_description(self.description)


@dataclass(frozen=True, slots=True)
class Deadline:
    description: str
    due_date: datetime
    is_done: bool = False

    def __post_init__(self) -> None:
        _check_description(self.description)


@dataclass(frozen=True, slots=True)
class Event:
    description: str
    event_date: datetime
    is_done: bool = False

    def __post_init__(self) -> None:
        _check_description(self.description)


Task: TypeAlias = Todo | Deadline | Event


def format_datetime(value: datetime) -> str:
    # Day without zero padding, hour and year with it. strftime has no portable
    # "%-d", and glibc's %Y drops the leading zeros strptime's %Y needs.
    return f"{value:%b} {value.day} {value.year:04d} {value:%I:%M%p}"


def parse_display_datetime(text: str) -> datetime:
    """Inverse of format_datetime. Raises ValueError on malformed text."""
    return datetime.strptime(text, DISPLAY_DATETIME_PARSE_FORMAT)


def task_kind(task: Task) -> TaskKind:
    match task:
        case Todo():
            return TaskKind.TODO
        case Deadline():
            return TaskKind.DEADLINE
        case Event():
            return TaskKind.EVENT
        case _:
            assert_never(task)


def format_task(task: Task) -> str:
    """User-facing one-line rendering, e.g. "[D][X] return book (by: Oct 15 2024 02:00PM)"."""
    status = "X" if task.is_done else " "
    base = f"[{task_kind(task)}][{status}] {task.description}"
    match task:
        case Todo():
            return base
        case Deadline(due_date=due_date):
            return f"{base} (by: {format_datetime(due_date)})"
        case Event(event_date=event_date):
            return f"{base} (at: {format_datetime(event_date)})"
        case _:
            assert_never(task)
