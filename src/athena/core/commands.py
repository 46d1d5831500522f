# src/athena/core/commands.py

"""
Command variants and their execution.

Commands are plain frozen dataclasses built by core.parser. The closed set is
the `Command` union; execute_command() matches on it exhaustively, so adding a
variant without handling it is a type error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TypeAlias, assert_never

from ..tasks.task_list import TaskList, format_numbered
from ..tasks.task_models import Deadline, Event, Task, Todo, format_task
from . import messages

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ListCommand:
    pass


@dataclass(frozen=True, slots=True)
class TodoCommand:
    description: str


@dataclass(frozen=True, slots=True)
class DeadlineCommand:
    description: str
    due_date: datetime


@dataclass(frozen=True, slots=True)
class EventCommand:
    description: str
    event_date: datetime


@dataclass(frozen=True, slots=True)
class MarkCommand:
    index: int


@dataclass(frozen=True, slots=True)
class UnmarkCommand:
    index: int


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    index: int


@dataclass(frozen=True, slots=True)
class FindCommand:
    phrase: str


@dataclass(frozen=True, slots=True)
class ShutdownCommand:
    pass


Command: TypeAlias = (
    ListCommand
    | TodoCommand
    | DeadlineCommand
    | EventCommand
    | MarkCommand
    | UnmarkCommand
    | DeleteCommand
    | FindCommand
    | ShutdownCommand
)


def _added(task_list: TaskList, task: Task) -> str:
    task_list.add(task)
    logger.info("Added %s task (count=%d)", type(task).__name__, task_list.count())
    return "\n".join(
        [messages.TASK_ADDED, f"  {format_task(task)}", messages.task_count(task_list.count())]
    )


def execute_command(command: Command, task_list: TaskList) -> str:
    """
    Apply a command to the task list and return the reply text.

    Only the index-based commands can fail (InputError TASK_NOT_FOUND); they
    check the index before touching the list.
    """
    match command:
        case ListCommand():
            if not task_list.count():
                return messages.LIST_EMPTY
            return f"{messages.LIST_HEADER}\n{task_list.to_display_string()}"

        case TodoCommand(description=description):
            return _added(task_list, Todo(description))

        case DeadlineCommand(description=description, due_date=due_date):
            return _added(task_list, Deadline(description, due_date))

        case EventCommand(description=description, event_date=event_date):
            return _added(task_list, Event(description, event_date))

        case MarkCommand(index=index):
            task = task_list.mark_done(index)
            logger.info("Marked task %d as done", index)
            return f"{messages.TASK_MARKED}\n  {format_task(task)}"

        case UnmarkCommand(index=index):
            task = task_list.mark_not_done(index)
            logger.info("Marked task %d as not done", index)
            return f"{messages.TASK_UNMARKED}\n  {format_task(task)}"

        case DeleteCommand(index=index):
            task = task_list.remove(index)
            logger.info("Deleted task %d (count=%d)", index, task_list.count())
            return "\n".join(
                [
                    messages.TASK_DELETED,
                    f"  {format_task(task)}",
                    messages.task_count(task_list.count()),
                ]
            )

        case FindCommand(phrase=phrase):
            matches = task_list.search(phrase)
            if not matches:
                return messages.FIND_NONE
            return f"{messages.FIND_HEADER}\n{format_numbered(matches)}"

        case ShutdownCommand():
            return messages.FAREWELL

        case _:
            assert_never(command)
