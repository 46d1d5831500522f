# src/athena/core/parser.py

"""
Turns one line of user input into a Command.

Grammar: "<keyword> <remainder>". The keyword picks a builder; the builder
pulls the fields it needs out of the remainder and raises InputError when a
field is missing or malformed. Parsing never touches the task list.
"""

from __future__ import annotations

import calendar
import logging
import re
from collections.abc import Callable
from datetime import datetime

from .commands import (
    Command,
    DeadlineCommand,
    DeleteCommand,
    EventCommand,
    FindCommand,
    ListCommand,
    MarkCommand,
    ShutdownCommand,
    TodoCommand,
    UnmarkCommand,
)
from .errors import InputError, InputErrorCode

logger = logging.getLogger(__name__)

# Input pattern "d/M/yyyy Hmm" (e.g. "2/12/2024 1800", "2/12/2024 930").
# Distinct from the display/storage pattern in tasks.task_models.
INPUT_DATETIME_PATTERN = re.compile(
    r"(\d{1,2})/(\d{1,2})/(\d{4}) (\d{1,2})(\d{2})", re.ASCII
)

FIELD_MARKER = "/"
DEADLINE_MARKER = "/by"
EVENT_MARKER = "/at"

_TASK_NUMBER = re.compile(r"[+-]?\d+", re.ASCII)

CommandBuilder = Callable[[str], Command]


def get_task_name(remainder: str) -> str:
    name = remainder.split(FIELD_MARKER, 1)[0].strip()
    if not name:
        raise InputError(InputErrorCode.MISSING_TASK_NAME)
    return name


def parse_input_datetime(text: str) -> datetime:
    m = INPUT_DATETIME_PATTERN.fullmatch(text)
    if not m:
        raise InputError(InputErrorCode.INVALID_TASK_DATETIME)
    day, month, year, hour, minute = (int(g) for g in m.groups())
    if 1 <= month <= 12 and 29 <= day <= 31 and year >= 1:
        # Days past the end of the month snap to its last day (31/2/2024 -> 29/2/2024).
        day = min(day, calendar.monthrange(year, month)[1])
    try:
        return datetime(year, month, day, hour, minute)
    except ValueError:
        # e.g. 32/1/2024, 1/13/2024 or 2500
        raise InputError(InputErrorCode.INVALID_TASK_DATETIME) from None


def get_datetime(remainder: str, marker: str) -> datetime:
    if marker not in remainder:
        raise InputError(InputErrorCode.MISSING_TASK_DATETIME)
    raw = remainder.split(marker, 1)[1].strip()
    if not raw:
        raise InputError(InputErrorCode.MISSING_TASK_DATETIME)
    return parse_input_datetime(raw)


def get_task_number(remainder: str) -> int:
    raw = remainder.strip()
    if not _TASK_NUMBER.fullmatch(raw):
        raise InputError(InputErrorCode.MISSING_TASK_NUMBER)
    return int(raw)


def get_search_phrase(remainder: str) -> str:
    if not remainder:
        raise InputError(InputErrorCode.MISSING_SEARCH_PHRASE)
    return remainder


_BUILDERS: dict[str, CommandBuilder] = {
    "list": lambda rest: ListCommand(),
    "todo": lambda rest: TodoCommand(get_task_name(rest)),
    "deadline": lambda rest: DeadlineCommand(
        get_task_name(rest), get_datetime(rest, DEADLINE_MARKER)
    ),
    "event": lambda rest: EventCommand(get_task_name(rest), get_datetime(rest, EVENT_MARKER)),
    "mark": lambda rest: MarkCommand(get_task_number(rest)),
    "unmark": lambda rest: UnmarkCommand(get_task_number(rest)),
    "delete": lambda rest: DeleteCommand(get_task_number(rest)),
    "find": lambda rest: FindCommand(get_search_phrase(rest)),
    "bye": lambda rest: ShutdownCommand(),
}


def parse_command(text: str) -> Command:
    """Parse one input line. Raises InputError for anything that isn't a valid command."""
    parts = text.split(None, 1)
    keyword = parts[0] if parts else ""
    remainder = parts[1] if len(parts) > 1 else ""

    builder = _BUILDERS.get(keyword)
    if builder is None:
        logger.debug("Unknown command keyword: %r", keyword)
        raise InputError(InputErrorCode.INVALID_COMMAND)

    return builder(remainder)
