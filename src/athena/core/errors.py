# src/athena/core/errors.py

"""
Error taxonomy.

InputError covers everything the user can fix by typing a different command
(parse failures and out-of-range task numbers). PersistenceError covers the
save file: I/O failures and malformed records.
"""

from __future__ import annotations

from enum import StrEnum


class InputErrorCode(StrEnum):
    INVALID_COMMAND = "invalid_command"
    MISSING_TASK_NAME = "missing_task_name"
    MISSING_TASK_DATETIME = "missing_task_datetime"
    INVALID_TASK_DATETIME = "invalid_task_datetime"
    MISSING_TASK_NUMBER = "missing_task_number"
    MISSING_SEARCH_PHRASE = "missing_search_phrase"
    TASK_NOT_FOUND = "task_not_found"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES: dict[InputErrorCode, str] = {
    InputErrorCode.INVALID_COMMAND: "Sorry, I don't know that command.",
    InputErrorCode.MISSING_TASK_NAME: "Please give the task a name.",
    InputErrorCode.MISSING_TASK_DATETIME: (
        "Please give the task a date and time, e.g. /by 2/12/2024 1800."
    ),
    InputErrorCode.INVALID_TASK_DATETIME: (
        "I couldn't understand that date and time. Use d/M/yyyy HHmm, e.g. 2/12/2024 1800."
    ),
    InputErrorCode.MISSING_TASK_NUMBER: "Please give me a task number, e.g. mark 2.",
    InputErrorCode.MISSING_SEARCH_PHRASE: "Please tell me what to search for.",
    InputErrorCode.TASK_NOT_FOUND: "There is no task with that number in your list.",
}


class AthenaError(Exception):
    """Base class for all errors raised by the task engine."""


class InputError(AthenaError):
    def __init__(self, code: InputErrorCode) -> None:
        super().__init__(code.message)
        self.code = code


class PersistenceError(AthenaError):
    """Save file could not be read, parsed or written."""
