# src/athena/core/messages.py

"""User-facing texts shared by the session, commands and connectors."""

from __future__ import annotations

GREETING = "Greetings! My name is Athena. What can I help you with?"
FAREWELL = "Goodbye! Come back soon."

LIST_HEADER = "Here's the current list of tasks:"
LIST_EMPTY = "Your task list is empty."

TASK_ADDED = "Okay, I've added this task to your list."
TASK_DELETED = "Okay, I've removed this task from your list."
TASK_MARKED = "Nice! I've marked this task as done."
TASK_UNMARKED = "Okay, I've marked this task as not done yet."

FIND_HEADER = "Here are the matching tasks in your list:"
FIND_NONE = "I couldn't find any tasks matching that."

SAVE_ERROR = "I encountered a problem saving to disk: "
INTERNAL_ERROR = "Internal error while handling that command."


def task_count(n: int) -> str:
    if n == 1:
        return "Now you have 1 task in your list."
    return f"Now you have {n} tasks in your list."
