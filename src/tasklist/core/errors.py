# src/tasklist/core/errors.py

"""
Error taxonomy.

Everything the app raises on purpose derives from TaskListError, so the
console loop can decide in one place what is fatal and what is reported.
"""

from __future__ import annotations


class TaskListError(Exception):
    """Base class for all tasklist errors."""


# ---- parse errors (reported, loop continues) ----


class ActionError(TaskListError):
    """A command line could not be turned into an action."""


class MissingAction(ActionError):
    def __init__(self) -> None:
        super().__init__("could not get action")


class InvalidIndex(ActionError):
    def __init__(self, text: str) -> None:
        super().__init__(f"failed to convert {text!r} to an index")
        self.text = text


class UnknownAction(ActionError):
    def __init__(self, text: str) -> None:
        super().__init__(f"{text} is not a defined action.")
        self.text = text


# ---- fatal errors ----


class StorageUnavailable(TaskListError):
    """The storage file could not be opened (absent, unreadable or unwritable)."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"{path} should be present and accessible: {reason}")
        self.path = path


class IndexOutOfRange(TaskListError):
    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"task index {index} out of range (task count: {size})")
        self.index = index
        self.size = size


class InputUnreadable(TaskListError):
    """Reading the next command line failed (distinct from end of input)."""
