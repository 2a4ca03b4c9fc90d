# src/tasklist/cli/actions.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TextIO

from ..core.errors import InvalidIndex, MissingAction, UnknownAction
from ..tasks.task_models import Task
from ..tasks.task_store import TaskList

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AddAction:
    description: str


@dataclass(frozen=True, slots=True)
class RemoveAction:
    index: int


@dataclass(frozen=True, slots=True)
class ListAction:
    pass


@dataclass(frozen=True, slots=True)
class NoOpAction:
    """Fallback for any unrecognized or malformed input."""


Action = AddAction | RemoveAction | ListAction | NoOpAction

ActionParser = Callable[[list[str]], Action]


class ActionRegistry:
    """Maps the first word of a command line to a parser for the remaining words."""

    def __init__(self) -> None:
        self._parsers: dict[str, ActionParser] = {}
        self._help: dict[str, str] = {}

    def register(self, name: str, parser: ActionParser, help_text: str) -> None:
        key = name.lower()
        self._parsers[key] = parser
        self._help[key] = help_text

    def build_help(self) -> str:
        lines = ["Available actions:"]
        for help_text in self._help.values():
            lines.append(f"  {help_text}")
        return "\n".join(lines)

    def build(self, tokens: Sequence[str]) -> Action:
        """
        Parse tokens (a line split on single spaces) into an Action.

        Pure: no I/O, no TaskList access. Raises an ActionError subclass on failure.
        """
        if not tokens:
            raise MissingAction()

        name = tokens[0].strip().lower()
        parser = self._parsers.get(name)
        if parser is None:
            raise UnknownAction(name)
        return parser(list(tokens[1:]))


def tokenize(line: str) -> list[str]:
    """Split a raw input line on single spaces. A blank line has no tokens."""
    line = line.rstrip("\r\n")
    if not line.strip():
        return []
    return line.split(" ")


def _parse_add(args: list[str]) -> Action:
    # Each word is trimmed individually; empty words (double spaces) keep their separator.
    return AddAction(" ".join(part.strip() for part in args))


def _parse_remove(args: list[str]) -> Action:
    arg = args[0].strip() if args else ""
    if not (arg.isascii() and arg.isdigit()):
        raise InvalidIndex(arg)
    return RemoveAction(int(arg))


def _parse_list(args: list[str]) -> Action:
    return ListAction()


registry = ActionRegistry()
registry.register("add", _parse_add, help_text="add <text...>: append a task.")
registry.register("remove", _parse_remove, help_text="remove <index>: delete the task at index.")
registry.register("list", _parse_list, help_text="list: print tasks as '<index> | <description>'.")


def build_action(tokens: Sequence[str]) -> Action:
    return registry.build(tokens)


def execute(action: Action, task_list: TaskList, out: TextIO | None = None) -> None:
    """Apply one action. Add/Remove persist through the TaskList; List only writes to `out`."""
    if isinstance(action, AddAction):
        task_list.add(Task(description=action.description))
        logger.debug("Added task index=%d", len(task_list) - 1)
        return

    if isinstance(action, RemoveAction):
        task_list.remove(action.index)
        logger.debug("Removed task index=%d", action.index)
        return

    if isinstance(action, ListAction):
        out = out if out is not None else sys.stdout
        for i, task in enumerate(task_list):
            print(f"{i} | {task.description}", file=out)
        return

    if isinstance(action, NoOpAction):
        return

    raise TypeError(f"unsupported action: {action!r}")
