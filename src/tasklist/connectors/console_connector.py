# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..cli.actions import NoOpAction, build_action, execute, registry, tokenize
from ..core.errors import (
    ActionError,
    IndexOutOfRange,
    InputUnreadable,
    StorageUnavailable,
    TaskListError,
    UnknownAction,
)
from ..core.state import AppState

logger = logging.getLogger(__name__)

# Errors that end the process. Any other TaskListError is reported and the loop goes on.
FATAL_ERRORS: tuple[type[TaskListError], ...] = (
    StorageUnavailable,
    IndexOutOfRange,
    InputUnreadable,
)


def _read_line(stdin: TextIO) -> str:
    try:
        return stdin.readline()
    except (OSError, UnicodeDecodeError) as e:
        raise InputUnreadable(f"failed to read input: {e}") from e


def run_console_loop(
    state: AppState,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> None:
    """
    Read one command per line until end of input.

    Parse failures become a no-op plus a diagnostic on stderr. Errors listed in
    FATAL_ERRORS propagate to the caller.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    logger.info("Console connector started (storage=%s).", state.task_list.path)

    while True:
        try:
            line = _read_line(stdin)
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            break

        if line == "":
            logger.info("Console EOF received, exiting.")
            break

        try:
            action = build_action(tokenize(line))
        except ActionError as e:
            print(f"Invalid arg: {e}", file=stderr)
            if isinstance(e, UnknownAction):
                print(registry.build_help(), file=stderr)
            action = NoOpAction()

        try:
            execute(action, state.task_list, stdout)
        except FATAL_ERRORS:
            raise
        except TaskListError as e:
            logger.warning("Action %r failed: %s", action, e)
            print(f"Error: {e}", file=stderr)

        stdout.flush()

    logger.info("Console connector finished.")
