# src/tasklist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console loop until end of
input. Fatal errors are logged and end the process with status 1.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.errors import TaskListError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    # No flags: configuration comes from the environment only.
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    log_dir = settings.data_dir if settings.log_to_file else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
        run_console_loop(state)
    except TaskListError as e:
        logger.critical("Fatal: %s", e)
        sys.exit(1)

    logger.info("Bye.")


if __name__ == "__main__":
    main()
