# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings (injectable for tests),
- loads the TaskList from the configured storage file,
- wires it into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskList

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings(). Raises StorageUnavailable
    when the storage file cannot be opened.
    """
    if settings is None:
        settings = get_settings()

    task_list = TaskList.load(settings.storage_path)
    return AppState(settings=settings, task_list=task_list)
