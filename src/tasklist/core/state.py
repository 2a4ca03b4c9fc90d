# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskList


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    # The one TaskList for the process lifetime; owned by the console loop via this state.
    task_list: TaskList
