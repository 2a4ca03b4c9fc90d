# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.core.state import AppState
from tasklist.tasks.task_store import TaskList


@pytest.fixture()
def storage_path(tmp_path: Path) -> Path:
    """An existing storage file holding an empty list (the app never creates it)."""
    path = tmp_path / "tasks.json"
    path.write_text('{"tasks":[]}', encoding="utf-8")
    return path


@pytest.fixture()
def settings(tmp_path: Path, storage_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=tmp_path / "data",
        storage_path=storage_path,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired with a real TaskList on a tmp file; persistence is part of what we test."""
    return AppState(settings=settings, task_list=TaskList.load(settings.storage_path))
