# src/tasklist/tasks/task_store.py

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..core.errors import IndexOutOfRange, StorageUnavailable
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskList:
    """
    Ordered task collection persisted as one JSON document.

    File format (compact, UTF-8):
        {"tasks":[{"description":"buy milk"}, ...]}

    Contract:
    - the storage file must already exist; it is never created here
    - the file is opened and closed on every load/save, no handle is kept
    - open failures raise StorageUnavailable (fatal)
    - malformed content on load is logged and treated as an empty list
    - serialization/write failures on save are logged, not raised
    """

    def __init__(self, path: str | Path = "tasks.json", tasks: list[Task] | None = None) -> None:
        self._path = Path(path)
        self.tasks: list[Task] = list(tasks or [])

    @property
    def path(self) -> Path:
        return self._path

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def descriptions(self) -> list[str]:
        return [t.description for t in self.tasks]

    # ---- construction ----

    @classmethod
    def create(cls, path: str | Path = "tasks.json") -> TaskList:
        """Empty list bound to `path`. No I/O."""
        return cls(path)

    @classmethod
    def load(cls, path: str | Path = "tasks.json") -> TaskList:
        p = Path(path)
        try:
            f = p.open("r", encoding="utf-8")
        except OSError as e:
            raise StorageUnavailable(p, e.strerror or str(e)) from e

        with f:
            try:
                # UnicodeDecodeError and JSONDecodeError are both ValueError; deep nesting is RecursionError.
                tasks = _decode(f.read())
            except (ValueError, RecursionError) as e:
                # Malformed content is treated as an empty list.
                logger.error("failed to read %s: %s", p, e)
                return cls.create(p)

        logger.info("TaskList loaded path=%s total=%d", p, len(tasks))
        return cls(p, tasks)

    # ---- persistence ----

    def save(self) -> None:
        try:
            f = self._path.open("r+", encoding="utf-8")
        except OSError as e:
            raise StorageUnavailable(self._path, e.strerror or str(e)) from e

        # The file is truncated before serializing: a failure below leaves it empty or partial.
        try:
            with f:
                f.truncate(0)
                try:
                    # Text-mode write encodes to UTF-8; lone surrogates fail there with a ValueError.
                    f.write(_encode(self.tasks))
                except (TypeError, ValueError):
                    logger.exception("problem saving tasks to %s", self._path)
                    return
                f.flush()
        except OSError:
            logger.exception("failed to flush %s", self._path)
            return

        logger.debug("TaskList saved path=%s total=%d", self._path, len(self.tasks))

    # ---- mutations ----

    def add(self, task: Task) -> None:
        self.tasks.append(task)
        self.save()

    def remove(self, index: int) -> Task:
        """
        Remove the task at a 0-based position and save.

        The save happens even when `index` is out of range; IndexOutOfRange is
        raised afterwards.
        """
        size = len(self.tasks)
        removed: Task | None = None
        if 0 <= index < size:
            removed = self.tasks.pop(index)
        self.save()
        if removed is None:
            raise IndexOutOfRange(index, size)
        return removed


def _encode(tasks: list[Task]) -> str:
    payload: dict[str, Any] = {"tasks": [t.to_dict() for t in tasks]}
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def _decode(raw: str) -> list[Task]:
    """Parse a storage document. Raises ValueError (json.JSONDecodeError included) on bad shape."""
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"top-level value must be an object, got {type(data).__name__}")
    items = data.get("tasks")
    if not isinstance(items, list):
        raise ValueError("missing list field 'tasks'")
    return [Task.from_dict(item) for item in items]
