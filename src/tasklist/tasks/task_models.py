# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Task:
    """One to-do item. It has no id: its position in the TaskList is its address."""

    description: str

    def to_dict(self) -> dict[str, Any]:
        return {"description": self.description}

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """
        Build a Task from a decoded JSON object.

        Raises ValueError when the shape is wrong; extra keys are ignored.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"task entry must be an object, got {type(raw).__name__}")
        desc = raw.get("description")
        if not isinstance(desc, str):
            raise ValueError("task entry is missing a string 'description'")
        return cls(description=desc)
