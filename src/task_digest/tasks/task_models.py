# src/task_digest/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any


def _parse_due_date(raw_due: Any) -> date | None:
    """
    Extract the calendar date from a Todoist `due` object.

    `due.date` is "YYYY-MM-DD" for all-day tasks and may carry a time part
    ("YYYY-MM-DDTHH:MM:SS") for timed ones; only the date part is kept.
    """
    if raw_due is None:
        return None
    if not isinstance(raw_due, dict):
        raise ValueError(f"due must be an object, got {type(raw_due).__name__}")
    raw_date = raw_due.get("date")
    if not raw_date:
        return None
    return date.fromisoformat(str(raw_date)[:10])


@dataclass(slots=True, frozen=True)
class Task:
    id: str
    content: str
    is_completed: bool
    due: date | None = None

    @classmethod
    def from_api(cls, record: dict[str, Any]) -> Task:
        """Build a Task from a Todoist REST record. Raises KeyError/ValueError on malformed input."""
        return cls(
            id=str(record["id"]),
            content=str(record["content"]),
            is_completed=bool(record.get("is_completed", False)),
            due=_parse_due_date(record.get("due")),
        )


@dataclass(slots=True, frozen=True)
class BucketSet:
    """
    Three disjoint groupings of one classification run.

    Each bucket keeps the order in which tasks came from the source.
    """

    completed_today: tuple[Task, ...] = ()
    overdue: tuple[Task, ...] = ()
    due_tomorrow: tuple[Task, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.completed_today or self.overdue or self.due_tomorrow)
