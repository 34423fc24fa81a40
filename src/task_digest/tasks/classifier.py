# src/task_digest/tasks/classifier.py

from __future__ import annotations

"""
Task classifier.

Buckets a task list relative to one anchor day:
- completed_today: completed, due today
- overdue: open, due strictly before today
- due_tomorrow: open, due tomorrow

Todoist due dates are calendar dates (already in the user's Todoist timezone), so the
anchor is reduced to a calendar date in the configured zone and only dates are compared.
Tasks without a due date carry no urgency signal and land in no bucket.
"""

import logging
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .task_models import BucketSet, Task

logger = logging.getLogger(__name__)


def resolve_timezone(name: str | None) -> tzinfo:
    name = (name or "").strip()
    if not name or name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, falling back to UTC", name)
        return timezone.utc


def anchor_for(now: datetime | None = None, tz: tzinfo = timezone.utc) -> datetime:
    """Start of the current day in `tz`. A naive `now` is taken as already being in `tz`."""
    if now is None:
        now = datetime.now(tz)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=tz)
    else:
        now = now.astimezone(tz)
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def classify(tasks: Iterable[Task], anchor: datetime) -> BucketSet:
    today = anchor.date()
    tomorrow = today + timedelta(days=1)

    completed_today: list[Task] = []
    overdue: list[Task] = []
    due_tomorrow: list[Task] = []

    for task in tasks:
        if task.due is None:
            continue
        if task.is_completed:
            if task.due == today:
                completed_today.append(task)
        elif task.due < today:
            overdue.append(task)
        elif task.due == tomorrow:
            due_tomorrow.append(task)

    return BucketSet(
        completed_today=tuple(completed_today),
        overdue=tuple(overdue),
        due_tomorrow=tuple(due_tomorrow),
    )
