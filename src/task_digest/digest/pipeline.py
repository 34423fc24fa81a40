# src/task_digest/digest/pipeline.py

from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo

from ..core.outcome import Outcome
from ..core.ports import Messenger, TaskSource
from ..tasks.classifier import anchor_for, classify
from .composer import compose
from .notification import MessageRef

logger = logging.getLogger(__name__)


async def run_digest(
        source: TaskSource,
        messenger: Messenger,
        *,
        channel: str,
        tz: tzinfo = timezone.utc,
        now: datetime | None = None,
) -> Outcome[MessageRef]:
    """
    One digest run: fetch -> classify -> compose -> publish.

    The anchor is taken once, before fetching, so the whole run compares against the
    same day. A failed publish is logged and returned; the run is over either way.
    """
    anchor = anchor_for(now, tz)

    tasks = await source.fetch()
    buckets = classify(tasks, anchor)
    notification = compose(buckets)

    if buckets.is_empty:
        logger.info("Digest for %s: nothing to report (%d tasks fetched)", anchor.date().isoformat(), len(tasks))
    else:
        logger.info(
            "Digest for %s: completed_today=%d overdue=%d due_tomorrow=%d",
            anchor.date().isoformat(),
            len(buckets.completed_today),
            len(buckets.overdue),
            len(buckets.due_tomorrow),
        )

    outcome = await messenger.post_notification(channel, notification)
    if outcome.ok:
        ref = outcome.value
        logger.info("Digest posted to %s (ts=%s)", channel, ref.ts if ref else "?")
    else:
        logger.error("Error sending digest to Slack channel %s: %r", channel, outcome.error)
    return outcome
