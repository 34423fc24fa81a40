# src/task_digest/digest/digest_scheduler.py

from __future__ import annotations

"""
Digest scheduler.

A small polling loop that runs the digest pipeline every interval_seconds.
Each run is isolated: a failure is logged and the next run happens on schedule.
There is no catch-up for missed runs and no retry of a failed one.
"""

import asyncio
import logging
from datetime import timezone, tzinfo

from ..core.ports import Messenger, TaskSource
from .pipeline import run_digest

logger = logging.getLogger(__name__)


async def run_digest_scheduler(
        source: TaskSource,
        messenger: Messenger,
        *,
        channel: str,
        tz: tzinfo = timezone.utc,
        interval_seconds: float = 24 * 60 * 60,
        run_immediately: bool = True,
) -> None:
    """
    Every interval_seconds:
    - run fetch -> classify -> compose -> publish once
    - log and swallow anything that escapes the run

    To stop the scheduler, cancel the coroutine/task.
    """
    sleep_s = max(0.5, float(interval_seconds))

    if not run_immediately:
        await asyncio.sleep(sleep_s)

    while True:
        try:
            await run_digest(source, messenger, channel=channel, tz=tz)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("Scheduled digest run failed")

        await asyncio.sleep(sleep_s)
