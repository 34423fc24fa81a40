# tests/test_pipeline.py

from __future__ import annotations

import logging
from datetime import date, datetime, timezone

import pytest

from task_digest.connectors.slack_app import SEND_TASKS_REPLY, make_send_tasks_handler
from task_digest.digest.pipeline import run_digest

from .fakes import FakeMessenger, FakeTaskSource, has_comment_button

NOW = datetime(2024, 1, 2, 9, 30, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_completed_task_digest_is_posted(make_task) -> None:
    source = FakeTaskSource([make_task("Report", done=True, due=date(2024, 1, 2))])
    messenger = FakeMessenger()

    outcome = await run_digest(source, messenger, channel="C123", now=NOW)

    assert outcome.ok
    assert outcome.value.channel == "C123"
    channel, notification = messenger.posted[0]
    assert channel == "C123"
    assert notification.text == "*Completed Today:*\n * Report\n"
    assert has_comment_button(notification)


@pytest.mark.asyncio
async def test_no_tasks_posts_placeholder() -> None:
    messenger = FakeMessenger()

    await run_digest(FakeTaskSource([]), messenger, channel="C123", now=NOW)

    assert messenger.posted[0][1].text == "No tasks to display."


@pytest.mark.asyncio
async def test_overdue_task_shows_due_date(make_task) -> None:
    messenger = FakeMessenger()
    source = FakeTaskSource([make_task("Taxes", due=date(2024, 1, 1))])

    await run_digest(source, messenger, channel="C123", now=NOW)

    assert "(Due: 2024-01-01)" in messenger.posted[0][1].text
    assert messenger.posted[0][1].text.startswith("*Overdue Tasks:*")


@pytest.mark.asyncio
async def test_publish_failure_is_returned_not_raised(caplog) -> None:
    messenger = FakeMessenger(fail_post=True)

    outcome = await run_digest(FakeTaskSource([]), messenger, channel="C123", now=NOW)

    assert not outcome.ok
    assert "Error sending digest" in caplog.text


@pytest.mark.asyncio
async def test_send_tasks_endpoint_reports_completion(state, make_task) -> None:
    state.task_source.tasks = [make_task("Dentist", due=date(2099, 1, 1))]
    handler = make_send_tasks_handler(state)

    resp = await handler(None)

    assert resp.text == SEND_TASKS_REPLY
    assert state.task_source.calls == 1
    assert state.messenger.posted[0][0] == "C123"


@pytest.mark.asyncio
async def test_send_tasks_endpoint_reports_completion_even_if_publish_fails(state) -> None:
    state.messenger.fail_post = True

    resp = await make_send_tasks_handler(state)(None)

    assert resp.text == SEND_TASKS_REPLY


@pytest.mark.asyncio
async def test_empty_digest_is_logged_as_nothing_to_report(make_task, caplog) -> None:
    caplog.set_level(logging.INFO, logger="task_digest")
    undated = make_task("Someday")

    await run_digest(FakeTaskSource([undated]), FakeMessenger(), channel="C123", now=NOW)

    assert "Digest for 2024-01-02: nothing to report (1 tasks fetched)" in caplog.text
    assert "overdue=" not in caplog.text


@pytest.mark.asyncio
async def test_non_empty_digest_logs_bucket_counts(make_task, caplog) -> None:
    caplog.set_level(logging.INFO, logger="task_digest")
    source = FakeTaskSource([make_task("Taxes", due=date(2024, 1, 1))])

    await run_digest(source, FakeMessenger(), channel="C123", now=NOW)

    assert "completed_today=0 overdue=1 due_tomorrow=0" in caplog.text
