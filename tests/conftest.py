# tests/conftest.py

from __future__ import annotations

from datetime import date, datetime, timezone
from pathlib import Path
from types import SimpleNamespace

import pytest

from task_digest.core.state import AppState
from task_digest.tasks.task_models import Task

from .fakes import FakeMessenger, FakeTaskSource

TODAY = date(2024, 1, 2)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the connectors.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="task-digest-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        todoist_api_token="todoist-token",
        todoist_base_url="https://todoist.test/rest/v2",
        slack_bot_token="xoxb-test",
        slack_signing_secret="secret",
        slack_post_channel="C123",
        timezone="UTC",
        http_host="127.0.0.1",
        http_port=3000,
        schedule_enabled=False,
        schedule_interval_seconds=60,
    )


@pytest.fixture()
def anchor() -> datetime:
    return datetime(TODAY.year, TODAY.month, TODAY.day, tzinfo=timezone.utc)


@pytest.fixture()
def make_task():
    counter = {"n": 0}

    def _make(content: str, *, done: bool = False, due: date | None = None) -> Task:
        counter["n"] += 1
        return Task(id=str(counter["n"]), content=content, is_completed=done, due=due)

    return _make


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired with deterministic fakes."""
    return AppState(
        settings=settings,
        task_source=FakeTaskSource(),
        messenger=FakeMessenger(),
        tz=timezone.utc,
    )
