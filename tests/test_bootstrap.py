# tests/test_bootstrap.py

from __future__ import annotations

from datetime import timezone
from zoneinfo import ZoneInfo

from task_digest.cli.bootstrap import create_initial_state
from task_digest.cli.main import _parse_args
from task_digest.connectors.slack_messenger import SlackMessenger
from task_digest.tasks.task_source import TodoistTaskSource

from .fakes import FakeSlackWebClient


def test_initial_state_wires_concrete_adapters(settings) -> None:
    state = create_initial_state(settings=settings, slack_client=FakeSlackWebClient())

    assert isinstance(state.task_source, TodoistTaskSource)
    assert isinstance(state.messenger, SlackMessenger)
    assert state.tz is timezone.utc
    assert state.channel == "C123"
    assert settings.data_dir.is_dir()


def test_initial_state_uses_configured_timezone(settings) -> None:
    settings.timezone = "Asia/Tokyo"

    state = create_initial_state(settings=settings, slack_client=FakeSlackWebClient())

    assert state.tz == ZoneInfo("Asia/Tokyo")


def test_cli_defaults_to_serve() -> None:
    assert _parse_args([]).command == "serve"
    assert _parse_args(["send"]).command == "send"
