# src/task_digest/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires concrete implementations into AppState (Todoist source, Slack messenger).
"""

from __future__ import annotations

import logging

from slack_sdk.web.async_client import AsyncWebClient

from ..config import get_settings
from ..connectors.slack_messenger import SlackMessenger
from ..core.state import AppState
from ..tasks.classifier import resolve_timezone
from ..tasks.task_source import TodoistTaskSource

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_slack_client(settings) -> AsyncWebClient:
    return AsyncWebClient(token=settings.slack_bot_token)


def create_initial_state(*, settings=None, slack_client: AsyncWebClient | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if slack_client is None:
        slack_client = create_slack_client(settings)

    tz = resolve_timezone(settings.timezone)
    logger.info("Classifying tasks against calendar days in %s", tz)

    return AppState(
        settings=settings,
        task_source=TodoistTaskSource(settings.todoist_api_token, base_url=settings.todoist_base_url),
        messenger=SlackMessenger(slack_client),
        tz=tz,
    )
