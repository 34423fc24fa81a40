# src/task_digest/connectors/slack_app.py

from __future__ import annotations

"""
Inbound Slack surface.

One aiohttp application serves:
- POST /slack/events: bolt AsyncApp (signature-verified interactive callbacks)
- GET  /send-tasks:   runs the digest pipeline once and reports completion

The bolt listeners are thin: they wrap the per-request client in a SlackMessenger and
hand off to the interaction coordinator, which owns the ack-then-work ordering.
"""

import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator, Awaitable, Callable

from aiohttp import web
from slack_bolt.async_app import AsyncApp
from slack_sdk.web.async_client import AsyncWebClient

from ..core.state import AppState
from ..digest.digest_scheduler import run_digest_scheduler
from ..digest.notification import OPEN_COMMENT_ACTION_ID
from ..digest.pipeline import run_digest
from ..interaction.coordinator import SUBMIT_COMMENT_CALLBACK_ID, open_comment_form, submit_comment
from .slack_messenger import SlackMessenger

logger = logging.getLogger(__name__)

SLACK_EVENTS_PATH = "/slack/events"
SEND_TASKS_PATH = "/send-tasks"
SEND_TASKS_REPLY = "Tasks sent to Slack."


def register_handlers(app: AsyncApp) -> None:
    @app.action(OPEN_COMMENT_ACTION_ID)
    async def _open_comment(ack, body, client: AsyncWebClient) -> None:
        await open_comment_form(ack, body, SlackMessenger(client))

    @app.view(SUBMIT_COMMENT_CALLBACK_ID)
    async def _submit_comment(ack, view, client: AsyncWebClient) -> None:
        await submit_comment(ack, view, SlackMessenger(client))


def create_slack_app(*, client: AsyncWebClient, signing_secret: str) -> AsyncApp:
    app = AsyncApp(client=client, signing_secret=signing_secret)
    register_handlers(app)
    return app


def make_send_tasks_handler(state: AppState) -> Callable[[web.Request], Awaitable[web.Response]]:
    async def send_tasks(_request: web.Request) -> web.Response:
        # Completion is reported regardless of the publish outcome (already logged).
        await run_digest(state.task_source, state.messenger, channel=state.channel, tz=state.tz)
        return web.Response(text=SEND_TASKS_REPLY)

    return send_tasks


def _scheduler_ctx(state: AppState) -> Callable[[web.Application], AsyncIterator[None]]:
    interval = float(getattr(state.settings, "schedule_interval_seconds", 24 * 60 * 60))

    async def ctx(_app: web.Application) -> AsyncIterator[None]:
        task = asyncio.create_task(
            run_digest_scheduler(
                state.task_source,
                state.messenger,
                channel=state.channel,
                tz=state.tz,
                interval_seconds=interval,
            )
        )
        logger.info("Digest scheduler started (every %.0fs)", interval)
        yield
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.info("Digest scheduler stopped")

    return ctx


def build_web_app(app: AsyncApp, state: AppState) -> web.Application:
    port = int(getattr(state.settings, "http_port", 3000))
    web_app = app.web_app(path=SLACK_EVENTS_PATH, port=port)
    web_app.router.add_get(SEND_TASKS_PATH, make_send_tasks_handler(state))

    if getattr(state.settings, "schedule_enabled", False):
        web_app.cleanup_ctx.append(_scheduler_ctx(state))

    return web_app
