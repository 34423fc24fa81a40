# src/task_digest/connectors/slack_messenger.py

from __future__ import annotations

import asyncio
import logging

import aiohttp
from slack_sdk.errors import SlackApiError, SlackClientError
from slack_sdk.web.async_client import AsyncWebClient

from ..core.outcome import Outcome
from ..core.ports import SlackView
from ..digest.notification import MessageRef, Notification

logger = logging.getLogger(__name__)

_TRANSPORT_ERRORS = (SlackClientError, aiohttp.ClientError, asyncio.TimeoutError)


def _describe(exc: BaseException) -> str:
    if isinstance(exc, SlackApiError):
        try:
            return str(exc.response["error"])
        except Exception:
            return str(exc)
    return repr(exc)


class SlackMessenger:
    """
    Messenger port over slack_sdk's AsyncWebClient.

    chat.postMessage / views.open / chat.update, one attempt each. API and transport
    errors come back as failed Outcomes; the caller decides how to log them.
    """

    def __init__(self, client: AsyncWebClient) -> None:
        self._client = client

    async def post_notification(self, channel: str, notification: Notification) -> Outcome[MessageRef]:
        try:
            resp = await self._client.chat_postMessage(
                channel=channel,
                text=notification.text,
                blocks=notification.blocks,
            )
        except _TRANSPORT_ERRORS as e:
            logger.debug("chat.postMessage failed: %s", _describe(e))
            return Outcome.failure(e)
        return Outcome.success(MessageRef(channel=str(resp["channel"]), ts=str(resp["ts"])))

    async def open_form(self, trigger_id: str, view: SlackView) -> Outcome[None]:
        try:
            await self._client.views_open(trigger_id=trigger_id, view=view)
        except _TRANSPORT_ERRORS as e:
            logger.debug("views.open failed: %s", _describe(e))
            return Outcome.failure(e)
        return Outcome.success(None)

    async def update_notification(self, ref: MessageRef, notification: Notification) -> Outcome[MessageRef]:
        try:
            resp = await self._client.chat_update(
                channel=ref.channel,
                ts=ref.ts,
                text=notification.text,
                blocks=notification.blocks,
            )
        except _TRANSPORT_ERRORS as e:
            logger.debug("chat.update failed: %s", _describe(e))
            return Outcome.failure(e)
        return Outcome.success(MessageRef(channel=str(resp.get("channel", ref.channel)), ts=str(resp.get("ts", ref.ts))))
