# src/task_digest/interaction/coordinator.py

from __future__ import annotations

"""
Interaction coordinator.

Two-step comment flow against a published digest:

    idle --(button click)--> form_open --(modal submit)--> resolved

Step 1 copies the original message's ts, channel and text into an InteractionContext
and opens a modal carrying it as private_metadata. Step 2 reads it back and rewrites
the original message as "original text + User Comment section".

Both handlers ack first and only then do slow work (Slack expects an ack within 3s).
Failures are logged and the interaction is abandoned; nothing is retried.
Concurrent submissions are not de-duplicated: the last successful update wins.
"""

import logging
from enum import StrEnum
from typing import Any

from ..core.ports import Ack, Messenger, SlackView
from ..digest.composer import merge_comment
from ..digest.notification import MessageRef
from .context import PRIVATE_METADATA_LIMIT, InteractionContext

logger = logging.getLogger(__name__)

SUBMIT_COMMENT_CALLBACK_ID = "submit_comment"
COMMENT_BLOCK_ID = "comment_block"
COMMENT_INPUT_ACTION_ID = "comment_input"


class InteractionState(StrEnum):
    IDLE = "idle"
    FORM_OPEN = "form_open"
    RESOLVED = "resolved"


def context_from_action(body: dict[str, Any]) -> InteractionContext:
    """Copy the originating message's identity and displayed text out of a block_actions payload."""
    message = body["message"]
    return InteractionContext(
        original_message_ts=str(message["ts"]),
        channel_id=str(body["channel"]["id"]),
        original_text=str(message["blocks"][0]["text"]["text"]),
    )


def build_comment_form(context: InteractionContext) -> SlackView:
    return {
        "type": "modal",
        "callback_id": SUBMIT_COMMENT_CALLBACK_ID,
        "private_metadata": context.serialize(),
        "title": {"type": "plain_text", "text": "Add Comment"},
        "submit": {"type": "plain_text", "text": "Submit"},
        "blocks": [
            {
                "type": "input",
                "block_id": COMMENT_BLOCK_ID,
                "element": {
                    "type": "plain_text_input",
                    "action_id": COMMENT_INPUT_ACTION_ID,
                    "placeholder": {"type": "plain_text", "text": "Enter your comment here..."},
                },
                "label": {"type": "plain_text", "text": "Your Comment"},
            }
        ],
    }


def comment_from_view(view: dict[str, Any]) -> str:
    field = view["state"]["values"][COMMENT_BLOCK_ID][COMMENT_INPUT_ACTION_ID]
    if not isinstance(field, dict):
        raise TypeError(f"comment input state must be an object, got {type(field).__name__}")
    value = field.get("value")
    return "" if value is None else str(value)


async def open_comment_form(ack: Ack, body: dict[str, Any], messenger: Messenger) -> InteractionState:
    """idle -> form_open. Returns the state the interaction ended in."""
    await ack()

    try:
        trigger_id = str(body["trigger_id"])
        context = context_from_action(body)
    except (KeyError, IndexError, TypeError) as e:
        logger.error("Cannot open comment form, malformed action payload: %r", e)
        return InteractionState.IDLE

    view = build_comment_form(context)
    if len(view["private_metadata"]) > PRIVATE_METADATA_LIMIT:
        logger.warning(
            "Comment context for ts=%s is %d chars (Slack limit %d); views.open will likely fail",
            context.original_message_ts,
            len(view["private_metadata"]),
            PRIVATE_METADATA_LIMIT,
        )

    outcome = await messenger.open_form(trigger_id, view)
    if not outcome.ok:
        logger.error("Error opening comment modal for ts=%s: %r", context.original_message_ts, outcome.error)
        return InteractionState.IDLE

    logger.info("Comment form opened for message %s in %s", context.original_message_ts, context.channel_id)
    return InteractionState.FORM_OPEN


async def submit_comment(ack: Ack, view: dict[str, Any], messenger: Messenger) -> InteractionState:
    """form_open -> resolved. Returns the state the interaction ended in."""
    await ack()

    try:
        context = InteractionContext.deserialize(view["private_metadata"])
        comment = comment_from_view(view)
    except (KeyError, TypeError, ValueError) as e:
        logger.error("Cannot apply comment, malformed submission payload: %r", e)
        return InteractionState.FORM_OPEN

    ref = MessageRef(channel=context.channel_id, ts=context.original_message_ts)
    outcome = await messenger.update_notification(ref, merge_comment(context.original_text, comment))
    if not outcome.ok:
        logger.error("Error updating message %s in %s: %r", ref.ts, ref.channel, outcome.error)
        return InteractionState.FORM_OPEN

    logger.info("Comment merged into message %s in %s", ref.ts, ref.channel)
    return InteractionState.RESOLVED
