# src/task_digest/digest/notification.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

OPEN_COMMENT_ACTION_ID = "open_comment_modal"
OPEN_COMMENT_BUTTON_LABEL = "Submit Comment"

Block = dict[str, Any]


@dataclass(slots=True, frozen=True)
class MessageRef:
    """Identity of a published Slack message."""

    channel: str
    ts: str


@dataclass(slots=True, frozen=True)
class Notification:
    """
    What gets posted (or written back) to Slack.

    `text` is the display body and the notification fallback; `blocks` is the
    Block Kit rendering Slack actually shows.
    """

    text: str
    blocks: list[Block] = field(default_factory=list)


def mrkdwn_section(text: str) -> Block:
    return {
        "type": "section",
        "text": {"type": "mrkdwn", "text": text},
    }


def comment_button() -> Block:
    return {
        "type": "actions",
        "elements": [
            {
                "type": "button",
                "text": {"type": "plain_text", "text": OPEN_COMMENT_BUTTON_LABEL},
                "action_id": OPEN_COMMENT_ACTION_ID,
            }
        ],
    }
