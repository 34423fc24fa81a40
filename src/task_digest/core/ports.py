# src/task_digest/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The pipeline and the interaction flow depend on Protocols instead of concrete
implementations. This keeps the Todoist/Slack adapters swappable and makes testing easier.
"""

from typing import TYPE_CHECKING, Any, Awaitable, Callable, Protocol

from .outcome import Outcome

if TYPE_CHECKING:
    from ..digest.notification import MessageRef, Notification
    from ..tasks.task_models import Task

Ack = Callable[[], Awaitable[None]]
# Acknowledges an inbound interactive event (slack_bolt's `ack`).

SlackView = dict[str, Any]
# Block Kit view payload (modal definition).


class TaskSource(Protocol):
    """Read-only task list. Never raises; an empty list is the degraded result."""

    def fetch(self) -> Awaitable[list[Task]]: ...


class Messenger(Protocol):
    """
    Connector-side port: the three outbound calls the core makes against the
    messaging platform. Each returns an Outcome instead of raising.
    """

    def post_notification(self, channel: str, notification: Notification) -> Awaitable[Outcome[MessageRef]]: ...

    def open_form(self, trigger_id: str, view: SlackView) -> Awaitable[Outcome[None]]: ...

    def update_notification(self, ref: MessageRef, notification: Notification) -> Awaitable[Outcome[MessageRef]]: ...
