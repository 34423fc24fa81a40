# src/task_digest/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo

from .ports import Messenger, TaskSource


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    task_source: TaskSource
    messenger: Messenger
    tz: tzinfo

    @property
    def channel(self) -> str:
        return str(getattr(self.settings, "slack_post_channel", "") or "")
