# src/task_digest/interaction/context.py

from __future__ import annotations

import json
from dataclasses import dataclass

# Slack caps view.private_metadata at 3000 characters.
PRIVATE_METADATA_LIMIT = 3000


@dataclass(slots=True, frozen=True)
class InteractionContext:
    """
    Everything step 2 needs to find and rebuild the original digest message.

    Travels by value inside the modal's private_metadata: there is no server-side
    session, so the two steps may run in different processes or after a restart.
    Fields are copied verbatim from the triggering event and never re-derived.
    """

    original_message_ts: str
    channel_id: str
    original_text: str

    def serialize(self) -> str:
        return json.dumps(
            {
                "original_message_ts": self.original_message_ts,
                "channel_id": self.channel_id,
                "original_text": self.original_text,
            },
            ensure_ascii=False,
        )

    @classmethod
    def deserialize(cls, raw: str) -> InteractionContext:
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError("Interaction context must be a JSON object")

        fields = ("original_message_ts", "channel_id", "original_text")
        values: dict[str, str] = {}
        for name in fields:
            v = data.get(name)
            if not isinstance(v, str):
                raise ValueError(f"Interaction context field {name!r} missing or not a string")
            values[name] = v
        return cls(**values)
