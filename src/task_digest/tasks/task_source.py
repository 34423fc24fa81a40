# src/task_digest/tasks/task_source.py

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..core.outcome import Outcome
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.todoist.com/rest/v2"


class TaskSourceError(Exception):
    """Remote side answered, but not with a usable task list."""


def _parse_tasks(payload: Any) -> list[Task]:
    if not isinstance(payload, list):
        raise TaskSourceError(f"Expected a JSON list of tasks, got {type(payload).__name__}")

    tasks: list[Task] = []
    for record in payload:
        if not isinstance(record, dict):
            logger.warning("Skipping non-object task record: %r", record)
            continue
        try:
            tasks.append(Task.from_api(record))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping malformed task record id=%r: %r", record.get("id"), e)
    return tasks


class TodoistTaskSource:
    """
    Fetches the active task list from the Todoist REST API.

    One GET per fetch, bearer-token authenticated, transport default timeout, no retries.
    """

    def __init__(
        self,
        api_token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_token = api_token
        self._base_url = base_url.rstrip("/")
        self._transport = transport

    async def fetch_outcome(self) -> Outcome[list[Task]]:
        headers = {"Authorization": f"Bearer {self._api_token}"}
        try:
            async with httpx.AsyncClient(base_url=self._base_url, transport=self._transport) as client:
                resp = await client.get("/tasks", headers=headers)
                resp.raise_for_status()
                payload = resp.json()
            tasks = _parse_tasks(payload)
        except (httpx.HTTPError, ValueError, TaskSourceError) as e:
            return Outcome.failure(e)

        logger.info("Fetched %d tasks from Todoist", len(tasks))
        return Outcome.success(tasks)

    async def fetch(self) -> list[Task]:
        outcome = await self.fetch_outcome()
        if not outcome.ok:
            logger.error("Error fetching tasks from Todoist: %r", outcome.error)
        return outcome.value_or([])
