# src/task_digest/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- No secrets required at import time; `Settings.missing()` reports what is absent.
- Bare variable names used by older deployments (TODOIST_API_TOKEN, SLACK_BOT_TOKEN, ...)
  are accepted as fallbacks for the prefixed ones.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "TASK_DIGEST"

DEFAULT_SCHEDULE_INTERVAL_SECONDS = 24 * 60 * 60
MIN_SCHEDULE_INTERVAL_SECONDS = 60


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


# Local .env (gitignored) never overrides real environment variables.
load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Todoist ----
    todoist_api_token: str
    todoist_base_url: str

    # ---- Slack ----
    slack_bot_token: str
    slack_signing_secret: str
    slack_post_channel: str

    # ---- Classification ----
    timezone: str

    # ---- HTTP trigger surface ----
    http_host: str
    http_port: int

    # ---- Periodic digest ----
    schedule_enabled: bool
    schedule_interval_seconds: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-digest")
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/task_digest"))

        todoist_api_token = (_first_env(_k("TODOIST_API_TOKEN"), "TODOIST_API_TOKEN", default="") or "").strip()
        todoist_base_url = _env(_k("TODOIST_BASE_URL"), "https://api.todoist.com/rest/v2").rstrip("/")

        slack_bot_token = (_first_env(_k("SLACK_BOT_TOKEN"), "SLACK_BOT_TOKEN", default="") or "").strip()
        slack_signing_secret = (
            _first_env(_k("SLACK_SIGNING_SECRET"), "SLACK_SIGNING_SECRET", default="") or ""
        ).strip()
        slack_post_channel = (_first_env(_k("SLACK_POST_CHANNEL"), "SLACK_POST_CHANNEL", default="") or "").strip()

        timezone = _env(_k("TIMEZONE"), "UTC").strip() or "UTC"

        http_host = _env(_k("HTTP_HOST"), "0.0.0.0")
        http_port = _env_int(_k("HTTP_PORT"), _env_int("PORT", 3000))

        schedule_enabled = _env_bool(_k("SCHEDULE_ENABLED"), False)
        schedule_interval_seconds = _env_int(_k("SCHEDULE_INTERVAL_SECONDS"), DEFAULT_SCHEDULE_INTERVAL_SECONDS)
        if schedule_interval_seconds < MIN_SCHEDULE_INTERVAL_SECONDS:
            logger.warning(
                "%s=%d is below the %ds minimum, using %ds",
                _k("SCHEDULE_INTERVAL_SECONDS"),
                schedule_interval_seconds,
                MIN_SCHEDULE_INTERVAL_SECONDS,
                DEFAULT_SCHEDULE_INTERVAL_SECONDS,
            )
            schedule_interval_seconds = DEFAULT_SCHEDULE_INTERVAL_SECONDS

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            todoist_api_token=todoist_api_token,
            todoist_base_url=todoist_base_url,
            slack_bot_token=slack_bot_token,
            slack_signing_secret=slack_signing_secret,
            slack_post_channel=slack_post_channel,
            timezone=timezone,
            http_host=http_host,
            http_port=http_port,
            schedule_enabled=schedule_enabled,
            schedule_interval_seconds=schedule_interval_seconds,
        )

    def missing(self) -> list[str]:
        """Names of required variables that are not set."""
        required = {
            _k("TODOIST_API_TOKEN"): self.todoist_api_token,
            _k("SLACK_BOT_TOKEN"): self.slack_bot_token,
            _k("SLACK_SIGNING_SECRET"): self.slack_signing_secret,
            _k("SLACK_POST_CHANNEL"): self.slack_post_channel,
        }
        return [name for name, value in required.items() if not value]


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
