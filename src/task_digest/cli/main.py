# src/task_digest/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then either:
- serve (default): runs the aiohttp server with the Slack bolt app and /send-tasks,
  plus the periodic digest when enabled,
- send: runs the digest pipeline once and exits (for cron).
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from aiohttp import web

from ..cli.bootstrap import create_initial_state, create_slack_client
from ..config import get_settings
from ..connectors.slack_app import build_web_app, create_slack_app
from ..digest.pipeline import run_digest
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="task-digest", description="Todoist task digest for Slack.")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("serve", help="Run the Slack events + /send-tasks HTTP server (default).")
    sub.add_parser("send", help="Fetch, classify and post the digest once, then exit.")
    args = parser.parse_args(argv)
    if args.command is None:
        args.command = "serve"
    return args


async def _send_once(state) -> int:
    outcome = await run_digest(state.task_source, state.messenger, channel=state.channel, tz=state.tz)
    return 0 if outcome.ok else 1


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()

    log_file = setup_logging(log_dir=settings.data_dir, console_level=settings.log_level)
    logger.debug("Full log at %s", log_file)

    missing = settings.missing()
    if missing:
        logger.error("Missing required configuration: %s", ", ".join(missing))
        return 2

    logger.info("Starting %s (%s)...", settings.app_name, args.command)

    slack_client = create_slack_client(settings)
    state = create_initial_state(settings=settings, slack_client=slack_client)

    if args.command == "send":
        return asyncio.run(_send_once(state))

    app = create_slack_app(client=slack_client, signing_secret=settings.slack_signing_secret)
    web_app = build_web_app(app, state)

    logger.info("Slack app is running on %s:%d", settings.http_host, settings.http_port)
    web.run_app(web_app, host=settings.http_host, port=settings.http_port, print=None)
    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
