# src/task_digest/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "task_digest.log"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# HTTP clients and the Slack SDKs log every request at DEBUG/INFO; a digest run
# makes a handful of calls, so their chatter would bury our own lines even in the file.
QUIET_LOGGERS: dict[str, int] = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "slack_bolt": logging.WARNING,
    "slack_sdk": logging.WARNING,
    "aiohttp.access": logging.WARNING,
}


class _ConsoleNoiseFilter(logging.Filter):
    """
    Console shows:
    - every task_digest record
    - Slack libraries and the aiohttp server at WARNING+ (bad signatures, API and handler errors)
    - anything else, 'py.warnings' included, at ERROR+
    """

    _WARN_PREFIXES = ("slack_bolt", "slack_sdk", "aiohttp.server", "aiohttp.web")

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "task_digest" or name.startswith("task_digest."):
            return True

        if name.startswith(self._WARN_PREFIXES):
            return record.levelno >= logging.WARNING

        return record.levelno >= logging.ERROR


def resolve_level(level: int | str, default: int = logging.INFO) -> int:
    """Accept 10 / "debug" / "WARNING"; unknown names give `default`."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else default


def setup_logging(
    *,
    log_dir: str | Path = ".local/task_digest",
    console_level: int | str = logging.INFO,
    file_level: int | str = logging.DEBUG,
) -> Path:
    """
    Install a filtered stderr handler and a full file handler on the root logger.

    Replaces any handlers already on the root logger, so call it once at startup.
    Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(resolve_level(console_level))
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(resolve_level(file_level, logging.DEBUG))
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    for name, level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)

    # warnings.warn(...) -> 'py.warnings' logger
    logging.captureWarnings(True)

    return log_file
