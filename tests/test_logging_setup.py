# tests/test_logging_setup.py

from __future__ import annotations

import logging

import pytest

from task_digest.logging_setup import QUIET_LOGGERS, _ConsoleNoiseFilter, resolve_level, setup_logging


@pytest.fixture()
def restore_logging():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    saved_levels = {name: logging.getLogger(name).level for name in QUIET_LOGGERS}
    yield root
    for h in list(root.handlers):
        if h not in saved_handlers:
            root.removeHandler(h)
            h.close()
    for h in saved_handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(saved_level)
    for name, level in saved_levels.items():
        logging.getLogger(name).setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_setup_pins_noisy_libraries_and_writes_file(tmp_path, restore_logging) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs", console_level="warning")

    for name in ("httpx", "httpcore", "slack_bolt", "slack_sdk", "aiohttp.access"):
        assert logging.getLogger(name).level == logging.WARNING

    logging.getLogger("task_digest.test").info("written to file")
    for h in restore_logging.handlers:
        h.flush()

    assert log_file == tmp_path / "logs" / "task_digest.log"
    assert "written to file" in log_file.read_text(encoding="utf-8")
    console = [h for h in restore_logging.handlers if not isinstance(h, logging.FileHandler)]
    assert [h.level for h in console] == [logging.WARNING]


def test_setup_replaces_existing_root_handlers(tmp_path, restore_logging) -> None:
    setup_logging(log_dir=tmp_path)
    setup_logging(log_dir=tmp_path)

    assert len(restore_logging.handlers) == 2


def test_console_filter_levels() -> None:
    f = _ConsoleNoiseFilter()

    assert f.filter(_record("task_digest.digest.pipeline", logging.DEBUG))
    assert not f.filter(_record("slack_bolt.AsyncApp", logging.INFO))
    assert f.filter(_record("slack_bolt.AsyncApp", logging.WARNING))
    assert f.filter(_record("aiohttp.server", logging.WARNING))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert not f.filter(_record("asyncio", logging.WARNING))
    assert f.filter(_record("asyncio", logging.ERROR))
    assert not f.filter(_record("task_digestion", logging.INFO))


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("debug", logging.DEBUG), (" WARNING ", logging.WARNING), (logging.ERROR, logging.ERROR), ("loud", logging.INFO)],
)
def test_resolve_level(raw, expected) -> None:
    assert resolve_level(raw) == expected
