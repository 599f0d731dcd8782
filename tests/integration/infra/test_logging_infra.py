from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration and
log file rotation.
"""

import logging
import time
from pathlib import Path

import pytest

from structural_patterns.infra.logging import (
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
)


@pytest.fixture(autouse=True)
def _isolated_logging(reset_logging):
    yield


def test_logging_idempotency() -> None:
    """Multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    root = logging.getLogger()
    initial_handler_count = len(root.handlers)

    configure_logging(cfg)
    assert len(root.handlers) == initial_handler_count


def test_force_replaces_listener() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    root = logging.getLogger()
    first = getattr(root, _QUEUE_LISTENER_ATTR)

    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert getattr(root, _QUEUE_LISTENER_ATTR) is not first
    assert root.level == logging.DEBUG


def test_log_rotation(tmp_path: Path) -> None:
    """File rotation happens when the size limit is exceeded."""
    log_file = tmp_path / "test_rotate.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        rotate_at=100,
        keep=1,
    )

    configure_logging(cfg)
    logger = logging.getLogger("test_rotate")

    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    # Give the QueueListener time to drain
    time.sleep(0.5)

    assert log_file.exists()
    assert (tmp_path / "test_rotate.log.1").exists()


def test_queue_listener_architecture() -> None:
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    ours = [h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]

    assert len(ours) == 1
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None


def test_unknown_level_falls_back_to_warning() -> None:
    configure_logging(LoggingConfig(level="chatty"))
    assert logging.getLogger().level == logging.WARNING


def test_structural_events_logged_at_debug(tmp_path: Path) -> None:
    from structural_patterns.patterns.composite import File, Folder

    log_file = tmp_path / "events.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    folder = Folder("Docs")
    folder.add(File("a.txt"))

    time.sleep(0.3)
    content = log_file.read_text(encoding="utf-8")
    assert "Folder 'Docs': added 'a.txt'." in content


@pytest.mark.parametrize(
    "name, expected",
    [("debug", logging.DEBUG), (" Error ", logging.ERROR), ("warn", logging.WARNING), ("", logging.WARNING)],
)
def test_numeric_level(name: str, expected: int) -> None:
    assert LoggingConfig(level=name).numeric_level == expected


def test_unopenable_log_file_keeps_console(tmp_path: Path, capsys) -> None:
    from structural_patterns.infra.logging.handlers import build_sinks

    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    sinks = build_sinks(LoggingConfig(console=True, log_file=str(blocker / "app.log")))

    assert len(sinks) == 1
    assert isinstance(sinks[0], logging.StreamHandler)
    assert getattr(sinks[0], _HANDLER_TAG_ATTR)
    assert "Cannot open log file" in capsys.readouterr().err
    for h in sinks:
        h.close()
