from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration and
log file output.
"""

import logging
import time
from logging.handlers import QueueListener
from pathlib import Path

import pytest

from rainbowtree.infra.logging import (
    LoggingConfig,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    configure_logging,
)


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    """Clean up root logger handlers before and after each test."""
    def _reset() -> None:
        root = logging.getLogger()
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if isinstance(listener, QueueListener) and listener._thread is not None:
            listener.stop()
        setattr(root, _QUEUE_LISTENER_ATTR, None)
        for h in list(root.handlers):
            if getattr(h, _HANDLER_TAG_ATTR, False):
                root.removeHandler(h)
                h.close()
        if hasattr(root, "_rainbowtree_configured"):
            delattr(root, "_rainbowtree_configured")

    _reset()
    yield
    _reset()


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    count = len(_our_handlers())
    configure_logging(cfg)

    assert count == 1
    assert len(_our_handlers()) == count


def test_force_reconfigures_without_duplicates() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert len(_our_handlers()) == 1
    assert logging.getLogger().level == logging.DEBUG


def test_file_output(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "rainbowtree.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    logging.getLogger("rainbowtree.test").info("stylesheet rebuilt")

    listener = getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR)
    listener.stop()
    time.sleep(0.05)

    assert "stylesheet rebuilt" in log_file.read_text(encoding="utf-8")


def test_unknown_level_defaults_to_info() -> None:
    configure_logging(LoggingConfig(level="LOUD"))
    assert logging.getLogger().level == logging.INFO
