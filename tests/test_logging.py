"""Tests for smartdocs.logging."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from smartdocs.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def _reset_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("smartdocs")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def test_get_logger_is_namespaced() -> None:
    assert get_logger("scanner").name == "smartdocs.scanner"
    assert get_logger().name == "smartdocs"


def test_configure_logging_sets_level_and_single_stream_handler() -> None:
    configure_logging()
    logger = configure_logging(verbose=True)

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_configure_logging_writes_log_file(tmp_path: Path) -> None:
    log_file = tmp_path / "smartdocs.log"
    configure_logging(log_file=log_file)

    get_logger("orchestrator").info("analysis finished")
    for handler in logging.getLogger("smartdocs").handlers:
        handler.flush()

    assert "analysis finished" in log_file.read_text(encoding="utf-8")
