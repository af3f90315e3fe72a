"""Tests for gowire logging configuration."""

from __future__ import annotations

import logging
from pathlib import Path

from gowire.logging import StageFormatter, configure_logging, get_logger


def _record(name: str, message: str) -> logging.LogRecord:
    return logging.LogRecord(name, logging.WARNING, __file__, 1, message, None, None)


def test_stage_formatter_tags_records_with_stage() -> None:
    formatter = StageFormatter("[%(stage)s] %(levelname)s %(message)s")

    assert formatter.format(_record("gowire.scanner", "skipped")) == "[gowire:scanner] WARNING skipped"
    assert formatter.format(_record("gowire.wire", "defaulting")) == "[gowire:wire] WARNING defaulting"
    assert formatter.format(_record("gowire", "root")) == "[gowire] WARNING root"


def test_get_logger_nests_under_gowire() -> None:
    assert get_logger("scanner").name == "gowire.scanner"
    assert get_logger().name == "gowire"


def test_configure_logging_is_idempotent_and_writes_file(tmp_path: Path) -> None:
    log_file = tmp_path / "gowire.log"
    configure_logging()
    logger = configure_logging(verbose=True, log_file=log_file)

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    get_logger("wire").debug("wrote %s", "main.go")
    for handler in logger.handlers:
        handler.flush()
    logger.handlers[1].close()

    assert "DEBUG [gowire:wire] wrote main.go" in log_file.read_text(encoding="utf-8")
