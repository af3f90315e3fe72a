"""Logging utilities for gowire commands.

Records from pipeline stages are tagged with the stage that emitted them, so
console output reads ``[gowire:scanner] WARNING Failed to parse ...`` and a
warning from the scanner can be told apart from one raised while wiring.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "gowire"


class StageFormatter(logging.Formatter):
    """Formatter exposing ``%(stage)s``: the logger name below ``gowire``."""

    def format(self, record: logging.LogRecord) -> str:
        _, _, stage = record.name.partition(".")
        record.stage = f"{_LOGGER_NAME}:{stage}" if stage else _LOGGER_NAME
        return super().format(record)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a stage logger (``scanner``, ``wire``...) under the gowire hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Configure the gowire logger with console output and optional file sink."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Repeated CLI runs in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(StageFormatter("[%(stage)s] %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            StageFormatter("%(asctime)s %(levelname)s [%(stage)s] %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["StageFormatter", "configure_logging", "get_logger"]
