"""Logging utilities for marketsync runs."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

_LOGGER_NAME = "marketsync"

_ANNOTATION_COMMANDS = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the marketsync hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


class AnnotationFormatter(logging.Formatter):
    """Render records as GitHub Actions workflow commands (``::warning::...``)."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = _ANNOTATION_COMMANDS.get(record.levelno)
        if command is None:
            return message
        # Workflow commands are single-line; newlines must be URL-encoded.
        escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
        return f"::{command}::{escaped}"


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    annotations: Optional[bool] = None,
) -> logging.Logger:
    """Configure the marketsync logger with console output and optional file sink.

    ``annotations`` defaults to on when running inside GitHub Actions.
    """
    level = logging.DEBUG if verbose else logging.INFO
    if annotations is None:
        annotations = os.getenv("GITHUB_ACTIONS", "").lower() == "true"

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when the CLI is invoked multiple times.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    if annotations:
        stream_handler.setFormatter(AnnotationFormatter("%(message)s"))
    else:
        stream_handler.setFormatter(logging.Formatter("[marketsync] %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["AnnotationFormatter", "configure_logging", "get_logger"]
