"""Centralized logging configuration for threatscan."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional, TextIO

PACKAGE_LOGGER = "threatscan"


class ColoredFormatter(logging.Formatter):
    """Severity-colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        original = record.levelname
        record.levelname = f"{color}{original:8s}{self.RESET}"
        try:
            return super().format(record)
        finally:
            # Other handlers share the record
            record.levelname = original


def _level_from_env(default: int = logging.INFO) -> int:
    """Resolve LOG_LEVEL (name or number) to a logging level."""
    raw = os.getenv("LOG_LEVEL")
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


def setup_logger(
    name: str,
    level: Optional[int] = None,
    log_file: Optional[Path] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (usually __name__)
        level: Logging level; falls back to LOG_LEVEL, then INFO
        log_file: Optional file path to also write logs to
        stream: Console stream; defaults to stdout

    Returns:
        Configured logger instance
    """
    level = level if level is not None else _level_from_env()

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers = []

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        ColoredFormatter("%(levelname)s | %(name)s | %(message)s")
    )
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get or create a logger with the standard configuration.

    Loggers inside the package share the handlers of the ``threatscan``
    logger, so reconfiguring it (e.g. adding a log file) applies everywhere.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if name.startswith(f"{PACKAGE_LOGGER}."):
        if not logging.getLogger(PACKAGE_LOGGER).handlers:
            setup_logger(PACKAGE_LOGGER)
        return logger
    if not logger.handlers:
        return setup_logger(name)
    return logger
