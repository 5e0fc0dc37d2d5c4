"""Logging helpers for gifkit."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Callable

_LOGGER_NAME = "gifkit"


class CallbackHandler(logging.Handler):
    """Forward log messages to a callable sink."""

    def __init__(self, callback: Callable[[str], None]) -> None:
        super().__init__()
        self._callback = callback

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
        except Exception:
            msg = record.getMessage()
        try:
            self._callback(msg)
        except Exception:
            self.handleError(record)


def _tagged(logger: logging.Logger, handler_key: str) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, "gifkit_handler", None) == handler_key]


def _remove_tagged(logger: logging.Logger, handler_key: str) -> None:
    for handler in _tagged(logger, handler_key):
        logger.removeHandler(handler)
        handler.close()


def _log_level() -> int:
    level_name = os.environ.get("GIFKIT_LOG_LEVEL", "WARNING").upper()
    return getattr(logging, level_name, logging.WARNING)


def _log_path() -> Path | None:
    configured = os.environ.get("GIFKIT_LOG_PATH")
    if configured:
        return Path(configured).expanduser()
    return None


def setup_logging(
    sink: Callable[[str], None] | None = None,
    enable_console: bool | None = None,
    level: int | None = None,
) -> Path | None:
    """Configure gifkit logging.

    Args:
        sink: Optional callback receiving formatted log lines.
        enable_console: Whether to log to stderr (defaults to on when no sink is given).
        level: Logging level (defaults to GIFKIT_LOG_LEVEL env var or WARNING).

    Returns:
        Path to the log file, or None when GIFKIT_LOG_PATH is not set.
    """
    log_level = level if level is not None else _log_level()

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(log_level)

    log_path = _log_path()
    if log_path is not None and not _tagged(logger, "file"):
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=1024 * 1024,
            backupCount=2,
            encoding="utf-8",
        )
        file_handler.gifkit_handler = "file"
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s")
        )
        logger.addHandler(file_handler)
        logger.debug("Logging to %s", log_path)

    if enable_console is None:
        enable_console = sink is None

    if enable_console:
        if not _tagged(logger, "console"):
            console_handler = logging.StreamHandler()
            console_handler.gifkit_handler = "console"
            console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
            logger.addHandler(console_handler)
    else:
        _remove_tagged(logger, "console")

    # Replace any previous sink so the callback can be swapped.
    _remove_tagged(logger, "sink")
    if sink is not None:
        sink_handler = CallbackHandler(sink)
        sink_handler.gifkit_handler = "sink"
        sink_handler.setFormatter(logging.Formatter("%(levelname)s - %(name)s - %(message)s"))
        logger.addHandler(sink_handler)

    return log_path
