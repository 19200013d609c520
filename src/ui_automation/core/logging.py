"""Logging infrastructure for ui_automation.

This module provides structured logging for interactions, waits and
screenshots. Every entry is a (level, message, metadata) triple; metadata is
rendered as ``key=value`` pairs after the message. All logging functions use
the standard library logging module for flexibility.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

LOGGER_NAME = "ui_automation"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Rotation limits for file logging
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5


class ErrorIds:
    """Constants for error IDs used in logging and error tracking."""

    # Interaction errors
    RETRY_EXHAUSTED = "ERR_RETRY_EXHAUSTED"
    RETRY_GUARD_BLOCKED = "ERR_RETRY_GUARD_BLOCKED"
    NAVIGATION_FAILED = "ERR_NAVIGATE"
    SCRIPT_FAILED = "ERR_SCRIPT"

    # Artifact errors
    SCREENSHOT_CAPTURE_FAILED = "ERR_SCREENSHOT"
    SCREENSHOT_CLEANUP_FAILED = "ERR_SCREENSHOT_CLEANUP"

    # Configuration errors
    CONFIG_INVALID = "ERR_CONFIG_INVALID"

    # Scenario errors
    SCENARIO_FAILED = "ERR_SCENARIO_FAILED"
    KEYBOARD_INTERRUPT = "KEYBOARD_INTERRUPT"


_logger: logging.Logger | None = None


def _get_logger(component: str | None = None) -> logging.Logger:
    """Get or create the logger instance, optionally a per-component child."""
    global _logger
    if _logger is None:
        _logger = logging.getLogger(LOGGER_NAME)
        _logger.setLevel(logging.DEBUG)

        # Console handler for user-facing logs
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(_level_from_name(os.environ.get("LOG_LEVEL", "info")))
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        _logger.addHandler(console_handler)

    if component:
        return _logger.getChild(component)
    return _logger


def _level_from_name(level: str) -> int:
    value = getattr(logging, level.upper(), logging.INFO)
    return value if isinstance(value, int) else logging.INFO


def _format_metadata(message: str, extra: dict[str, Any] | None) -> str:
    if not extra:
        return message
    extra_str = ", ".join(f"{k}={v}" for k, v in extra.items())
    return f"{message} | {extra_str}"


def logError(
    error_id: str,
    message: str,
    exc_info: bool = False,
    extra: dict[str, Any] | None = None,
    component: str | None = None,
) -> None:
    """Log an error tagged with an error ID.

    Args:
        error_id: The error ID constant from ErrorIds.
        message: Human-readable error message.
        exc_info: If True, include exception info in the log.
        extra: Optional additional context as key-value pairs.
        component: Optional component name for a child logger.
    """
    logger = _get_logger(component)
    logger.error(_format_metadata(f"[{error_id}] {message}", extra), exc_info=exc_info)


def logForDebugging(
    message: str,
    level: str = "debug",
    extra: dict[str, Any] | None = None,
    component: str | None = None,
) -> None:
    """Log a message at the given level.

    Args:
        message: The message to log.
        level: Log level - "debug", "info", "warning", or "error".
        extra: Optional additional context as key-value pairs.
        component: Optional component name for a child logger.
    """
    logger = _get_logger(component)
    logger.log(_level_from_name(level), _format_metadata(message, extra))


def logEvent(
    event_name: str,
    properties: dict[str, Any] | None = None,
) -> None:
    """Log a named event (e.g., "interaction_succeeded", "screenshot_saved").

    Args:
        event_name: The name of the event.
        properties: Optional event properties as key-value pairs.
    """
    logger = _get_logger()
    logger.info(_format_metadata(f"[EVENT] {event_name}", properties))


def set_log_level(level: str | int) -> None:
    """Set the console logging level.

    Args:
        level: Log level as string ("debug", "info", "warning", "error")
               or int (logging.DEBUG, logging.INFO, etc.).
    """
    logger = _get_logger()
    if isinstance(level, str):
        level = _level_from_name(level)
    logger.handlers[0].setLevel(level)


def enable_file_logging(directory: str | Path) -> tuple[Path, Path]:
    """Enable rotating file logging into a directory.

    Writes ``combined.log`` with every record and ``error.log`` with errors
    only. Both rotate at 5MB and keep 5 backups.

    Args:
        directory: Directory for the log files. Created if missing.

    Returns:
        Paths to the (combined, error) log files.
    """
    logger = _get_logger()
    log_dir = Path(directory)
    log_dir.mkdir(parents=True, exist_ok=True)

    combined_path = log_dir / "combined.log"
    error_path = log_dir / "error.log"
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    existing = {
        getattr(h, "baseFilename", None)
        for h in logger.handlers
        if isinstance(h, RotatingFileHandler)
    }
    for path, level in ((combined_path, logging.DEBUG), (error_path, logging.ERROR)):
        if os.path.abspath(path) in existing:
            continue
        handler = RotatingFileHandler(
            path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUP_COUNT
        )
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return combined_path, error_path
