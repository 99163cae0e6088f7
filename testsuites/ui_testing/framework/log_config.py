"""
================================================================================
Logging Setup
================================================================================

Centralized Loguru configuration for UI test runs.

Sinks:
    - stderr (colorized)
    - logs/automation.log (all messages, rotated)
    - logs/errors.log (ERROR and above)

================================================================================
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

DEFAULT_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {thread.name} | "
    "{name}:{function}:{line} | {message}"
)

_logger_initialized: bool = False


def init_logger(
    level: str = "INFO",
    log_dir: Optional[Union[str, Path]] = None,
    format_str: str = DEFAULT_FORMAT,
) -> None:
    """
    Initializes the global Loguru logger.

    Safe to call more than once; only the first call configures sinks.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for file sinks. File logging is skipped when None.
        format_str: Log format string
    """
    global _logger_initialized

    if _logger_initialized:
        return

    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format=format_str,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_format = format_str.replace("{level: <8}", "{level}")
        logger.add(
            log_path / "automation.log",
            level=level.upper(),
            format=file_format,
            rotation="10 MB",
            retention="7 days",
            enqueue=True,
        )
        logger.add(
            log_path / "errors.log",
            level="ERROR",
            format=file_format,
            rotation="10 MB",
            retention="7 days",
            enqueue=True,
        )

    # Selenium and urllib3 log every wire command at DEBUG
    logging.getLogger("selenium").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level}")


def reset_logger() -> None:
    """Allow init_logger() to configure sinks again."""
    global _logger_initialized
    _logger_initialized = False


__all__ = [
    "init_logger",
    "reset_logger",
]
