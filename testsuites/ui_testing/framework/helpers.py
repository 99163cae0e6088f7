"""
Date, file and download helpers shared by page objects.
"""

from __future__ import annotations

import time
from datetime import date, datetime
from pathlib import Path
from typing import Union

from loguru import logger

from .exceptions import FileWaitTimeoutError


DATE_FORMAT = "%m/%d/%Y"


def convert_string_to_date(date_str: str) -> date:
    """
    Parse a "MM/DD/YYYY" string.

    Raises:
        ValueError: String is not in MM/DD/YYYY format
    """
    try:
        return datetime.strptime(date_str, DATE_FORMAT).date()
    except (TypeError, ValueError) as e:
        logger.error(f"Failed to parse date string: {date_str}")
        raise ValueError(f"Invalid date format: {date_str}") from e


def convert_month_name_to_number(month_name: str) -> int:
    """
    Convert an English month name ("February") to its number (2).

    Raises:
        ValueError: Not a month name
    """
    try:
        return datetime.strptime(month_name.strip(), "%B").month
    except (AttributeError, ValueError) as e:
        logger.error(f"Failed to convert month name '{month_name}' to number")
        raise ValueError(f"Invalid month name: {month_name}") from e


def read_file_content(file_path: Union[str, Path]) -> str:
    with open(file_path, "r", encoding="utf-8") as f:
        return f.read()


def wait_for_file_exists(
    file_path: Union[str, Path],
    timeout_seconds: float,
    poll_interval: float = 1.0,
) -> Path:
    """
    Poll until a file exists.

    Args:
        file_path: File to wait for
        timeout_seconds: Maximum time to wait
        poll_interval: Delay between checks

    Returns:
        The file path

    Raises:
        FileWaitTimeoutError: File did not appear within the timeout
    """
    path = Path(file_path)
    logger.info(f"Waiting for file to exist: {path} with timeout: {timeout_seconds} seconds")

    deadline = time.monotonic() + timeout_seconds
    while True:
        if path.exists():
            logger.info(f"File found: {path}")
            return path
        if time.monotonic() >= deadline:
            break
        time.sleep(poll_interval)

    logger.warning(f"Timeout reached. File not found: {path}")
    raise FileWaitTimeoutError(path, timeout_seconds)


__all__ = [
    "convert_string_to_date",
    "convert_month_name_to_number",
    "read_file_content",
    "wait_for_file_exists",
]
