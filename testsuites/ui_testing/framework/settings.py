"""
================================================================================
Test Settings
================================================================================

Layered run configuration for the UI suite.

Resolution order per key (highest to lowest priority):
    1. Explicit run-time override (pytest option or process environment)
    2. Value persisted in the .env file
    3. Hardcoded default

The selected environment name is then looked up in the environment data
file (JSON) to obtain the base URL and the rest of the environment record.

Usage:
    pytest testsuites/ui_testing/tests --env=APPLITOOLS --browser=firefox
    HEADLESS=true pytest testsuites/ui_testing/tests

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from dotenv import dotenv_values
from loguru import logger

from .exceptions import ConfigurationError


PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent

# Environment records keyed by environment name
DEFAULT_DATA_PATH = Path(__file__).parent.parent / "data" / "test_data.json"

# Override key -> (environment / .env key, default)
SETTING_SOURCES: Dict[str, Tuple[str, str]] = {
    "env": ("TEST_ENV", "GURU"),
    "browser": ("BROWSER", "chrome"),
    "resolution": ("SCREEN_RESOLUTION", "1920,1080"),
    "headless": ("HEADLESS", "false"),
    "hubType": ("HUB_TYPE", "NONE"),
    "hubUrl": ("GRID_HUB_URL", "http://localhost:4444"),
    "downloadDir": ("DOWNLOAD_DIR", str(Path.home() / "Downloads")),
    "logLevel": ("LOG_LEVEL", "INFO"),
}

_TRUTHY = ("true", "1", "yes", "on")


class HubType(str, Enum):
    """Where browser sessions are provisioned."""

    NONE = "NONE"
    GRID = "GRID"


@dataclass(frozen=True)
class Settings:
    """
    Immutable run configuration, resolved once per process.

    Attributes:
        test_env: Selected environment name (GURU, APPLITOOLS, ...)
        base_url: Base URL of the selected environment
        env_config: Full read-only environment record
        browser_type: Requested browser (validated by the driver factory)
        headless: Run the browser without a visible window
        screen_resolution: Window size as "width,height"
        hub_type: Local execution or Selenium Grid
        grid_hub_url: Selenium Grid hub endpoint
        download_dir: Directory the browser saves downloads into
        log_level: Minimum loguru level
    """

    test_env: str
    base_url: str
    browser_type: str = "chrome"
    headless: bool = False
    screen_resolution: str = "1920,1080"
    hub_type: HubType = HubType.NONE
    grid_hub_url: str = "http://localhost:4444"
    grid_platform: str = "windows"
    download_dir: Path = field(default_factory=lambda: Path.home() / "Downloads")
    log_level: str = "INFO"
    log_dir: Path = PROJECT_ROOT / "logs"
    env_config: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    # Wait settings (seconds)
    wait_element: int = 5
    implicit_wait: int = 2
    page_load_timeout: int = 15

    @property
    def is_remote(self) -> bool:
        return self.hub_type is HubType.GRID

    @property
    def window_size(self) -> Tuple[int, int]:
        """Screen resolution as an integer (width, height) pair."""
        try:
            width, height = (int(part) for part in self.screen_resolution.split(","))
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid screen resolution '{self.screen_resolution}', expected 'width,height'"
            ) from e
        return width, height


def load_env_data(data_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load the environment data file.

    Raises:
        ConfigurationError: File is missing, unparseable or not a JSON object
    """
    path = Path(data_path or DEFAULT_DATA_PATH)
    if not path.exists():
        raise ConfigurationError(f"Environment data file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in environment data file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Environment data file must contain a JSON object: {path}")

    logger.debug(f"Loaded environment data from: {path}")
    return data


def _resolve(
    key: str,
    overrides: Mapping[str, Any],
    environ: Mapping[str, str],
    dotenv: Mapping[str, Optional[str]],
) -> str:
    env_key, default = SETTING_SOURCES[key]

    value = overrides.get(key)
    if value is not None:
        return str(value)

    value = environ.get(env_key)
    if value is not None:
        return value

    value = dotenv.get(env_key)
    if value is not None:
        return value

    return default


def load_settings(
    overrides: Optional[Mapping[str, Any]] = None,
    env_file: Optional[Path] = None,
    data_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Resolve the run configuration.

    Called once at process entry; the returned Settings is passed explicitly
    to the driver manager, the element actions and the page objects.

    Args:
        overrides: Explicit values keyed by override name (env, browser,
                   resolution, headless, hubType, hubUrl, downloadDir, logLevel).
                   None values are ignored.
        env_file: .env file to read. Defaults to ".env" in the working directory.
        data_path: Environment data JSON. Defaults to DEFAULT_DATA_PATH.
        environ: Process environment. Defaults to os.environ.

    Raises:
        ConfigurationError: Environment data missing/unparseable, unknown
                            environment name, or invalid hub type.
    """
    overrides = overrides or {}
    environ = os.environ if environ is None else environ

    env_path = Path(env_file) if env_file else Path.cwd() / ".env"
    dotenv = dotenv_values(env_path) if env_path.exists() else {}

    def resolve(key: str) -> str:
        return _resolve(key, overrides, environ, dotenv)

    test_env = resolve("env")
    env_data = load_env_data(data_path)
    if test_env not in env_data:
        raise ConfigurationError(
            f"Unknown environment '{test_env}'. "
            f"Available: {', '.join(sorted(env_data)) or 'none'}"
        )

    record = env_data[test_env]
    if not isinstance(record, dict) or "base_url" not in record:
        raise ConfigurationError(f"Environment '{test_env}' has no base_url")

    hub_value = resolve("hubType").upper()
    try:
        hub_type = HubType(hub_value)
    except ValueError as e:
        raise ConfigurationError(
            f"Unknown hub type '{hub_value}'. "
            f"Supported: {', '.join(h.value for h in HubType)}"
        ) from e

    settings = Settings(
        test_env=test_env,
        base_url=record["base_url"],
        env_config=MappingProxyType(dict(record)),
        browser_type=resolve("browser"),
        headless=resolve("headless").strip().lower() in _TRUTHY,
        screen_resolution=resolve("resolution"),
        hub_type=hub_type,
        grid_hub_url=resolve("hubUrl"),
        download_dir=Path(resolve("downloadDir")).expanduser(),
        log_level=resolve("logLevel").upper(),
    )
    logger.debug(
        f"Settings resolved: env={settings.test_env} browser={settings.browser_type} "
        f"headless={settings.headless} hub={settings.hub_type.value}"
    )
    return settings


__all__ = [
    "HubType",
    "Settings",
    "SETTING_SOURCES",
    "load_env_data",
    "load_settings",
]
