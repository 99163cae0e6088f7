"""
================================================================================
UI Testing Framework
================================================================================

Selenium-based UI automation framework following the Page Object Model.

Components:
    - settings: Layered run configuration (override > environment > .env > default)
    - browser_manager: WebDriver factory and per-thread lifecycle
    - element_actions: Page interaction facade (waits, clicks, alerts, windows)
    - page_base: Base page object holding the facade by composition
    - locator: Immutable (strategy, value) element locators

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserKind, DriverManager
from .element_actions import ElementActions
from .exceptions import (
    ConfigurationError,
    DriverInitializationError,
    ElementNotVisibleError,
    ElementVisibilityAssertionError,
    NotInitializedError,
    UnsupportedBrowserError,
)
from .locator import Locator
from .page_base import BasePage
from .settings import HubType, Settings, load_settings

__all__ = [
    "BasePage",
    "BrowserKind",
    "ConfigurationError",
    "DriverInitializationError",
    "DriverManager",
    "ElementActions",
    "ElementNotVisibleError",
    "ElementVisibilityAssertionError",
    "HubType",
    "Locator",
    "NotInitializedError",
    "Settings",
    "UnsupportedBrowserError",
    "load_settings",
]
