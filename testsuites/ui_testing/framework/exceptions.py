"""
================================================================================
UI Framework Exceptions
================================================================================

Exception hierarchy for the UI testing framework.

Infrastructure faults (configuration, driver, element interaction) derive from
UITestingError. Expectation mismatches derive from AssertionError so pytest
reports them as plain test failures.

================================================================================
"""

from __future__ import annotations

from typing import Iterable, Optional


class UITestingError(Exception):
    """Base exception for all framework faults."""
    pass


class ConfigurationError(UITestingError):
    """Raised when settings or environment data cannot be resolved."""
    pass


# =============================================================================
# Driver Lifecycle
# =============================================================================

class DriverError(UITestingError):
    """Base exception for driver lifecycle faults."""
    pass


class UnsupportedBrowserError(DriverError):
    """Raised when a browser type has no driver constructor."""

    def __init__(self, browser: str, supported: Iterable[str]):
        self.browser = browser
        self.supported = tuple(supported)
        super().__init__(
            f"Unsupported browser type: {browser}. "
            f"Supported types: {', '.join(self.supported)}"
        )


class DriverInitializationError(DriverError):
    """Raised when the underlying WebDriver could not be constructed."""

    def __init__(self, browser: str, cause: Optional[BaseException] = None):
        self.browser = browser
        message = f"Failed to initialize WebDriver for {browser}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class NotInitializedError(DriverError):
    """Raised when the current thread has no active WebDriver."""

    def __init__(self, message: str = "WebDriver not initialized. Call DriverManager.start() first."):
        super().__init__(message)


class NavigationError(UITestingError):
    """Raised when the browser fails to load a URL."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Navigation failed to: {url}")


# =============================================================================
# Element Interaction
# =============================================================================

class ElementInteractionError(UITestingError):
    """Base exception for element lookup and interaction faults."""
    pass


class ElementNotVisibleError(ElementInteractionError):
    """Element did not become visible within the timeout."""

    def __init__(self, locator: object, timeout: float):
        self.locator = locator
        self.timeout = timeout
        super().__init__(f"Element {locator} not visible after {timeout}s")


class ElementNotClickableError(ElementInteractionError):
    """Element did not become clickable within the timeout."""

    def __init__(self, locator: object, timeout: float):
        self.locator = locator
        self.timeout = timeout
        super().__init__(f"Element {locator} not clickable after {timeout}s")


class ElementStillVisibleError(ElementInteractionError):
    """Element was still visible when the timeout elapsed."""

    def __init__(self, locator: object, timeout: float):
        self.locator = locator
        self.timeout = timeout
        super().__init__(f"Element {locator} still visible after {timeout}s")


class AlertNotPresentError(ElementInteractionError):
    """No native alert appeared within the timeout."""
    pass


class WindowStateError(ElementInteractionError):
    """Window switching was requested in an invalid state."""
    pass


class FileWaitTimeoutError(UITestingError):
    """Expected file did not appear within the timeout."""

    def __init__(self, path: object, timeout: float):
        self.path = path
        self.timeout = timeout
        super().__init__(f"File not found within timeout ({timeout}s): {path}")


# =============================================================================
# Assertions
# =============================================================================

class ElementVisibilityAssertionError(AssertionError):
    """
    Expected element was not visible.

    The visibility timeout that triggered it is kept as ``__cause__``.
    """
    pass


__all__ = [
    "UITestingError",
    "ConfigurationError",
    "DriverError",
    "UnsupportedBrowserError",
    "DriverInitializationError",
    "NotInitializedError",
    "NavigationError",
    "ElementInteractionError",
    "ElementNotVisibleError",
    "ElementNotClickableError",
    "ElementStillVisibleError",
    "AlertNotPresentError",
    "WindowStateError",
    "FileWaitTimeoutError",
    "ElementVisibilityAssertionError",
]
