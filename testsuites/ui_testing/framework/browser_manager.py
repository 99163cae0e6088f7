"""
================================================================================
Browser Manager
================================================================================

WebDriver lifecycle management for UI automation.

Features:
    - One constructor per supported browser (Chrome, Firefox, Edge)
    - Local or Selenium Grid (remote) sessions
    - One session per thread, tracked in an explicit ownership map
    - Idempotent start, leak-free quit

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import threading
from enum import Enum
from typing import Any, Callable, Dict, NamedTuple, Optional, Union

from loguru import logger
from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.remote.webdriver import WebDriver
from urllib3.exceptions import HTTPError

from .exceptions import (
    DriverInitializationError,
    NavigationError,
    NotInitializedError,
    UnsupportedBrowserError,
)
from .settings import Settings


BrowserOptions = Union[webdriver.ChromeOptions, webdriver.FirefoxOptions, webdriver.EdgeOptions]


class BrowserKind(str, Enum):
    """Supported browsers."""

    CHROME = "chrome"
    FIREFOX = "firefox"
    EDGE = "edge"

    @classmethod
    def parse(cls, name: str) -> "BrowserKind":
        """
        Parse a browser name (case-insensitive).

        Raises:
            UnsupportedBrowserError: Name matches no supported browser
        """
        try:
            return cls((name or "").strip().lower())
        except ValueError:
            logger.error(f"Unsupported browser type: {name}")
            raise UnsupportedBrowserError(name, [kind.value for kind in cls]) from None


# =============================================================================
# Browser Options
# =============================================================================

def _download_prefs(settings: Settings) -> Dict[str, Any]:
    return {
        "download.default_directory": str(settings.download_dir),
        "download.prompt_for_download": False,
        "profile.default_content_setting_values.notifications": 2,
    }


def chrome_options(settings: Settings) -> webdriver.ChromeOptions:
    """Build Chrome options from settings."""
    options = webdriver.ChromeOptions()
    options.add_argument("--start-maximized")
    options.add_argument(f"--window-size={settings.screen_resolution}")
    options.add_argument("--disable-notifications")
    options.add_argument("--disable-popup-blocking")
    options.add_experimental_option("prefs", _download_prefs(settings))

    if settings.headless:
        options.add_argument("--headless=new")
        logger.debug("Chrome browser configured in headless mode")

    return options


def firefox_options(settings: Settings) -> webdriver.FirefoxOptions:
    """Build Firefox options from settings."""
    width, height = settings.window_size
    options = webdriver.FirefoxOptions()
    options.add_argument(f"--width={width}")
    options.add_argument(f"--height={height}")
    options.set_preference("dom.webnotifications.enabled", False)
    options.set_preference("browser.download.folderList", 2)
    options.set_preference("browser.download.dir", str(settings.download_dir))

    if settings.headless:
        options.add_argument("--headless")
        logger.debug("Firefox browser configured in headless mode")

    return options


def edge_options(settings: Settings) -> webdriver.EdgeOptions:
    """Build Edge options from settings."""
    options = webdriver.EdgeOptions()
    options.add_argument("--start-maximized")
    options.add_argument(f"--window-size={settings.screen_resolution}")
    options.add_experimental_option("prefs", _download_prefs(settings))

    if settings.headless:
        options.add_argument("--headless")
        logger.debug("Edge browser configured in headless mode")

    return options


OPTIONS_BUILDERS: Dict[BrowserKind, Callable[[Settings], BrowserOptions]] = {
    BrowserKind.CHROME: chrome_options,
    BrowserKind.FIREFOX: firefox_options,
    BrowserKind.EDGE: edge_options,
}


# =============================================================================
# Driver Constructors
# =============================================================================

def create_chrome_driver(settings: Settings) -> WebDriver:
    return webdriver.Chrome(options=chrome_options(settings))


def create_firefox_driver(settings: Settings) -> WebDriver:
    return webdriver.Firefox(options=firefox_options(settings))


def create_edge_driver(settings: Settings) -> WebDriver:
    return webdriver.Edge(options=edge_options(settings))


LOCAL_DRIVERS: Dict[BrowserKind, Callable[[Settings], WebDriver]] = {
    BrowserKind.CHROME: create_chrome_driver,
    BrowserKind.FIREFOX: create_firefox_driver,
    BrowserKind.EDGE: create_edge_driver,
}


def create_remote_driver(kind: BrowserKind, settings: Settings) -> WebDriver:
    """
    Request a session from the Selenium Grid hub.

    Capabilities are the browser's options plus a fixed platformName.
    """
    options = OPTIONS_BUILDERS[kind](settings)
    options.set_capability("platformName", settings.grid_platform)
    logger.debug(f"Requesting {kind.value} session from hub: {settings.grid_hub_url}")
    return webdriver.Remote(command_executor=settings.grid_hub_url, options=options)


# =============================================================================
# Driver Manager
# =============================================================================

# Raised by driver.get() when the browser or its driver process is gone
TRANSPORT_ERRORS = (WebDriverException, HTTPError, OSError)


class _Session(NamedTuple):
    owner: threading.Thread
    driver: WebDriver


class DriverManager:
    """
    Creates, hands out and quits one WebDriver per thread.

    Sessions are kept in a class-level map keyed by thread identifier. The
    manager is the only code that adds to or removes from that map, and a
    thread can only reach its own entry.

    Each entry also records the Thread object that created it. Thread
    identifiers are reused once a thread exits, so an entry whose owner is
    not the calling thread is an orphan left by a thread that never called
    quit(). It is quit and dropped instead of being handed to the new thread.

    Lifecycle per thread:
        UNINITIALIZED --start()--> ACTIVE --quit()--> CLOSED

    Usage:
        manager = DriverManager(settings)
        manager.start()
        DriverManager.get_driver().get("https://example.com")
        manager.quit()

        # Or as a context manager
        with DriverManager(settings) as manager:
            manager.navigate_to("https://example.com")
    """

    _sessions: Dict[int, _Session] = {}
    _lock = threading.Lock()

    def __init__(self, settings: Settings):
        self.settings = settings

    def __enter__(self) -> "DriverManager":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.quit()

    @classmethod
    def _current_driver(cls) -> Optional[WebDriver]:
        """The calling thread's driver, discarding an orphan left under a reused ident."""
        context = threading.get_ident()
        with cls._lock:
            session = cls._sessions.get(context)
            if session is None or session.owner is threading.current_thread():
                return None if session is None else session.driver
            del cls._sessions[context]

        logger.warning(f"Discarding WebDriver orphaned by exited thread {session.owner.name}")
        try:
            session.driver.quit()
        except Exception as e:
            logger.error(f"Error while quitting orphaned WebDriver: {e}")
        return None

    def start(self, browser: Optional[str] = None) -> WebDriver:
        """
        Initialize the WebDriver for the current thread.

        When the thread already has a driver, that driver is returned and
        the browser argument is ignored.

        Args:
            browser: Browser name. Defaults to settings.browser_type.

        Returns:
            The thread's WebDriver (existing one if already started)

        Raises:
            UnsupportedBrowserError: Browser name is not supported
            DriverInitializationError: WebDriver construction failed
        """
        existing = self._current_driver()
        if existing is not None:
            logger.warning("WebDriver already initialized for this thread")
            return existing

        kind = BrowserKind.parse(browser or self.settings.browser_type)
        location = self.settings.grid_hub_url if self.settings.is_remote else "local"
        logger.info(f"Initializing {kind.value} browser ({location})")

        try:
            driver = self._create_driver(kind)
        except Exception as e:
            logger.error(f"Failed to initialize {kind.value} browser: {e}")
            raise DriverInitializationError(kind.value, e) from e

        with self._lock:
            self._sessions[threading.get_ident()] = _Session(threading.current_thread(), driver)
        logger.info(f"WebDriver initialized successfully for browser: {kind.value}")
        return driver

    def _create_driver(self, kind: BrowserKind) -> WebDriver:
        if self.settings.is_remote:
            driver = create_remote_driver(kind, self.settings)
        else:
            driver = LOCAL_DRIVERS[kind](self.settings)
        driver.set_page_load_timeout(self.settings.page_load_timeout)
        return driver

    def quit(self) -> None:
        """
        Quit the current thread's WebDriver and release its slot.

        The slot is released even when quit() itself fails; the failure is
        logged and not raised.
        """
        driver = self._current_driver()
        if driver is None:
            logger.warning("Attempted to quit without a WebDriver - it may not have been initialized")
            return

        logger.info("Quitting WebDriver")
        try:
            driver.quit()
            logger.debug("WebDriver quit successfully")
        except Exception as e:
            logger.error(f"Error while quitting WebDriver: {e}")
        finally:
            with self._lock:
                self._sessions.pop(threading.get_ident(), None)

    @classmethod
    def get_driver(cls) -> WebDriver:
        """
        Get the WebDriver for the current thread.

        Raises:
            NotInitializedError: No driver started on this thread
        """
        driver = cls._current_driver()
        if driver is None:
            raise NotInitializedError()
        return driver

    @classmethod
    def is_active(cls) -> bool:
        """True if the current thread has a WebDriver."""
        return cls._current_driver() is not None

    def navigate_to(self, url: str) -> None:
        """
        Navigate the current thread's browser to a URL.

        Raises:
            NotInitializedError: No driver started on this thread
            NavigationError: Browser failed to load the URL, including when
                             the driver process can no longer be reached
        """
        driver = self.get_driver()
        logger.info(f"Navigating to URL: {url}")
        try:
            driver.get(url)
        except TRANSPORT_ERRORS as e:
            logger.error(f"Failed to navigate to URL: {url} ({type(e).__name__}: {e})")
            raise NavigationError(url) from e
        logger.debug(f"Navigation to {url} successful")

    def get_title(self) -> str:
        title = self.get_driver().title
        logger.debug(f"Current page title: {title}")
        return title

    def get_current_url(self) -> str:
        url = self.get_driver().current_url
        logger.debug(f"Current URL: {url}")
        return url


__all__ = [
    "BrowserKind",
    "DriverManager",
    "chrome_options",
    "firefox_options",
    "edge_options",
    "create_chrome_driver",
    "create_firefox_driver",
    "create_edge_driver",
    "create_remote_driver",
]
