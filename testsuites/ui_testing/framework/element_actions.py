# ================================================================================
# Element Actions Module
# ================================================================================
#
# Page interaction facade shared by all page objects.
#
# Every operation resolves the current thread's WebDriver through the
# DriverManager, so one ElementActions instance follows the session of the
# test that owns it.
#
# Key Features:
#   - Bounded explicit waits (visible / clickable / invisible)
#   - Text entry, clicks, reads, hover and drag and drop
#   - Native alert and window handling
#   - Assertion helpers that fail the test with a caller-supplied message
#   - Allure step integration
#
# ================================================================================

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import allure
from loguru import logger
from selenium.common.exceptions import TimeoutException
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.common.alert import Alert
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from .browser_manager import DriverManager
from .exceptions import (
    AlertNotPresentError,
    ElementNotClickableError,
    ElementNotVisibleError,
    ElementStillVisibleError,
    ElementVisibilityAssertionError,
    WindowStateError,
)
from .helpers import wait_for_file_exists
from .locator import Locator
from .settings import Settings


class ElementActions:
    """
    Element interaction methods for page objects.

    Wraps Selenium's find/wait/click/drag operations with logging, Allure
    steps and framework exceptions. Page objects hold an instance by
    composition.

    Example:
        actions = ElementActions(driver_manager, settings)
        actions.type_text(Locator.by_id("username"), "testuser")
        actions.click(Locator.by_id("log-in"))
    """

    def __init__(
        self,
        driver_manager: DriverManager,
        settings: Settings,
        poll_frequency: float = 0.5,
    ):
        """
        Args:
            driver_manager: Manager owning the current thread's WebDriver
            settings: Run settings (timeouts, base URL, download directory)
            poll_frequency: Seconds between explicit-wait polls
        """
        self.driver_manager = driver_manager
        self.settings = settings
        self.default_timeout = settings.wait_element
        self.poll_frequency = poll_frequency
        self._original_window: Optional[str] = None

    @property
    def driver(self) -> WebDriver:
        return self.driver_manager.get_driver()

    def get_wait(self, timeout: Optional[float] = None) -> WebDriverWait:
        timeout = self.default_timeout if timeout is None else timeout
        return WebDriverWait(self.driver, timeout, poll_frequency=self.poll_frequency)

    # =========================================================================
    # Navigation
    # =========================================================================

    @allure.step("Navigate to {url}")
    def navigate(self, url: str) -> None:
        """
        Load a URL in the current browser through the driver manager.

        Raises:
            NavigationError: Browser failed to load the URL
        """
        self.driver_manager.navigate_to(url)
        logger.info(f"Navigation to URL: {url} completed")

    def open_site(self, url: Optional[str] = None) -> None:
        """Navigate to url, or to the environment base URL when omitted."""
        self.navigate(url or self.settings.base_url)

    def get_title(self) -> str:
        return self.driver.title

    @property
    def current_url(self) -> str:
        return self.driver.current_url

    # =========================================================================
    # Waits
    # =========================================================================

    def find_visible(self, locator: Locator, timeout: Optional[float] = None) -> WebElement:
        """
        Wait for an element to become visible.

        Raises:
            ElementNotVisibleError: Not visible within the timeout
        """
        timeout = self.default_timeout if timeout is None else timeout
        try:
            return self.get_wait(timeout).until(EC.visibility_of_element_located(locator.as_tuple()))
        except TimeoutException as e:
            logger.error(f"Element {locator} not visible after {timeout}s")
            raise ElementNotVisibleError(locator, timeout) from e

    def find_clickable(self, locator: Locator, timeout: Optional[float] = None) -> WebElement:
        """
        Wait for an element to be visible and enabled.

        Raises:
            ElementNotClickableError: Not clickable within the timeout
        """
        timeout = self.default_timeout if timeout is None else timeout
        try:
            return self.get_wait(timeout).until(EC.element_to_be_clickable(locator.as_tuple()))
        except TimeoutException as e:
            logger.error(f"Element {locator} not clickable after {timeout}s")
            raise ElementNotClickableError(locator, timeout) from e

    def wait_for_invisible(self, locator: Locator, timeout: Optional[float] = None) -> None:
        """
        Wait until the locator no longer matches a visible element.

        Raises:
            ElementStillVisibleError: Still visible after the timeout
        """
        timeout = self.default_timeout if timeout is None else timeout
        logger.debug(f"Waiting for {locator} to be invisible")
        try:
            self.get_wait(timeout).until(EC.invisibility_of_element_located(locator.as_tuple()))
        except TimeoutException as e:
            logger.error(f"Element {locator} still visible after {timeout}s")
            raise ElementStillVisibleError(locator, timeout) from e

    # =========================================================================
    # Element Interactions
    # =========================================================================

    @allure.step("Type text into {locator}")
    def type_text(self, locator: Locator, text: str) -> None:
        logger.info(f"Entering text '{text}' into {locator}")
        self.find_visible(locator).send_keys(text)

    @allure.step("Type text into {locator} (no wait)")
    def type_text_no_wait(self, locator: Locator, text: str) -> None:
        """Send keys without a visibility wait, e.g. to a hidden file input."""
        logger.info(f"Entering text '{text}' into {locator}")
        self.driver.find_element(*locator).send_keys(text)

    @allure.step("Click element: {locator}")
    def click(self, locator: Locator) -> None:
        logger.info(f"Clicking element {locator}")
        self.find_clickable(locator).click()

    def read_text(self, locator: Locator) -> str:
        text = self.find_visible(locator).text
        logger.info(f"Retrieved text '{text}' from element {locator}")
        return text

    def read_attribute(self, locator: Locator, name: str) -> Optional[str]:
        logger.info(f"Getting attribute {name} from element {locator}")
        return self.find_visible(locator).get_dom_attribute(name)

    def read_value(self, locator: Locator) -> Any:
        """Element text, or its value property when the text is empty."""
        logger.info(f"Getting value from element {locator}")
        element = self.find_visible(locator)
        text = element.text
        return text if text else element.get_property("value")

    @allure.step("Hover element: {locator}")
    def hover(self, locator: Locator) -> None:
        logger.info(f"Hovering over element {locator}")
        element = self.find_visible(locator)
        ActionChains(self.driver).move_to_element(element).perform()

    @allure.step("Drag and drop: {source} -> {target}")
    def drag_and_drop(self, source: Locator, target: Locator) -> None:
        logger.info(f"Dragging element from {source} to {target}")
        source_element = self.find_visible(source)
        target_element = self.find_visible(target)
        ActionChains(self.driver).drag_and_drop(source_element, target_element).perform()

    def execute_script(self, script: str, *args: Any) -> Any:
        logger.info(f"Executing JavaScript: {script}")
        return self.driver.execute_script(script, *args)

    # =========================================================================
    # Alerts
    # =========================================================================

    @allure.step("Switch to alert")
    def switch_to_alert(self, timeout: Optional[float] = None) -> Alert:
        """
        Wait for a native alert and switch to it.

        Raises:
            AlertNotPresentError: No alert appeared within the timeout
        """
        timeout = self.default_timeout if timeout is None else timeout
        logger.info("Switching to alert")
        try:
            return self.get_wait(timeout).until(EC.alert_is_present())
        except TimeoutException as e:
            raise AlertNotPresentError(f"No alert present after {timeout}s") from e

    @allure.step("Accept alert")
    def accept_alert(self, alert: Optional[Alert] = None) -> None:
        alert = alert or self.switch_to_alert()
        logger.info("Accepting alert")
        alert.accept()

    @allure.step("Dismiss alert")
    def dismiss_alert(self, alert: Optional[Alert] = None) -> None:
        alert = alert or self.switch_to_alert()
        logger.info("Dismissing alert")
        alert.dismiss()

    # =========================================================================
    # Windows
    # =========================================================================

    @allure.step("Switch to new window")
    def switch_to_new_window(self, timeout: Optional[float] = None) -> Optional[str]:
        """
        Remember the current window as original and switch to another one.

        Waits up to timeout for a second window to appear. If none does,
        stays on the current window.

        Returns:
            Handle switched to, or None if no other window exists
        """
        driver = self.driver
        self._original_window = driver.current_window_handle
        logger.info(f"Switching to new window (current: {self._original_window})")

        try:
            self.get_wait(timeout).until(lambda d: len(d.window_handles) > 1)
        except TimeoutException:
            logger.debug("No second window appeared before the timeout")

        for handle in driver.window_handles:
            if handle != self._original_window:
                driver.switch_to.window(handle)
                logger.info(f"Switched to new window: {handle}")
                return handle

        logger.warning("No new window found to switch to")
        return None

    @allure.step("Switch back to original window")
    def switch_back_to_original(self) -> None:
        """
        Close every window except the original, then switch to it.

        Raises:
            WindowStateError: switch_to_new_window() was never called
        """
        if self._original_window is None:
            raise WindowStateError("No original window recorded; call switch_to_new_window() first")

        driver = self.driver
        original = self._original_window
        logger.info(f"Switching back to original window: {original}")

        for handle in list(driver.window_handles):
            if handle != original:
                driver.switch_to.window(handle)
                logger.info(f"Closing window: {handle}")
                driver.close()

        driver.switch_to.window(original)

    # =========================================================================
    # Assertions
    # =========================================================================

    def verify_true(self, condition: bool, message: str) -> None:
        logger.info("Verifying condition is true")
        if not condition:
            logger.error(message)
            raise AssertionError(message)

    def verify_false(self, condition: bool, message: str) -> None:
        logger.info("Verifying condition is false")
        if condition:
            logger.error(message)
            raise AssertionError(message)

    def verify_equals(self, expected: Any, actual: Any, message: str) -> None:
        logger.info(f"Verifying equality of expected '{expected}' and actual '{actual}'")
        if expected != actual:
            logger.error(message)
            raise AssertionError(message)

    @allure.step("Verify element visible: {locator}")
    def verify_element_visible(
        self,
        locator: Locator,
        message: str,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Assert an element becomes visible.

        A visibility timeout becomes ElementVisibilityAssertionError carrying
        message, chained from the ElementNotVisibleError. Any other fault
        propagates unchanged.
        """
        logger.info(f"Verifying visibility of element {locator}")
        try:
            self.find_visible(locator, timeout)
        except ElementNotVisibleError as e:
            logger.error(f"Element {locator} is not visible: {message}")
            raise ElementVisibilityAssertionError(message) from e
        logger.info(f"Element {locator} is visible")

    @allure.step("Verify page title is '{expected_title}'")
    def verify_title(self, expected_title: str) -> None:
        actual_title = self.get_title()
        self.verify_equals(
            expected_title,
            actual_title,
            f"Expected title '{expected_title}' but found '{actual_title}'",
        )

    # =========================================================================
    # Downloads and Screenshots
    # =========================================================================

    @allure.step("Wait for download: {file_name}")
    def wait_for_file_download(self, file_name: str, timeout_seconds: float) -> Path:
        """
        Poll the download directory for a file.

        Raises:
            FileWaitTimeoutError: File did not appear within the timeout
        """
        logger.info(f"Waiting for file download: {file_name} with timeout: {timeout_seconds} seconds")
        return wait_for_file_exists(self.settings.download_dir / file_name, timeout_seconds)

    def take_screenshot(self, name: str) -> bytes:
        """Capture the current page and attach it to the Allure report."""
        screenshot = self.driver.get_screenshot_as_png()
        allure.attach(
            screenshot,
            name=name,
            attachment_type=allure.attachment_type.PNG,
        )
        return screenshot


__all__ = ["ElementActions"]
