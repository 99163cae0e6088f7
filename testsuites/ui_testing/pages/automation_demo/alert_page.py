"""
================================================================================
Automation Demo Alert Page Object
================================================================================

Covers the alert, new-window, file upload and file download demos of
demo.automationtesting.in. The alerts page is opened on construction; the
other demos are reached with open_site().

================================================================================
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

import allure
from loguru import logger

from testsuites.ui_testing.framework.helpers import read_file_content
from testsuites.ui_testing.framework.locator import Locator
from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.pages.sites import AUTOMATION_DEMO_ALERTS_URL


class _Locators:
    ALERT_WITH_OK = Locator.by_id("OKTab")
    ALERT_WITH_OK_CANCEL = Locator.by_id("CancelTab")
    CANCEL_TAB_MESSAGE = Locator.by_xpath("//div[@id='CancelTab']/p")
    TAB_ALERT_WITH_OK_CANCEL = Locator.by_xpath("//a[@href='#CancelTab']")
    TAB_ALERT_WITH_TEXTBOX = Locator.by_xpath("//a[@href='#Textbox']")

    # New tab / window
    NEW_TAB_WINDOW = Locator.by_xpath("//div[@id='Tabbed']/a")

    # Upload
    BROWSE_FILE = Locator.by_id("input-4")
    UPLOADED_FILE_IMAGE = Locator.by_xpath("(//div[@class='kv-file-content']//img)[1]")

    # Download
    DOWNLOAD_TEXT = Locator.by_id("textbox")
    GENERATE_FILE = Locator.by_id("createTxt")
    DOWNLOAD_FILE = Locator.by_id("link-to-download")


ALERT_TABS = {
    "Alert with OK & Cancel": _Locators.TAB_ALERT_WITH_OK_CANCEL,
    "Alert with Textbox": _Locators.TAB_ALERT_WITH_TEXTBOX,
}


class AlertPage(BasePage):
    """Alerts demo page; opened on construction."""

    URL = AUTOMATION_DEMO_ALERTS_URL

    # =========================================================================
    # Alerts
    # =========================================================================

    def accept_alert(self) -> None:
        logger.info("Accepting alert")
        self.actions.accept_alert(self.actions.switch_to_alert())

    def dismiss_alert(self) -> None:
        logger.info("Dismissing alert")
        self.actions.dismiss_alert(self.actions.switch_to_alert())

    @allure.step("Click 'Alert with OK' button")
    def click_alert_with_ok_button(self) -> None:
        logger.info("Clicking 'Alert with OK' button")
        self.actions.click(_Locators.ALERT_WITH_OK)

    @allure.step("Click 'Alert with OK & Cancel' button")
    def click_alert_with_ok_cancel_button(self) -> None:
        logger.info("Clicking 'Alert with OK & Cancel' button")
        self.actions.click(_Locators.ALERT_WITH_OK_CANCEL)

    @allure.step("Verify alert dismissed message: {expected_message}")
    def verify_alert_dismissed_message(self, expected_message: str) -> None:
        logger.info(f"Verifying alert dismissed message: {expected_message}")
        current = self.actions.read_text(_Locators.CANCEL_TAB_MESSAGE)
        self.actions.verify_equals(
            expected_message,
            current,
            f"The message '{current}' displays instead of '{expected_message}'",
        )

    @allure.step("Select alert tab: {tab_name}")
    def select_alert_tab(self, tab_name: str) -> None:
        """
        Open one of the alert demo tabs.

        Raises:
            ValueError: Unknown tab name
        """
        logger.info(f"Selecting alert tab: {tab_name}")
        if tab_name not in ALERT_TABS:
            raise ValueError(f"Unknown alert tab '{tab_name}'. Available: {', '.join(ALERT_TABS)}")
        self.actions.click(ALERT_TABS[tab_name])

    # =========================================================================
    # Windows
    # =========================================================================

    @allure.step("Open new tab window")
    def click_new_tab_window_button(self) -> None:
        """Click the 'click' button of the tabbed-window demo and switch to the new tab."""
        logger.info("Clicking 'New Tab / Window' button")
        self.actions.click(_Locators.NEW_TAB_WINDOW)
        self.actions.switch_to_new_window()

    def switch_back_to_original_window(self) -> None:
        self.actions.switch_back_to_original()

    # =========================================================================
    # Upload
    # =========================================================================

    @allure.step("Upload file: {file_path}")
    def upload_file(self, file_path: Union[str, Path]) -> None:
        logger.info(f"Uploading file: {file_path}")
        self.actions.type_text_no_wait(_Locators.BROWSE_FILE, str(file_path))

    @allure.step("Verify file uploaded: {expected_file_name}")
    def verify_file_uploaded(self, expected_file_name: str) -> None:
        logger.info(f"Verifying file uploaded: {expected_file_name}")
        current = self.actions.read_attribute(_Locators.UPLOADED_FILE_IMAGE, "title")
        self.actions.verify_equals(
            expected_file_name,
            current,
            f"The uploaded file '{current}' does not match expected '{expected_file_name}'",
        )

    # =========================================================================
    # Download
    # =========================================================================

    def enter_text_for_download(self, text: str) -> None:
        logger.info(f"Entering text for download: {text}")
        self.actions.type_text(_Locators.DOWNLOAD_TEXT, text)

    @allure.step("Click 'Generate File' button")
    def click_generate_file_button(self) -> None:
        logger.info("Clicking 'Generate File' button")
        self.actions.click(_Locators.GENERATE_FILE)

    @allure.step("Click 'Download' button")
    def click_download_button(self) -> None:
        logger.info("Clicking 'Download' button")
        self.actions.click(_Locators.DOWNLOAD_FILE)

    def wait_for_file_download(self, file_name: str, timeout_seconds: float) -> Path:
        return self.actions.wait_for_file_download(file_name, timeout_seconds)

    @allure.step("Verify downloaded file content: {file_name}")
    def verify_downloaded_file_content(self, file_name: str, expected_content: str) -> None:
        logger.info(f"Verifying downloaded file content: {file_name}")
        content = read_file_content(self.settings.download_dir / file_name)
        self.actions.verify_true(
            expected_content in content,
            "The downloaded file content does not match the expected content.",
        )
