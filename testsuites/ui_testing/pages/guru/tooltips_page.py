"""
Guru99 tooltip demo page.
"""

from __future__ import annotations

import allure
from loguru import logger

from testsuites.ui_testing.framework.locator import Locator
from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.pages.sites import GURU99_TOOLTIPS_URL


class _Locators:
    DOWNLOAD_NOW = Locator.by_id("download_now")
    TOOLTIP_IMAGE = Locator.by_xpath("//img[@src='img/eye.png']")


class ToolTipsPage(BasePage):
    """Tooltip page; opened on construction."""

    URL = GURU99_TOOLTIPS_URL

    @allure.step("Hover 'Download now' button")
    def hover_download_now_button(self) -> None:
        logger.info("Hovering to 'Download now' button")
        self.actions.hover(_Locators.DOWNLOAD_NOW)

    @allure.step("Verify tooltip is displayed")
    def verify_tooltip_displayed(self) -> None:
        logger.info("Verifying tooltip is displayed for 'Download now' button")
        self.actions.verify_element_visible(_Locators.TOOLTIP_IMAGE, "Tooltip image is not visible")
