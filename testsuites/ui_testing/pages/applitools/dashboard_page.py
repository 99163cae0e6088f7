"""
Applitools demo dashboard shown after login.
"""

from __future__ import annotations

import allure
from loguru import logger

from testsuites.ui_testing.framework.locator import Locator
from testsuites.ui_testing.framework.page_base import BasePage


class _Locators:
    USER_ICON = Locator.by_xpath("//div[@class='logged-user-w avatar-inline']")


class DashboardPage(BasePage):

    @allure.step("Verify dashboard loaded")
    def verify_dashboard_loaded(self) -> None:
        logger.info("Verifying that the Dashboard page is loaded")
        self.actions.verify_element_visible(
            _Locators.USER_ICON,
            "User icon is not visible on the Dashboard page",
        )
