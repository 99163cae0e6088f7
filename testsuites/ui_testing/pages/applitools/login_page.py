"""
================================================================================
Applitools Login Page Object
================================================================================

Login form of the Applitools demo app. Opened through the environment base
URL of the APPLITOOLS environment.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from testsuites.ui_testing.framework.locator import Locator
from testsuites.ui_testing.framework.page_base import BasePage

from .dashboard_page import DashboardPage


class _Locators:
    USERNAME = Locator.by_id("username")
    PASSWORD = Locator.by_id("password")
    SIGN_IN = Locator.by_id("log-in")


class LoginPage(BasePage):
    """Applitools demo login page."""

    @allure.step("Login (email={email})")
    def login(self, email: str, password: str) -> DashboardPage:
        """
        Submit the login form.

        Returns:
            DashboardPage bound to the same session
        """
        logger.info(f"Logging in with email: {email}")
        self.actions.type_text(_Locators.USERNAME, email)
        self.actions.type_text(_Locators.PASSWORD, password)
        self.actions.click(_Locators.SIGN_IN)
        return DashboardPage(self.actions, self.settings)
