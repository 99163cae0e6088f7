"""
================================================================================
Guru99 Login Page Object
================================================================================

Bank demo login form (https://demo.guru99.com/). Opened through the
environment base URL of the GURU environment.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from testsuites.ui_testing.framework.locator import Locator
from testsuites.ui_testing.framework.page_base import BasePage


class _Locators:
    EMAIL_ID = Locator.by_name("emailid")
    SUBMIT = Locator.by_name("btnLogin")
    EMAIL_MESSAGE = Locator.by_xpath("//td[input[@name='emailid']]/label")


class LoginPage(BasePage):
    """Guru99 login page."""

    @allure.step("Enter email ID: {email}")
    def enter_email_id(self, email: str) -> None:
        logger.info(f"Entering email ID: {email}")
        self.actions.type_text(_Locators.EMAIL_ID, email)

    @allure.step("Submit email ID")
    def submit_email_id(self) -> None:
        logger.info("Login Page: Submitting email ID")
        self.actions.click(_Locators.SUBMIT)

    @allure.step("Verify login error message: {message}")
    def verify_login_error_message(self, message: str) -> None:
        logger.info(f"Login Page: Verifying login error message: {message}")
        current = self.actions.read_text(_Locators.EMAIL_MESSAGE)
        self.actions.verify_equals(
            message,
            current,
            f"Expected login error message: '{message}', but found: '{current}'",
        )
