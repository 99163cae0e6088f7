"""
================================================================================
Driver Lifecycle Smoke Test
================================================================================

Starts a real headless Chrome session outside the fixtures, drives it through
one navigation and checks that quitting releases the thread's slot.

================================================================================
"""

import dataclasses

import allure
import pytest

from testsuites.ui_testing.framework.browser_manager import DriverManager
from testsuites.ui_testing.framework.settings import Settings


@allure.epic("UI Testing")
@allure.feature("Driver Lifecycle")
@pytest.mark.e2e
class TestDriverLifecycle:

    @allure.title("Headless Chrome session starts, navigates and quits")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P0
    @pytest.mark.smoke
    def test_start_navigate_quit(self, settings: Settings):
        chrome_settings = dataclasses.replace(settings, browser_type="chrome", headless=True)

        with DriverManager(chrome_settings) as manager:
            assert DriverManager.is_active()

            manager.navigate_to("https://example.com")
            assert manager.get_title() == "Example Domain"

        assert not DriverManager.is_active()
