"""
================================================================================
Automation Demo Date Picker Page Object
================================================================================

jQuery UI date picker demo. The "disabled" date picker can only be filled by
navigating the calendar, which select_date_disable() does month by month.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from testsuites.ui_testing.framework.helpers import (
    convert_month_name_to_number,
    convert_string_to_date,
)
from testsuites.ui_testing.framework.locator import Locator
from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.pages.sites import AUTOMATION_DEMO_DATE_PICKER_URL


class _Locators:
    DATE_DISABLE = Locator.by_id("datepicker1")
    NEXT_MONTH = Locator.by_xpath("//a[@title='Next']")
    PREV_MONTH = Locator.by_xpath("//a[@title='Prev']")
    MONTH_YEAR = Locator.by_class_name("ui-datepicker-title")
    CALENDAR = Locator.by_class_name("ui-datepicker-calendar")

    @staticmethod
    def day(day: int) -> Locator:
        return Locator.by_xpath(f"//table[@class='ui-datepicker-calendar']//a[text()='{day}']")


class DatePickerPage(BasePage):
    """Date picker page; opened on construction."""

    URL = AUTOMATION_DEMO_DATE_PICKER_URL

    @allure.step("Select date {date_str} from the disabled date picker")
    def select_date_disable(self, date_str: str) -> None:
        """
        Pick a date from the disabled date picker.

        Args:
            date_str: Date in MM/DD/YYYY format
        """
        logger.info(f"Selecting date: {date_str}")
        target = convert_string_to_date(date_str)

        self.actions.click(_Locators.DATE_DISABLE)

        while True:
            month_name, year = self.actions.read_text(_Locators.MONTH_YEAR).split()
            displayed = (int(year), convert_month_name_to_number(month_name))
            wanted = (target.year, target.month)

            if displayed > wanted:
                self.actions.click(_Locators.PREV_MONTH)
            elif displayed < wanted:
                self.actions.click(_Locators.NEXT_MONTH)
            else:
                break

        self.actions.click(_Locators.day(target.day))
        self.actions.wait_for_invisible(_Locators.CALENDAR)
        logger.info(f"Date selected: {date_str}")

    @allure.step("Verify selected date: {date_str}")
    def verify_selected_date_disable(self, date_str: str) -> None:
        logger.info(f"Verifying selected date: {date_str}")
        current = self.actions.read_value(_Locators.DATE_DISABLE)
        self.actions.verify_equals(
            date_str,
            current,
            f"The date {date_str} is not selected as expected, current date is {current}",
        )
