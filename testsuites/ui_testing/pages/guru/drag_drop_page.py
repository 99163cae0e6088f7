"""
================================================================================
Guru99 Drag and Drop Page Object
================================================================================

Banking drag and drop demo: amount blocks are dragged onto the DEBIT SIDE /
CREDIT SIDE drop areas, which then list the dropped amount.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from testsuites.ui_testing.framework.locator import Locator
from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.pages.sites import GURU99_DRAG_DROP_URL


class _Locators:
    @staticmethod
    def amount(amount: str) -> Locator:
        return Locator.by_xpath(f"(//a[contains(text(),'{amount}')])[last()]")

    @staticmethod
    def card_amount_area(card_type: str) -> Locator:
        return Locator.by_xpath(
            f"//td[h3[contains(text(), '{card_type}')]]"
            f"//div[@class='shoppingCart' and h3[contains(text(), 'Amount')]]//ol"
        )

    @staticmethod
    def amount_in_card(card_type: str) -> Locator:
        return Locator.by_xpath(
            f"//td[h3[contains(text(), '{card_type}')]]"
            f"//div[@class='shoppingCart' and h3[contains(text(), 'Amount')]]//li"
        )


class DragDropPage(BasePage):
    """Drag and drop page; opened on construction."""

    URL = GURU99_DRAG_DROP_URL

    @allure.step("Drag amount {amount} to {card_type}")
    def drag_drop_amount_to_card_type(self, amount: str, card_type: str) -> None:
        logger.info(f"Dragging amount {amount} to card type {card_type}")
        self.actions.drag_and_drop(_Locators.amount(amount), _Locators.card_amount_area(card_type))

    @allure.step("Verify amount {amount} in {card_type}")
    def verify_amount_in_card_type(self, amount: str, card_type: str) -> None:
        logger.info(f"Verifying amount {amount} is displayed in card type {card_type}")
        current = self.actions.read_text(_Locators.amount_in_card(card_type)).strip()
        self.actions.verify_equals(
            amount,
            current,
            f"Expected amount '{amount}' in card type '{card_type}', but found '{current}'",
        )
