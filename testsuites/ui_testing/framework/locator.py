"""
================================================================================
Locator
================================================================================

Immutable (strategy, value) pair describing how to find a page element.

Usage:
    >>> USERNAME = Locator.by_id("username")
    >>> driver.find_element(*USERNAME)

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from selenium.webdriver.common.by import By


@dataclass(frozen=True)
class Locator:
    """
    Element location strategy and value.

    Attributes:
        by: Selenium strategy (By.ID, By.XPATH, ...)
        value: Selector string for that strategy
    """

    by: str
    value: str

    def __iter__(self) -> Iterator[str]:
        # Unpacks into find_element(by, value) and expected_conditions tuples
        yield self.by
        yield self.value

    def __str__(self) -> str:
        return f"{self.by}={self.value}"

    @classmethod
    def by_id(cls, value: str) -> "Locator":
        return cls(By.ID, value)

    @classmethod
    def by_name(cls, value: str) -> "Locator":
        return cls(By.NAME, value)

    @classmethod
    def by_xpath(cls, value: str) -> "Locator":
        return cls(By.XPATH, value)

    @classmethod
    def by_css(cls, value: str) -> "Locator":
        return cls(By.CSS_SELECTOR, value)

    @classmethod
    def by_class_name(cls, value: str) -> "Locator":
        return cls(By.CLASS_NAME, value)

    @classmethod
    def by_link_text(cls, value: str) -> "Locator":
        return cls(By.LINK_TEXT, value)

    def as_tuple(self) -> tuple:
        return (self.by, self.value)


__all__ = ["Locator"]
