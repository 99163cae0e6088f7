"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

A page object holds an ElementActions instance by composition and exposes
semantic actions and verifications built from it. Locators live in a private
_Locators class next to each page.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional

from .element_actions import ElementActions
from .settings import Settings


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class _Locators:
            USERNAME = Locator.by_id("username")
            SIGN_IN = Locator.by_id("log-in")

        class LoginPage(BasePage):
            def login(self, email: str, password: str) -> None:
                self.actions.type_text(_Locators.USERNAME, email)
                self.actions.click(_Locators.SIGN_IN)
    """

    # Override in subclasses that load a fixed URL on construction
    URL: Optional[str] = None

    def __init__(self, actions: ElementActions, settings: Optional[Settings] = None):
        """
        Initialize page object.

        Args:
            actions: Element interaction facade bound to the test's session
            settings: Run settings. Defaults to the facade's settings.
        """
        self.actions = actions
        self.settings = settings or actions.settings
        if self.URL:
            self.open_site(self.URL)

    def open_site(self, url: Optional[str] = None) -> None:
        """Open url, or the environment base URL when omitted."""
        self.actions.open_site(url)

    def verify_title(self, expected_title: str) -> None:
        self.actions.verify_title(expected_title)


__all__ = [
    "BasePage",
]
