"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations, one subpackage per target site.

Each page class encapsulates:
    - Element locators (private _Locators class)
    - Page-specific actions
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from . import applitools, automation_demo, guru

__all__ = [
    "applitools",
    "automation_demo",
    "guru",
]
