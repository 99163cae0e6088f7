"""
================================================================================
Suite-wide Pytest Configuration
================================================================================

Marker registry shared by the unit and UI suites, plus automatic ui / unit
tagging based on where a test module lives.

================================================================================
"""

from pathlib import Path

import pytest


MARKERS = {
    # Priority
    "P0": "Blocker - the run is red if any of these fail",
    "P1": "Core page flows",
    "P2": "Secondary widgets (date picker, files)",
    "P3": "Nice-to-have checks",
    # Scope
    "smoke": "Fast sanity subset",
    "regression": "Everything else worth re-running on each change",
    "e2e": "Drives a real browser end to end",
    # Suite (added automatically)
    "ui": "Lives under testsuites/ui_testing",
    "unit": "Lives under testsuites/unit",
    # Target site
    "guru": "Guru99 demo site",
    "applitools": "Applitools demo app",
    "automationtesting": "demo.automationtesting.in",
}


def pytest_configure(config):
    for name, description in MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def pytest_collection_modifyitems(config, items):
    """Tag every collected test with the suite directory it comes from."""
    for item in items:
        parts = Path(str(item.fspath)).parts
        if "ui_testing" in parts:
            item.add_marker(pytest.mark.ui)
        elif "unit" in parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    return "Selenium Page Object UI Automation Framework"
