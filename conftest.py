"""
Repository-level pytest configuration.

Why this exists:
  - Register the run-time override options of the UI suite. pytest only
    accepts addoption() from the root conftest or plugins.
  - Expose the repository root to fixtures.

Overrides take precedence over the environment and the .env file:
    pytest testsuites/ui_testing/tests --env=APPLITOOLS --browser=firefox --headless=true
"""

from __future__ import annotations

from pathlib import Path

import pytest


def pytest_addoption(parser):
    """Register UI run-time overrides (see framework/settings.py)."""
    group = parser.getgroup("ui", "UI test settings")
    group.addoption("--env", action="store", default=None, help="Environment name from test_data.json (e.g. GURU)")
    group.addoption("--browser", action="store", default=None, help="Browser: chrome, firefox or edge")
    group.addoption("--headless", action="store", default=None, help="Run headless: true or false")
    group.addoption("--resolution", action="store", default=None, help="Window size as 'width,height'")
    group.addoption("--hub-type", action="store", default=None, help="NONE (local) or GRID")
    group.addoption("--hub-url", action="store", default=None, help="Selenium Grid hub URL")


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
