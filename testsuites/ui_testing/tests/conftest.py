"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for UI tests, providing fixtures for browser
management, page objects, and test setup/teardown.

Key Features:
- Settings resolved once per process (aborts the run if they are invalid)
- One WebDriver per test, always quit on teardown
- Page Object fixtures for all pages
- Screenshot capture on failure

================================================================================
"""

from typing import Generator

import allure
import pytest
from loguru import logger

from testsuites.ui_testing.framework.browser_manager import DriverManager
from testsuites.ui_testing.framework.element_actions import ElementActions
from testsuites.ui_testing.framework.exceptions import ConfigurationError
from testsuites.ui_testing.framework.log_config import init_logger
from testsuites.ui_testing.framework.settings import Settings, load_settings
from testsuites.ui_testing.pages import applitools, automation_demo, guru


SETTINGS_KEY = pytest.StashKey[Settings]()


# ================================================================================
# Pytest Configuration
# ================================================================================

def pytest_configure(config):
    """Resolve UI settings once and register UI-only markers."""
    config.addinivalue_line(
        "markers", "environment(name): run only when the selected environment is name"
    )

    overrides = {
        "env": config.getoption("env"),
        "browser": config.getoption("browser"),
        "headless": config.getoption("headless"),
        "resolution": config.getoption("resolution"),
        "hubType": config.getoption("hub_type"),
        "hubUrl": config.getoption("hub_url"),
    }
    try:
        settings = load_settings(overrides=overrides)
    except ConfigurationError as e:
        raise pytest.UsageError(f"Invalid UI test configuration: {e}") from e

    init_logger(settings.log_level, settings.log_dir)
    config.stash[SETTINGS_KEY] = settings


def pytest_runtest_setup(item):
    """Skip tests bound to another environment than the selected one."""
    marker = item.get_closest_marker("environment")
    if marker is None:
        return
    settings = item.config.stash[SETTINGS_KEY]
    required = marker.args[0]
    if settings.test_env != required:
        pytest.skip(f"requires environment {required} (selected: {settings.test_env})")


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def settings(pytestconfig) -> Settings:
    """Run settings resolved in pytest_configure."""
    return pytestconfig.stash[SETTINGS_KEY]


@pytest.fixture(scope="function")
def driver_manager(request, settings: Settings) -> Generator[DriverManager, None, None]:
    """
    Function-scoped WebDriver lifecycle.

    Starts one browser session for the test and quits it afterwards.
    """
    logger.info("========================================")
    logger.info(f"Starting test: {request.node.name}")
    logger.info(f"Test module: {request.node.module.__name__}")
    logger.info(f"Environment: {settings.test_env}")
    logger.info(f"Browser: {settings.browser_type}")
    logger.info("========================================")

    manager = DriverManager(settings)
    try:
        manager.start()
    except Exception:
        logger.exception("Failed to initialize WebDriver")
        raise

    yield manager

    manager.quit()
    logger.info(f"Test completed: {request.node.name}")
    logger.info("========================================")


@pytest.fixture
def actions(driver_manager: DriverManager, settings: Settings) -> ElementActions:
    """Element interaction facade bound to the test's browser session."""
    return ElementActions(driver_manager, settings)


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def guru_login_page(actions: ElementActions) -> guru.LoginPage:
    return guru.LoginPage(actions)


@pytest.fixture
def tooltips_page(actions: ElementActions) -> guru.ToolTipsPage:
    return guru.ToolTipsPage(actions)


@pytest.fixture
def drag_drop_page(actions: ElementActions) -> guru.DragDropPage:
    return guru.DragDropPage(actions)


@pytest.fixture
def applitools_login_page(actions: ElementActions) -> applitools.LoginPage:
    return applitools.LoginPage(actions)


@pytest.fixture
def alert_page(actions: ElementActions) -> automation_demo.AlertPage:
    """Provides AlertPage, already navigated to the alerts demo."""
    return automation_demo.AlertPage(actions)


@pytest.fixture
def date_picker_page(actions: ElementActions) -> automation_demo.DatePickerPage:
    return automation_demo.DatePickerPage(actions)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Hook to capture screenshots on test failure.

    Takes a screenshot when a UI test with a live browser fails and attaches
    it to the Allure report.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        element_actions = getattr(item, "funcargs", {}).get("actions")
        if element_actions is None:
            return
        try:
            element_actions.take_screenshot("failure_screenshot")
            allure.attach(
                element_actions.current_url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )
        except Exception as e:
            # Log but don't fail if screenshot capture fails
            logger.warning(f"Failed to capture screenshot on failure: {e}")
