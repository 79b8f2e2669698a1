"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for live-browser selector tests.

Key Features:
- Session-scoped Playwright browser (sync API)
- Function-scoped page loaded with the navigation fixture document
- jQuery factory bound to that page
- Screenshot capture on failure

Tests are skipped when no browser can be launched or jQuery cannot be
loaded (e.g. offline without a local jquery.path).

================================================================================
"""

from pathlib import Path
from typing import Generator

import allure
import pytest
from loguru import logger
from playwright.sync_api import Browser, Error as PlaywrightError, Page, sync_playwright

from jquery_tools.common import get_config, get_logger
from jquery_tools.report_tools import attach_html
from jquery_tools.selector import JQueryFactory, JQueryNotLoadedError, ScriptExecutor


FIXTURE_PAGE = Path(__file__).parent.parent / "fixtures" / "navigation.html"


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def browser() -> Generator[Browser, None, None]:
    """
    Session-scoped browser fixture.

    Browser type and headless mode come from the browser.* configuration.
    """
    log = get_logger()
    browser_type = get_config("browser.type", "chromium")
    playwright = sync_playwright().start()
    launcher = getattr(playwright, browser_type)

    try:
        browser = launcher.launch(headless=get_config("browser.headless", True))
    except PlaywrightError as e:
        playwright.stop()
        pytest.skip(f"Browser unavailable: {e}")

    log.info(f"Launched {browser_type} browser")

    yield browser

    browser.close()
    playwright.stop()


@pytest.fixture(scope="function")
def page(browser: Browser) -> Generator[Page, None, None]:
    """
    Function-scoped page with the fixture document loaded.

    Each test gets a fresh context, so DOM changes never leak between tests.
    """
    context = browser.new_context()
    page = context.new_page()
    page.set_content(FIXTURE_PAGE.read_text(encoding="utf-8"))
    yield page
    context.close()


@pytest.fixture
def executor(page: Page) -> ScriptExecutor:
    return ScriptExecutor(page)


@pytest.fixture
def jq(executor: ScriptExecutor) -> JQueryFactory:
    """jQuery factory with jQuery already loaded into the page."""
    factory = JQueryFactory(executor)
    try:
        factory.load()
    except (JQueryNotLoadedError, PlaywrightError) as e:
        pytest.skip(f"jQuery unavailable: {e}")
    return factory


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Attach a screenshot and the current DOM to the Allure report when a UI
    test fails.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = getattr(item, "funcargs", {}).get("page")
        if page is None:
            return
        try:
            allure.attach(
                page.screenshot(full_page=True),
                name="failure_screenshot",
                attachment_type=allure.attachment_type.PNG,
            )
        except PlaywrightError as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")

        try:
            attach_html(page.content(), name="failure_dom")
        except PlaywrightError as e:
            logger.warning(f"Failed to capture DOM on failure: {e}")
