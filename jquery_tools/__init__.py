"""
================================================================================
jQuery Tools
================================================================================

jQuery-style DOM querying and manipulation for Playwright-driven tests.

Modules:
    - selector: Script executor, tags, selectors and the jQuery factory
    - common: Shared configuration and logging utilities
    - report_tools: Allure attachment helpers

Example:
    from playwright.sync_api import sync_playwright
    from jquery_tools.selector import JQueryFactory, ScriptExecutor

    with sync_playwright() as p:
        page = p.chromium.launch().new_page()
        page.goto("https://jquery.com")

        jq = JQueryFactory(ScriptExecutor(page))
        nav = jq.find("div#jq-primaryNavigation")
        print(nav.children().summary())

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "selector",
    "report_tools",
]
