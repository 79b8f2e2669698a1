"""
================================================================================
Allure Report Utilities
================================================================================

Attachment helpers for selector debugging in Allure reports.

Features:
- Text and HTML attachments
- Injected script attachments
- Selector summaries (one line per matched element)

================================================================================
"""

from typing import Any

import allure


def attach_text(text: str, name: str = "Text"):
    """
    Attach text content to Allure report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_html(html: str, name: str = "HTML"):
    """
    Attach HTML content to Allure report.

    Args:
        html: HTML to attach
        name: Attachment name
    """
    allure.attach(
        html,
        name=name,
        attachment_type=allure.attachment_type.HTML
    )


def attach_script(source: str, name: str = "Script"):
    """
    Attach an injected script so the failing call can be replayed in devtools.

    Args:
        source: Script source sent to the browser
        name: Attachment name
    """
    allure.attach(
        source,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_selector_summary(selector: Any, name: str = "Selector summary"):
    """
    Attach the expression and per-element summary of a selector.

    Args:
        selector: Selector to describe
        name: Attachment name
    """
    body = f"{selector.expression}\n\n{selector.summary() or '<no elements>'}"
    attach_text(body, name=name)
