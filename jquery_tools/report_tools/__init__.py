from .allure_utils import attach_html, attach_script, attach_selector_summary, attach_text

__all__ = [
    "attach_html",
    "attach_script",
    "attach_selector_summary",
    "attach_text",
]
