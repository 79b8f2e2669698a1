"""
================================================================================
Selector Errors
================================================================================

Exception hierarchy shared by the script executor, tags and selectors.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional


class JQueryError(Exception):
    """Base exception for all jQuery selector errors."""
    pass


class StaleElementError(JQueryError):
    """Raised when an element reference no longer points to a live DOM node."""
    pass


class ScriptExecutionError(JQueryError):
    """
    Raised when the browser fails to run an injected script.

    Attributes:
        script: The script source that failed
    """

    def __init__(self, message: str, script: Optional[str] = None):
        super().__init__(message)
        self.script = script

    def __str__(self) -> str:
        if self.script:
            return f"{self.args[0]} (script: {self.script})"
        return self.args[0]


class ScriptResultError(JQueryError):
    """Raised when a script result cannot be converted to the requested shape."""
    pass


class JQueryNotLoadedError(JQueryError):
    """Raised when jQuery is not available in the page and cannot be injected."""
    pass


class EmptySelectionError(JQueryError, IndexError):
    """Raised when a value is read from a selector that matched nothing."""
    pass


__all__ = [
    "JQueryError",
    "StaleElementError",
    "ScriptExecutionError",
    "ScriptResultError",
    "JQueryNotLoadedError",
    "EmptySelectionError",
]
