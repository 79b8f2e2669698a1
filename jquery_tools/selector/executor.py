"""
================================================================================
Script Executor
================================================================================

Runs injected script in a Playwright page and classifies the result.

Responsibilities:
    - Evaluate a script body and hand back a tagged ``ScriptResult``
    - Keep element handles alive for the caller, dispose everything else
    - Translate Playwright errors into the selector error hierarchy
    - Element-level helpers (tag name, DOM attribute, browser-side equality)

Every call is a single blocking round trip through ``playwright.sync_api``.
The page does not accept concurrent commands, so callers serialize access.

Usage:
    >>> executor = ScriptExecutor(page)
    >>> result = executor.execute('return jQuery("li")')
    >>> result.kind
    <ResultKind.COLLECTION: 'collection'>

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from loguru import logger
from playwright.sync_api import ElementHandle, Error as PlaywrightError, JSHandle, Page

from jquery_tools.report_tools.allure_utils import attach_script

from .errors import ScriptExecutionError, StaleElementError
from .result import ResultKind, ScriptResult


# Playwright messages that mean the node or handle is gone
STALE_MARKERS = (
    "not attached",
    "is disposed",
    "detached",
)

# window has a numeric length (frame count) but is not an element list
CLASSIFY_SCRIPT = """value => {
    if (Array.isArray(value)) return "sequence";
    if (value !== null && typeof value === "object"
        && typeof value.length === "number" && value !== window) return "collection";
    return "scalar";
}"""

DESCRIBE_SCRIPT = """el => ({
    connected: el.isConnected,
    tag: (el.tagName || el.nodeName || "").toLowerCase()
})"""

SAME_ELEMENT_SCRIPT = "([a, b]) => a === b"


class ScriptExecutor:
    """
    Script execution service backed by a Playwright sync Page.

    Attributes:
        page: Playwright Page the scripts run in
    """

    def __init__(self, page: Page):
        """
        Initialize the executor.

        Args:
            page: Playwright sync Page object
        """
        self.page = page

    def execute(self, script: str) -> ScriptResult:
        """
        Run a script body in the page.

        The script is used as the body of an arrow function, so it must
        ``return`` the value it wants back.

        Args:
            script: Script source, e.g. 'return jQuery("div").children()'

        Returns:
            ScriptResult tagged with the shape of the returned value

        Raises:
            StaleElementError: A referenced node was detached
            ScriptExecutionError: The script failed in the browser
        """
        logger.debug(f"Executing script: {script}")
        try:
            handle = self.page.evaluate_handle(f"() => {{ {script} }}")
            return self._classify(handle)
        except PlaywrightError as e:
            raise self._translate(e, script) from e

    def describe(self, reference: ElementHandle) -> str:
        """
        Read the lower-cased tag name of an element.

        Raises:
            StaleElementError: If the element left the document
        """
        try:
            state = reference.evaluate(DESCRIBE_SCRIPT)
        except PlaywrightError as e:
            raise self._translate(e) from e

        if not state["connected"]:
            raise StaleElementError("Element is no longer attached to the document")
        return state["tag"]

    def get_attribute(self, reference: ElementHandle, name: str) -> Optional[str]:
        """Read a DOM attribute straight from the element."""
        try:
            return reference.get_attribute(name)
        except PlaywrightError as e:
            raise self._translate(e) from e

    def same_element(self, first: ElementHandle, second: ElementHandle) -> bool:
        """Ask the browser whether two handles point to the same node."""
        try:
            return bool(self.page.evaluate(SAME_ELEMENT_SCRIPT, [first, second]))
        except PlaywrightError as e:
            raise self._translate(e) from e

    def release(self, reference: ElementHandle) -> None:
        """
        Dispose an element handle that will not be handed out.

        A handle that is already gone has nothing left to release.
        """
        try:
            reference.dispose()
        except PlaywrightError as e:
            logger.debug(f"Handle already released: {e}")

    def inject_script(
        self,
        url: Optional[str] = None,
        path: Optional[Union[str, Path]] = None,
    ) -> None:
        """
        Add a script tag to the page.

        Args:
            url: Remote script URL
            path: Local script file, preferred over url when both are given
        """
        if path:
            logger.info(f"Injecting script from file: {path}")
            self.page.add_script_tag(path=str(path))
        elif url:
            logger.info(f"Injecting script from URL: {url}")
            self.page.add_script_tag(url=url)
        else:
            raise ValueError("Either url or path is required to inject a script")

    def _classify(self, handle: JSHandle) -> ScriptResult:
        """Convert a result handle into a ScriptResult."""
        element = handle.as_element()
        if element is not None:
            return ScriptResult.element(element)

        kind = ResultKind(handle.evaluate(CLASSIFY_SCRIPT))
        if kind is ResultKind.SCALAR:
            value = handle.json_value()
            handle.dispose()
            return ScriptResult.scalar(value)

        length = handle.evaluate("value => value.length")
        properties = handle.get_properties()
        entries = [properties.pop(str(i), None) for i in range(length)]
        holds_nodes = any(
            entry is not None and entry.as_element() is not None for entry in entries
        )
        items = [self._unwrap(entry) for entry in entries]

        # Leftovers such as jQuery's prevObject are not handed out
        for leftover in properties.values():
            leftover.dispose()
        handle.dispose()

        if kind is ResultKind.SEQUENCE:
            # Plain value arrays, e.g. val() of a <select multiple>
            if items and not holds_nodes:
                return ScriptResult.scalar(items)
            return ScriptResult.sequence(items)

        mapping = {str(i): item for i, item in enumerate(items)}
        mapping["length"] = length
        return ScriptResult.collection(mapping)

    @staticmethod
    def _unwrap(handle: Optional[JSHandle]) -> Any:
        if handle is None:
            return None
        element = handle.as_element()
        if element is not None:
            return element
        value = handle.json_value()
        handle.dispose()
        return value

    @staticmethod
    def _translate(
        error: PlaywrightError,
        script: Optional[str] = None,
    ) -> Exception:
        message = str(error)
        if any(marker in message for marker in STALE_MARKERS):
            logger.debug(f"Stale element detected: {message}")
            return StaleElementError(message)

        logger.error(f"Script failed: {message}")
        if script:
            attach_script(script, name="Failed script")
        return ScriptExecutionError(message, script)


__all__ = [
    "ScriptExecutor",
]
