"""
================================================================================
Unit Test Fixtures
================================================================================

Browser-free doubles for the script executor.

FakeExecutor records every script it is asked to run and answers from a
table of canned ScriptResults, so selector behaviour can be asserted on the
exact script text without launching Playwright.

================================================================================
"""

from typing import Any, Dict, List, Optional

import pytest

from jquery_tools.selector import ScriptResult, StaleElementError


class FakeElement:
    """Stand-in for a Playwright ElementHandle."""

    def __init__(self, tag_name: str = "div", stale: bool = False, **attributes: str):
        self.tag_name = tag_name
        self.stale = stale
        self.attributes = attributes

    def __repr__(self) -> str:
        return f"FakeElement({self.tag_name!r}, {self.attributes!r})"


class FakeExecutor:
    """Records scripts and replays canned results."""

    def __init__(self):
        self.scripts: List[str] = []
        self.injected: List[tuple] = []
        self.released: List[FakeElement] = []
        self.responses: Dict[str, Any] = {}
        self.default = ScriptResult.sequence([])

    def respond(self, script: str, result: Any) -> None:
        """Answer `script` with a ScriptResult, or raise it if it is an exception."""
        self.responses[script] = result

    def respond_elements(self, script: str, *elements: FakeElement) -> None:
        mapping = {str(i): element for i, element in enumerate(elements)}
        mapping["length"] = len(elements)
        self.respond(script, ScriptResult.collection(mapping))

    def execute(self, script: str) -> ScriptResult:
        self.scripts.append(script)
        response = self.responses.get(script, self.default)
        if isinstance(response, Exception):
            raise response
        return response

    def describe(self, reference: FakeElement) -> str:
        self._check(reference)
        return reference.tag_name

    def get_attribute(self, reference: FakeElement, name: str) -> Optional[str]:
        self._check(reference)
        return reference.attributes.get(name)

    def same_element(self, first: FakeElement, second: FakeElement) -> bool:
        self._check(first)
        self._check(second)
        return first is second

    def release(self, reference: FakeElement) -> None:
        self.released.append(reference)

    def inject_script(self, url=None, path=None) -> None:
        self.injected.append((url, path))

    @staticmethod
    def _check(reference: FakeElement) -> None:
        if reference.stale:
            raise StaleElementError("Element is no longer attached to the document")


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def element():
    """Factory fixture: element("li", **{"class": "a b"})."""
    def _make(tag_name: str = "div", stale: bool = False, **attributes: str) -> FakeElement:
        return FakeElement(tag_name, stale=stale, **attributes)
    return _make
