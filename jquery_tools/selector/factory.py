"""
================================================================================
jQuery Factory
================================================================================

Entry point for test code: makes sure jQuery is present in the page and
builds the first Selector for a criteria string.

Usage:
    >>> executor = ScriptExecutor(page)
    >>> factory = JQueryFactory(executor)
    >>> items = factory.find("ul#menu > li")
    >>> items.is_empty()
    False

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from loguru import logger

from jquery_tools.common.global_config import get_config

from . import script
from .errors import JQueryNotLoadedError
from .jquery_selector import Selector
from .result import as_references, as_scalar


JQUERY_PRESENT_SCRIPT = "return typeof jQuery === 'function'"


class JQueryFactory:
    """
    Builds selectors for a page.

    The jQuery source comes from, in order: the ``jquery_path`` argument, the
    ``jquery_url`` argument, the ``jquery.path`` config key, the
    ``jquery.url`` config key. A local path always wins over a URL.
    """

    def __init__(
        self,
        executor: Any,
        jquery_url: Optional[str] = None,
        jquery_path: Optional[Union[str, Path]] = None,
    ):
        """
        Initialize the factory.

        Args:
            executor: Script executor bound to the page under test
            jquery_url: URL of the jQuery build to inject when missing
            jquery_path: Local jQuery file to inject when missing
        """
        self.executor = executor
        self.jquery_path = jquery_path or get_config("jquery.path")
        self.jquery_url = jquery_url or get_config("jquery.url")

    def is_loaded(self) -> bool:
        """True if the page already defines jQuery."""
        return bool(as_scalar(self.executor.execute(JQUERY_PRESENT_SCRIPT)))

    def load(self) -> None:
        """
        Inject jQuery into the page unless it is already there.

        Raises:
            JQueryNotLoadedError: When no source is configured or the
                injected script did not define jQuery
        """
        if self.is_loaded():
            return

        if not (self.jquery_path or self.jquery_url):
            raise JQueryNotLoadedError(
                "jQuery is not loaded and no jquery.path or jquery.url is configured"
            )

        self.executor.inject_script(url=self.jquery_url, path=self.jquery_path)

        if not self.is_loaded():
            raise JQueryNotLoadedError(
                f"jQuery still missing after injecting {self.jquery_path or self.jquery_url}"
            )
        logger.info("jQuery injected into page")

    def find(self, criteria: str) -> Selector:
        """
        Select the elements matching a jQuery criteria string.

        Args:
            criteria: jQuery selector, e.g. "div#jq-primaryNavigation"

        Returns:
            Selector identified by the expression jQuery("<criteria>")
        """
        self.load()
        expression = script.jquery(criteria)
        references = as_references(self.executor.execute(script.returning(expression)))
        logger.debug(f"{expression} matched {len(references)} element(s)")
        return Selector(self.executor, expression, references)


__all__ = [
    "JQueryFactory",
]
