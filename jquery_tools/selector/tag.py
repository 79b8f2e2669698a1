"""
================================================================================
jQuery Tag
================================================================================

A single element matched by a selector expression.

A tag remembers where it came from (``jQuery("li")[2]``) so its jQuery
operations can be re-issued against that exact element, and it keeps the
Playwright element handle for DOM-level reads and identity checks.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Optional

from . import script
from .result import as_scalar


class Tag:
    """
    One matched element.

    Attributes:
        index: Position of the element in the result it was built from
        reference: Playwright element handle owned by this tag
        selector: Indexed selector, e.g. 'jQuery("li")[2]'
        tag_name: Lower-cased tag name read when the tag was created

    Two tags are equal when the browser says their elements are the same
    node, regardless of the selectors that produced them.
    """

    def __init__(self, executor: Any, expression: str, index: int, reference: Any):
        """
        Initialize a tag.

        Args:
            executor: Script executor used for every browser round trip
            expression: Expression of the set the element belongs to
            index: Position of the element in that set
            reference: Element handle returned by the executor

        Raises:
            StaleElementError: If the element is no longer in the document
        """
        self.executor = executor
        self.index = index
        self.reference = reference
        self.selector = script.indexed(expression, index)
        self.tag_name = executor.describe(reference)

    def get_selector(self) -> str:
        return self.selector

    def get_attribute(self, name: str) -> Optional[str]:
        """Read a DOM attribute directly from the element."""
        return self.executor.get_attribute(self.reference, name)

    def text(self, value: Optional[str] = None):
        """
        Get or set the text content of the element.

        Args:
            value: New text (or inline function). Reads the text when omitted.

        Returns:
            The text when reading, this tag when writing
        """
        if value is None:
            return self._read(script.call("text"))
        self._run(script.call("text", script.format_argument(value)))
        return self

    def css(self, name: str) -> Any:
        """Get the computed value of a CSS property."""
        return self._read(script.call("css", script.name_literal(name)))

    def attr(self, name: str, value: Optional[str] = None):
        """
        Get or set an attribute through jQuery.

        Args:
            name: Attribute name
            value: New value (or inline function). Reads the attribute when omitted.

        Returns:
            The attribute value when reading, this tag when writing
        """
        if value is None:
            return self._read(script.call("attr", script.name_literal(name)))
        self._run(
            script.call("attr", script.name_literal(name), script.format_argument(value))
        )
        return self

    def _read(self, suffix: str) -> Any:
        return as_scalar(self._run(suffix))

    def _run(self, suffix: str):
        expression = script.wrap_element(self.selector) + suffix
        return self.executor.execute(script.returning(expression))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tag):
            return NotImplemented
        return self.executor.same_element(self.reference, other.reference)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Tag(selector={self.selector!r}, tag_name={self.tag_name!r})"


__all__ = [
    "Tag",
]
