"""
================================================================================
jQuery Selector
================================================================================

Chainable set of matched elements backed by a live page.

Every operation appends a jQuery call to the selector expression, runs it
through the script executor and turns the answer back into tags:

    - Traversal (children, parent, next, find, ...) returns a NEW selector
      whose expression carries the traversal suffix
    - Mutation (addClass, text, append, remove, ...) updates THIS selector
      in place, replacing its tags with the result, and returns it
    - add() also rewrites the expression and every tag's selector so later
      single-element calls address the combined set

Usage:
    >>> nav = factory.find("div#jq-primaryNavigation")
    >>> nav.children().add_class("highlight").text()
    'Home About'

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Iterator, List, Optional

import allure
from loguru import logger

from . import script
from .errors import EmptySelectionError, JQueryError, StaleElementError
from .result import ScriptResult, as_references, as_scalar
from .tag import Tag


class Selector:
    """
    Ordered set of tags sharing one selector expression.

    Attributes:
        expression: jQuery expression identifying the set
        cursor: Position used by get() without arguments

    Construction:
        Selector(executor, 'jQuery("li")', references) wraps raw element
        references, skipping any that are already stale.
        Selector.from_tag(tag) wraps a single existing tag.
    """

    def __init__(
        self,
        executor: Any,
        expression: str,
        references: Optional[List[Any]] = None,
    ):
        """
        Initialize a selector.

        Args:
            executor: Script executor shared with the tags
            expression: jQuery expression that produced the references
            references: Element references in result order
        """
        self._executor = executor
        self.expression = expression
        self.cursor = 0
        self._tags = self._build_tags(references or [], expression)

    @classmethod
    def from_tag(cls, tag: Tag) -> "Selector":
        """Build a one-element selector around an existing tag."""
        selector = cls.__new__(cls)
        selector._executor = tag.executor
        if tag.selector.endswith("]"):
            selector.expression = script.wrap_element(tag.selector)
        else:
            selector.expression = tag.selector
        selector.cursor = 0
        selector._tags = [tag]
        return selector

    # ------------------------------------------------------------------
    # Iteration and element access
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Tag]:
        for tag in self._tags:
            yield tag

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:
        return f"Selector(expression={self.expression!r}, size={len(self._tags)})"

    def get(self, index: Optional[int] = None) -> Optional[Tag]:
        """
        Return a tag from the set.

        Args:
            index: Position to read. When omitted, returns the tag at the
                cursor and advances the cursor.

        Returns:
            The tag, or None when an explicit index is out of range

        Raises:
            IndexError: When the cursor has moved past the last tag
        """
        if index is None:
            tag = self._tags[self.cursor]
            self.cursor += 1
            return tag

        if 0 <= index < len(self._tags):
            return self._tags[index]
        return None

    def first(self) -> Tag:
        """Reduce the set to its first element, re-queried from the page."""
        references = as_references(self._execute(script.call("first")))
        return Tag(self._executor, self.expression, 0, references[0])

    def last(self) -> Tag:
        """Reduce the set to its final element, re-queried from the page."""
        index = len(self._tags) - 1
        references = as_references(self._execute(script.call("last")))
        return Tag(self._executor, self.expression, index, references[0])

    def is_empty(self) -> bool:
        return not self._tags

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    @allure.step("jQuery parent()")
    def parent(self, selector: Optional[str] = None) -> "Selector":
        """Get the parent of each element, optionally filtered by a selector."""
        return self._traverse(self._filter_call("parent", selector))

    @allure.step("jQuery children()")
    def children(self, selector: Optional[str] = None) -> "Selector":
        """Get the children of each element, optionally filtered by a selector."""
        return self._traverse(self._filter_call("children", selector))

    @allure.step("jQuery next()")
    def next(self, selector: Optional[str] = None) -> "Selector":
        """Get the immediately following sibling of each element."""
        return self._traverse(self._filter_call("next", selector))

    @allure.step("jQuery prev()")
    def prev(self, selector: Optional[str] = None) -> "Selector":
        """Get the immediately preceding sibling of each element."""
        return self._traverse(self._filter_call("prev", selector))

    @allure.step("jQuery nextAll()")
    def next_all(self) -> "Selector":
        """Get all following siblings of each element."""
        return self._traverse(script.call("nextAll"))

    @allure.step("jQuery prevAll()")
    def prev_all(self) -> "Selector":
        """Get all preceding siblings of each element."""
        return self._traverse(script.call("prevAll"))

    @allure.step("jQuery find({selector})")
    def find(self, selector: str) -> "Selector":
        """Get the descendants of each element that match a selector."""
        return self._traverse(script.call("find", script.quote(selector)))

    @allure.step("jQuery andSelf()")
    def and_self(self) -> "Selector":
        """Add the previous set of elements on the jQuery stack to the current set."""
        return self._traverse(script.call("andSelf"))

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    @allure.step("jQuery add({selector_elements_html})")
    def add(self, selector_elements_html: str, context: Optional[str] = None) -> "Selector":
        """
        Add elements to the set of matched elements.

        Args:
            selector_elements_html: Selector, element expression or HTML fragment
            context: Element expression where matching of the selector starts.
                The selector is always quoted when a context is given.

        Returns:
            This selector, now identified by the combined expression
        """
        if context is None:
            suffix = script.call("add", script.format_argument(selector_elements_html))
        else:
            suffix = script.call(
                "add",
                script.quote(selector_elements_html),
                script.format_argument(context),
            )

        self._replace(self._execute(suffix))
        self.overwrite_selectors(self.expression + suffix)
        return self

    @allure.step("jQuery addClass({class_name})")
    def add_class(self, class_name: str) -> "Selector":
        """
        Add class(es) to each element.

        Args:
            class_name: Space-separated class names, or an inline
                function(index, currentClass) returning them
        """
        return self._mutate(script.call("addClass", script.format_argument(class_name)))

    @allure.step("jQuery removeClass({class_name})")
    def remove_class(self, class_name: Optional[str] = None) -> "Selector":
        """Remove the given classes, or every class when none is given."""
        return self._mutate(self._filter_call("removeClass", class_name))

    @allure.step("jQuery after()")
    def after(self, *content: str) -> "Selector":
        """Insert content after each element."""
        return self._mutate(self._content_call("after", content))

    @allure.step("jQuery before()")
    def before(self, *content: str) -> "Selector":
        """Insert content before each element."""
        return self._mutate(self._content_call("before", content))

    @allure.step("jQuery append()")
    def append(self, *content: str) -> "Selector":
        """Insert content at the end of each element."""
        return self._mutate(self._content_call("append", content))

    @allure.step("jQuery appendTo({target})")
    def append_to(self, target: str) -> "Selector":
        """Insert every element at the end of the target."""
        return self._mutate(script.call("appendTo", script.format_argument(target)))

    @allure.step("jQuery remove({selector})")
    def remove(self, selector: Optional[str] = None) -> "Selector":
        """
        Remove the elements from the DOM.

        The removed nodes are detached, so they drop out of the set and the
        selector is empty afterwards (unless a filter kept some in place).
        """
        return self._mutate(self._filter_call("remove", selector))

    @allure.step("jQuery click()")
    def click(self) -> "Selector":
        """Trigger the click event on each element."""
        return self._mutate(script.call("click"))

    # ------------------------------------------------------------------
    # Getters / setters
    # ------------------------------------------------------------------

    def attr(self, name: str, value: Optional[str] = None):
        """
        Get the attribute of the first element, or set it on every element.

        Returns:
            Attribute value when reading, this selector when writing
        """
        if value is None:
            return self._first_tag().get_attribute(name)
        return self._mutate(
            script.call("attr", script.name_literal(name), script.format_argument(value))
        )

    def css(self, name: str, value: Optional[str] = None):
        """
        Get a style property of the first element, or set it on every element.

        Returns:
            Property value when reading, this selector when writing
        """
        if value is None:
            return self._first_tag().css(name)
        return self._mutate(
            script.call("css", script.name_literal(name), script.format_argument(value))
        )

    def html(self, html_string: Optional[str] = None):
        """Get the HTML of the first element, or set the HTML of every element."""
        return self._access("html", html_string)

    def text(self, value: Optional[str] = None):
        """Get the combined text of the elements, or set the text of every element."""
        return self._access("text", value)

    def val(self, value: Optional[str] = None):
        """Get the value of the first element, or set the value of every element."""
        return self._access("val", value)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_class(self, class_name: str) -> bool:
        """True if any element's class attribute contains class_name."""
        return any(
            class_name in (tag.get_attribute("class") or "")
            for tag in self._tags
        )

    def has_same_elements_of(self, other: "Selector") -> bool:
        """
        Compare two selectors position by position.

        Only the positions of this selector are visited. A missing position
        in the other selector, or any failure while comparing, counts as a
        difference.
        """
        for index, tag in enumerate(self._tags):
            try:
                if tag != other._tags[index]:
                    return False
            except (IndexError, JQueryError):
                return False
        return True

    def summary(self) -> str:
        """One "<tag>: <text>" line per element, for debugging."""
        result = ""
        for tag in self._tags:
            result += f"{tag.tag_name}: {tag.text()}\n"
        return result

    def overwrite_selectors(self, expression: str) -> None:
        """Rename the set and re-index every tag against the new expression."""
        self.expression = expression
        for index, tag in enumerate(self._tags):
            tag.selector = script.indexed(expression, index)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _execute(self, suffix: str) -> ScriptResult:
        return self._executor.execute(script.returning(self.expression + suffix))

    def _traverse(self, suffix: str) -> "Selector":
        references = as_references(self._execute(suffix))
        return Selector(self._executor, self.expression + suffix, references)

    def _mutate(self, suffix: str) -> "Selector":
        self._replace(self._execute(suffix))
        return self

    def _replace(self, result: ScriptResult) -> None:
        self._tags = self._build_tags(as_references(result), self.expression)

    def _access(self, method: str, value: Optional[str]):
        if value is None:
            self._first_tag()
            return as_scalar(self._execute(script.call(method)))
        return self._mutate(script.call(method, script.format_argument(value)))

    def _first_tag(self) -> Tag:
        if not self._tags:
            raise EmptySelectionError(f"No elements matched {self.expression}")
        return self._tags[0]

    def _build_tags(self, references: List[Any], expression: str) -> List[Tag]:
        tags = []
        for index, reference in enumerate(references):
            try:
                tags.append(Tag(self._executor, expression, index, reference))
            except StaleElementError:
                logger.debug(f"Skipping stale element {index} of {expression}")
                self._executor.release(reference)
        return tags

    @staticmethod
    def _filter_call(method: str, selector: Optional[str]) -> str:
        if selector is None:
            return script.call(method)
        return script.call(method, script.quote(selector))

    @staticmethod
    def _content_call(method: str, content: tuple) -> str:
        if not content:
            raise ValueError(f"{method}() requires at least one content argument")
        return script.call(method, *(script.format_argument(item) for item in content))


__all__ = [
    "Selector",
]
