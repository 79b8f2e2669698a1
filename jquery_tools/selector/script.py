"""
================================================================================
Script Building
================================================================================

Pure helpers that turn a selector expression and call arguments into the
script text sent to the browser. Nothing here talks to a page, so every
function can be tested on plain strings.

Quoting rule:
    An argument is injected as a quoted string literal unless it looks like
    script. It looks like script when the text before the first "(" contains
    "function", "$" or "jQuery", or the text before the first "." contains
    "document".

Examples:
    >>> format_argument("myClass")
    "'myClass'"
    >>> format_argument("function(){return 1;}")
    'function(){return 1;}'
    >>> call("addClass", format_argument("document.body"))
    '.addClass(document.body)'

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json

# Tokens that mark an argument as inline script rather than a literal
SCRIPT_CALL_TOKENS = ("function", "$", "jQuery")
SCRIPT_OBJECT_TOKENS = ("document",)

_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
}


def requires_apostrophe(argument: str) -> bool:
    """
    Decide whether an argument must be wrapped in quotes.

    Args:
        argument: Raw argument supplied by the caller

    Returns:
        False if the argument looks like executable script, True otherwise
    """
    before_call = argument.split("(")[0]
    before_member = argument.split(".")[0]

    if any(token in before_call for token in SCRIPT_CALL_TOKENS):
        return False
    if any(token in before_member for token in SCRIPT_OBJECT_TOKENS):
        return False
    return True


def quote(argument: str) -> str:
    """Wrap an argument in apostrophes, escaping what would break the literal."""
    escaped = "".join(_ESCAPES.get(char, char) for char in argument)
    return f"'{escaped}'"


def format_argument(argument: str) -> str:
    """Quote the argument only when it is a literal."""
    if requires_apostrophe(argument):
        return quote(argument)
    return argument


def name_literal(name: str) -> str:
    """Double-quoted literal used for attribute and CSS property names."""
    return json.dumps(name)


def call(method: str, *arguments: str) -> str:
    """
    Build a method call suffix from already formatted arguments.

    Args:
        method: jQuery method name (e.g. "addClass")
        *arguments: Formatted arguments, joined with commas

    Returns:
        Suffix such as ".addClass('x')"
    """
    return f".{method}({','.join(arguments)})"


def indexed(expression: str, index: int) -> str:
    """Selector of a single element inside an expression's result."""
    return f"{expression}[{index}]"


def jquery(criteria: str) -> str:
    """Initial expression for a criteria string, e.g. jQuery("div")."""
    return f"jQuery({json.dumps(criteria)})"


def wrap_element(selector: str) -> str:
    """Re-wrap an indexed element selector so jQuery methods apply to it."""
    return f"jQuery({selector})"


def returning(expression: str) -> str:
    """Script source that hands the expression's value back to the caller."""
    return f"return {expression}"


__all__ = [
    "requires_apostrophe",
    "quote",
    "format_argument",
    "name_literal",
    "call",
    "indexed",
    "jquery",
    "wrap_element",
    "returning",
]
