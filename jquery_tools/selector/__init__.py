"""
================================================================================
jQuery Selector Layer
================================================================================

jQuery-style DOM access for Playwright pages.

Components:
    - executor: Runs injected script in a page and classifies results
    - result: Tagged script results and their conversions
    - script: Pure script-building helpers (quoting, call suffixes)
    - tag: A single matched element
    - jquery_selector: Chainable set of matched elements
    - factory: jQuery injection and initial selection

Author: Automation Team
License: MIT
================================================================================
"""

from .errors import (
    EmptySelectionError,
    JQueryError,
    JQueryNotLoadedError,
    ScriptExecutionError,
    ScriptResultError,
    StaleElementError,
)
from .executor import ScriptExecutor
from .factory import JQueryFactory
from .jquery_selector import Selector
from .result import ResultKind, ScriptResult, as_references, as_scalar
from .tag import Tag

__all__ = [
    "EmptySelectionError",
    "JQueryError",
    "JQueryNotLoadedError",
    "ScriptExecutionError",
    "ScriptResultError",
    "StaleElementError",
    "ScriptExecutor",
    "JQueryFactory",
    "Selector",
    "ResultKind",
    "ScriptResult",
    "as_references",
    "as_scalar",
    "Tag",
]
