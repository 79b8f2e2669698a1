"""
================================================================================
jQuery Tools Common Utilities
================================================================================

Shared configuration management and logging setup.

Exports:
    - get_config: Get a configuration value by dot-separated path
    - set_config: Override a configuration value at runtime
    - init_logger: Initialize loguru with standard settings

Usage:
    from jquery_tools.common import get_config, init_logger

    init_logger()
    jquery_url = get_config("jquery.url")

================================================================================
"""

from .global_config import (
    get_config,
    get_logger,
    init_logger,
    reload_config,
    set_config,
)

__all__ = [
    "get_config",
    "get_logger",
    "init_logger",
    "reload_config",
    "set_config",
]
