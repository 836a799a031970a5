"""
================================================================================
UI Automation Tools Common Utilities
================================================================================

Shared configuration management and logging setup for the page object
framework and its test suites.

Exports:
    - get_config / set_config / reload_config: dot-notation configuration access
    - init_logger / get_logger: loguru logger with standard settings

Usage:
    from uiauto_tools.common import get_config, init_logger

    init_logger()
    browser = get_config("ui.browser", "chromium")

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
    "set_config",
    "reload_config",
    "init_logger",
    "get_logger",
]
