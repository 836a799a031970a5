"""
================================================================================
UI Automation Tools
================================================================================

Supporting utilities for the page object framework.

Modules:
    - common: Shared configuration and logging utilities
    - report_tools: Allure attachment helpers

Example:
    from uiauto_tools.common import get_config, init_logger
    from uiauto_tools.report_tools import attach_page_state

    init_logger()
    attach_page_state(login_page, name="login")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
