"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based (synchronous) Page Object Model framework.

Components:
    - page_base: Base page object with waits, switching and input helpers
    - browser_manager: Browser lifecycle management
    - errors: Page object exception hierarchy
    - scripts: JavaScript injected by page objects
    - dialogs: Per-page queue of open JavaScript dialogs

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager
from .errors import (
    CookieNotFoundError,
    ElementNotFoundError,
    PageObjectError,
    StaleElementError,
    WaitTimeoutError,
    WindowNotFoundError,
)
from .page_base import BasePageObject

__all__ = [
    "BasePageObject",
    "BrowserManager",
    "PageObjectError",
    "ElementNotFoundError",
    "StaleElementError",
    "WaitTimeoutError",
    "WindowNotFoundError",
    "CookieNotFoundError",
]
