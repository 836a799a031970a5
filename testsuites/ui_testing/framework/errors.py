"""
================================================================================
Page Object Errors
================================================================================

Exception hierarchy raised by page objects.

Driver errors that occur inside waits are translated into these types;
everything else raised by Playwright propagates unchanged.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from playwright.sync_api import Error as PlaywrightError

# Substrings of Playwright error messages that mean the element (or the
# document/frame it lived in) was replaced while we were looking at it.
STALE_ERROR_MARKERS = (
    "element is not attached to the dom",
    "execution context was destroyed",
    "frame was detached",
    "element handle is disposed",
)


class PageObjectError(Exception):
    """Base class for page object failures."""
    pass


class ElementNotFoundError(PageObjectError):
    """Raised when a locator matches no element."""

    def __init__(self, locator: str):
        self.locator = locator
        super().__init__(f"No element found for locator: {locator}")


class StaleElementError(PageObjectError):
    """Raised when an element was detached from the page during an operation."""
    pass


class WaitTimeoutError(PageObjectError):
    """Raised when a wait exceeds its bound."""

    def __init__(self, message: str, timeout: float):
        self.timeout = timeout
        super().__init__(message)


class WindowNotFoundError(PageObjectError):
    """Raised by a strict window switch when no window has the expected title."""
    pass


class CookieNotFoundError(PageObjectError):
    """Raised when a cookie is not present in the browser session."""
    pass


def is_stale_error(exc: BaseException) -> bool:
    """Tell whether a Playwright error signals a detached element or context."""
    if not isinstance(exc, PlaywrightError):
        return False
    message = str(exc).lower()
    return any(marker in message for marker in STALE_ERROR_MARKERS)


__all__ = [
    "PageObjectError",
    "ElementNotFoundError",
    "StaleElementError",
    "WaitTimeoutError",
    "WindowNotFoundError",
    "CookieNotFoundError",
    "is_stale_error",
]
