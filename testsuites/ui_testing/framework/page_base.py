"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation on top of the
synchronous Playwright API.

Provides:
    - Element lookup and interaction with short visibility waits
    - Visibility wait with a single stale-element retry
    - Alert, window and frame switching
    - Keyboard, scroll, hover and HTML5 drag-and-drop helpers
    - Cookie access with logging

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import time
from typing import Any, Dict, List, Optional, Union

import allure
from loguru import logger
from playwright.sync_api import (
    Dialog,
    ElementHandle,
    Frame,
    Page,
    Error as PlaywrightError,
    TimeoutError as PlaywrightTimeoutError,
)

from uiauto_tools.common import get_config

from .dialogs import DialogQueue, dialog_queue_for
from .errors import (
    CookieNotFoundError,
    ElementNotFoundError,
    PageObjectError,
    StaleElementError,
    WaitTimeoutError,
    WindowNotFoundError,
    is_stale_error,
)
from .scripts import DRAG_AND_DROP_SCRIPT, SCROLL_TO_BOTTOM_SCRIPT


class BasePageObject:
    """
    Base class for all page objects.

    The page object never creates the browser. It receives a Playwright
    ``Page`` (shared with the test harness) and an optional logger, and keeps
    track of which window and frame subsequent lookups run in.

    Usage:
        class LoginPage(BasePageObject):
            USERNAME = "#username"
            SUBMIT = "button[type='submit']"

            def login(self, username: str) -> None:
                self.type(username, self.USERNAME)
                self.click(self.SUBMIT)
    """

    # Fallbacks when the ui.timeouts config section does not set them (seconds)
    DEFAULT_WAIT_TIMEOUT: float = 30
    SHORT_WAIT_TIMEOUT: float = 5
    POLL_INTERVAL: float = 0.1
    STALE_RETRY_ATTEMPTS: int = 2

    def __init__(
        self,
        page: Page,
        log: Any = None,
        page_url: str = "",
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page the page object drives
            log: Logger with loguru's interface; the global loguru logger
                bound to this class name is used when omitted
            page_url: Expected URL of this page, fixed for the object's lifetime
        """
        if page is None:
            raise ValueError("A Playwright page is required to build a page object")

        self._page = page
        self._scope: Union[Page, Frame] = page
        self._log = log if log is not None else logger.bind(page_object=type(self).__name__)
        self._page_url = page_url

        self.default_wait_timeout = get_config(
            "ui.timeouts.default_wait", self.DEFAULT_WAIT_TIMEOUT
        )
        self.short_wait_timeout = get_config(
            "ui.timeouts.short_wait", self.SHORT_WAIT_TIMEOUT
        )

        # Dialogs are queued rather than auto-dismissed so switch_to_alert can return them
        dialog_queue_for(page)

    @property
    def _dialogs(self) -> DialogQueue:
        return dialog_queue_for(self._page)

    @property
    def page_url(self) -> str:
        """Expected URL given at construction."""
        return self._page_url

    @property
    def driver(self) -> Page:
        """Window (Playwright page) currently in focus."""
        return self._page

    @property
    def log(self) -> Any:
        return self._log

    # =========================================================================
    # Navigation and Lookup
    # =========================================================================

    @allure.step("Open URL: {url}")
    def open_url(self, url: str) -> None:
        """Opens page with the given URL."""
        self._page.goto(url)
        self._scope = self._page

    def find(self, locator: str) -> ElementHandle:
        """
        Finds the first element matching the locator in the current frame.

        Raises:
            ElementNotFoundError: When nothing matches
        """
        element = self._scope.query_selector(locator)
        if element is None:
            raise ElementNotFoundError(locator)
        return element

    def find_all(self, locator: str) -> List[ElementHandle]:
        """Finds all elements matching the locator; empty list when none do."""
        return self._scope.query_selector_all(locator)

    # =========================================================================
    # Element Interactions
    # =========================================================================

    @allure.step("Click: {locator}")
    def click(self, locator: str) -> None:
        """Clicks on element with given locator once it is visible."""
        self.wait_for_visibility_of(locator, self.short_wait_timeout)
        self._click(self.find(locator))

    def click_no_wait(self, locator: str) -> None:
        self._click(self.find(locator))

    def _click(self, element: ElementHandle) -> None:
        # A dialog opened by the click freezes the page, so Playwright never
        # sees the click finish. The bounded click then times out and the
        # dialog is left queued for switch_to_alert.
        dialogs = self._dialogs
        opened_before = dialogs.opened
        try:
            element.click(timeout=_to_ms(self.short_wait_timeout))
        except PlaywrightTimeoutError:
            if dialogs.opened == opened_before:
                raise
            self._log.debug("Click opened a dialog, leaving it open for switch_to_alert")

    @allure.step("Type into: {locator}")
    def type(self, text: str, locator: str) -> None:
        """Types given text into element with the given locator."""
        self.wait_for_visibility_of(locator, self.short_wait_timeout)
        self.find(locator).type(text)

    def get_message(self, locator: str) -> str:
        """Gets rendered text of the element with the given locator."""
        self.wait_for_visibility_of(locator, self.short_wait_timeout)
        return self.find(locator).inner_text()

    def press_key(self, locator: str, key: str) -> None:
        """Presses key on the element with the given locator, without waiting."""
        self.find(locator).press(key)

    def press_key_with_actions(self, key: str) -> None:
        """Presses key on the page keyboard, not targeted at any element."""
        self._log.info(f"Pressing {key} using keyboard")
        self._page.keyboard.press(key)

    def hover_over_element(self, element: ElementHandle) -> None:
        """Moves the mouse over the element and clicks it."""
        element.hover()
        element.click()

    def perform_drag_and_drop(self, from_locator: str, to_locator: str) -> None:
        """Drags 'from' element onto 'to' element using synthesized HTML5 events."""
        source = self.find(from_locator)
        destination = self.find(to_locator)
        self._scope.evaluate(DRAG_AND_DROP_SCRIPT, [source, destination])

    def scroll_to_bottom(self) -> None:
        self._log.info("Scrolling to the bottom of the page.")
        self._scope.evaluate(SCROLL_TO_BOTTOM_SCRIPT)

    # =========================================================================
    # Wait Utilities
    # =========================================================================

    def wait_for_visibility_of(
        self,
        locator: str,
        timeout: Optional[float] = None,
    ) -> ElementHandle:
        """
        Wait for the element with given locator to be present and visible.

        If the element (or its document) is replaced while waiting, the whole
        wait is started again, up to STALE_RETRY_ATTEMPTS attempts in total.

        Args:
            locator: Playwright selector
            timeout: Timeout in seconds, default_wait_timeout when omitted

        Returns:
            The visible element

        Raises:
            WaitTimeoutError: Element did not become visible in time
            StaleElementError: Element went stale on every attempt
        """
        if timeout is None:
            timeout = self.default_wait_timeout

        attempt = 0
        while True:
            attempt += 1
            try:
                return self._scope.wait_for_selector(
                    locator, state="visible", timeout=_to_ms(timeout)
                )
            except PlaywrightTimeoutError as e:
                raise WaitTimeoutError(
                    f"Element {locator} was not visible after {timeout}s", timeout
                ) from e
            except PlaywrightError as e:
                if not is_stale_error(e):
                    raise
                if attempt >= self.STALE_RETRY_ATTEMPTS:
                    raise StaleElementError(
                        f"Element {locator} went stale on {attempt} attempts: {e}"
                    ) from e
                self._log.debug(
                    f"Stale element while waiting for {locator}, "
                    f"retrying ({attempt}/{self.STALE_RETRY_ATTEMPTS})"
                )

    # =========================================================================
    # Alerts, Windows and Frames
    # =========================================================================

    def switch_to_alert(self, timeout: Optional[float] = None) -> Dialog:
        """
        Waits for an alert to be present and returns it.

        The dialog stays open until the caller accepts or dismisses it, and
        the page does not respond to other actions meanwhile.

        Raises:
            WaitTimeoutError: No dialog appeared within the timeout
        """
        if timeout is None:
            timeout = self.short_wait_timeout

        deadline = time.monotonic() + timeout
        dialogs = self._dialogs
        while not dialogs:
            if time.monotonic() >= deadline:
                raise WaitTimeoutError(f"No alert appeared within {timeout}s", timeout)
            # wait_for_timeout lets Playwright dispatch the dialog event
            self._page.wait_for_timeout(self.POLL_INTERVAL * 1000)
        return dialogs.pop()

    @allure.step("Switch to window: {expected_title}")
    def switch_to_window_with_title(self, expected_title: str, strict: bool = False) -> None:
        """
        Switches to the first other window whose title equals expected_title.

        Windows are examined in opening order, skipping the one in focus. When
        none matches, focus is left on the last window examined; with
        ``strict=True`` a WindowNotFoundError is raised instead of a warning.
        """
        first_window = self._page
        for window in list(first_window.context.pages):
            if window is first_window:
                continue
            self._activate(window)
            if self.get_current_page_title() == expected_title:
                return

        if strict:
            raise WindowNotFoundError(f"No window titled '{expected_title}'")
        self._log.warning(
            f"No window titled '{expected_title}' found, staying on {self._page.url}"
        )

    def _activate(self, window: Page) -> None:
        self._page = window
        self._scope = window
        dialog_queue_for(window)
        window.bring_to_front()

    @allure.step("Switch to frame: {frame_locator}")
    def switch_to_frame(self, frame_locator: str) -> None:
        """Switches lookups into the iframe with the given locator."""
        frame = self.find(frame_locator).content_frame()
        if frame is None:
            raise PageObjectError(f"Element {frame_locator} is not a frame")
        self._scope = frame

    def switch_to_default_content(self) -> None:
        """Leaves any frame and returns lookups to the window's top document."""
        self._scope = self._page

    # =========================================================================
    # Page Information
    # =========================================================================

    def get_page_url(self) -> str:
        return self._page_url

    def get_current_url(self) -> str:
        """Gets URL of the window in focus from the browser."""
        return self._page.url

    def compare_url_to_expected_url(self, expected_url: str) -> bool:
        """Compares current browser URL to the given URL, ignoring case."""
        return self.get_current_url().casefold() == expected_url.casefold()

    def get_current_page_title(self) -> str:
        return self._page.title()

    def get_current_page_source(self) -> str:
        return self._page.content()

    # =========================================================================
    # Cookies
    # =========================================================================

    def set_cookie(self, cookie: Dict[str, Any]) -> None:
        """
        Adds cookie to the browser session.

        Args:
            cookie: Playwright cookie dict; needs at least ``name`` and
                ``value``. Scoped to the current page URL when it carries
                neither ``url`` nor ``domain``.
        """
        self._log.info(f"Adding cookie {cookie['name']}")
        cookie = dict(cookie)
        if "url" not in cookie and "domain" not in cookie:
            cookie["url"] = self._page.url
        self._page.context.add_cookies([cookie])
        self._log.info("Cookie added")

    def get_cookie(self, name: str) -> str:
        """Gets cookie value visible to the current page using cookie name."""
        self._log.info(f"Getting value of cookie {name}")
        current_url = self._page.url
        urls = [current_url] if current_url.startswith("http") else []
        for cookie in self._page.context.cookies(urls):
            if cookie["name"] == name:
                return cookie["value"]
        raise CookieNotFoundError(f"Cookie not found: {name}")


def _to_ms(seconds: float) -> float:
    # Playwright reads timeout=0 as "wait forever"
    return max(seconds * 1000, 1)


__all__ = [
    "BasePageObject",
]
