"""
================================================================================
Dialog Queue
================================================================================

Holds the JavaScript dialogs (alert, confirm, prompt) a Playwright page opens
until a page object picks them up with ``switch_to_alert``.

There is one queue per page, shared by every page object driving that page,
so a dialog is handed out exactly once no matter how many page objects wrap
the page.

================================================================================
"""

from collections import deque
from typing import Deque, Optional
from weakref import WeakKeyDictionary

from loguru import logger
from playwright.sync_api import Dialog, Page


class DialogQueue:
    """
    FIFO of open dialogs for a single page.

    ``opened`` counts every dialog queued so far, so callers can tell
    whether an action they just performed opened one.
    """

    def __init__(self, page: Page):
        self._pending: Deque[Dialog] = deque()
        self.opened = 0
        page.on("dialog", self._on_dialog)

    def _on_dialog(self, dialog: Dialog) -> None:
        if dialog.type == "beforeunload":
            # An open beforeunload dialog holds up the navigation behind it
            logger.debug("Accepting beforeunload dialog")
            dialog.accept()
            return
        self.opened += 1
        logger.debug(f"Queued {dialog.type} dialog: {dialog.message}")
        self._pending.append(dialog)

    def pop(self) -> Optional[Dialog]:
        """Oldest unclaimed dialog, or None."""
        if not self._pending:
            return None
        return self._pending.popleft()

    def __len__(self) -> int:
        return len(self._pending)


_queues: "WeakKeyDictionary[Page, DialogQueue]" = WeakKeyDictionary()


def dialog_queue_for(page: Page) -> DialogQueue:
    """Returns the page's dialog queue, registering the listener on first use."""
    queue = _queues.get(page)
    if queue is None:
        queue = _queues[page] = DialogQueue(page)
    return queue


__all__ = [
    "DialogQueue",
    "dialog_queue_for",
]
