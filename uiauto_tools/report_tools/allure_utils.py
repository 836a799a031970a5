"""
================================================================================
Allure Report Utilities
================================================================================

Attachment helpers that put browser state into Allure reports.

Features:
- Text / HTML / PNG attachment helpers
- One-call capture of a page object's current URL, source and screenshot

================================================================================
"""

from typing import Any

import allure
from loguru import logger


def attach_text(text: str, name: str = "Text") -> None:
    """
    Attach text content to Allure report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_html(html: str, name: str = "HTML") -> None:
    """
    Attach HTML content to Allure report.

    Args:
        html: HTML to attach
        name: Attachment name
    """
    allure.attach(
        html,
        name=name,
        attachment_type=allure.attachment_type.HTML
    )


def attach_png(png: bytes, name: str = "Screenshot") -> None:
    allure.attach(
        png,
        name=name,
        attachment_type=allure.attachment_type.PNG
    )


def attach_page_state(page_object: Any, name: str = "page") -> None:
    """
    Attach current URL, page source and a screenshot of a page object's
    window in focus.

    Each piece is captured independently; a piece the browser cannot
    provide (closed page, open dialog) is logged and skipped.

    Args:
        page_object: BasePageObject instance
        name: Prefix for attachment names
    """
    with allure.step(f"Capture page state: {name}"):
        try:
            attach_text(page_object.get_current_url(), name=f"{name} - URL")
        except Exception as e:
            logger.warning(f"Could not capture URL for {name}: {e}")

        try:
            attach_html(page_object.get_current_page_source(), name=f"{name} - source")
        except Exception as e:
            logger.warning(f"Could not capture page source for {name}: {e}")

        try:
            attach_png(page_object.driver.screenshot(), name=f"{name} - screenshot")
        except Exception as e:
            logger.warning(f"Could not capture screenshot for {name}: {e}")


__all__ = [
    "attach_text",
    "attach_html",
    "attach_png",
    "attach_page_state",
]
