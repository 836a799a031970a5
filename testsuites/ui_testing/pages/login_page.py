"""
================================================================================
Login Page Object
================================================================================

Example page object built on BasePageObject.

NOTE:
  Selectors are intentionally generic. Real projects should prefer stable
  `data-testid` attributes.

================================================================================
"""

from __future__ import annotations

import os
from typing import Optional

import allure

from testsuites.ui_testing.framework.page_base import BasePageObject


class LoginPage(BasePageObject):
    """Login page object."""

    USERNAME_INPUT = "#username"
    PASSWORD_INPUT = "#password"
    LOGIN_BUTTON = "button[type='submit']"
    ERROR_MESSAGE = "[data-testid='error-message'], .error-message"

    @allure.step("Open login page")
    def open(self) -> "LoginPage":
        """Navigate to the login page."""
        self.open_url(self.page_url)
        self.log.info(f"Login page is opened: {self.page_url}")
        return self

    @allure.step("Login (username={username})")
    def login(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> None:
        """
        Perform login.

        Args:
            username: Defaults to `UI_USERNAME` env var.
            password: Defaults to `UI_PASSWORD` env var.
        """
        if username is None:
            username = os.getenv("UI_USERNAME", "demo_user")
        if password is None:
            password = os.getenv("UI_PASSWORD", "demo_password")

        self.log.info(f"Executing login with username [{username}]")
        self.type(username, self.USERNAME_INPUT)
        self.type(password, self.PASSWORD_INPUT)
        self.click(self.LOGIN_BUTTON)

    def get_error_message(self) -> str:
        return self.get_message(self.ERROR_MESSAGE)
