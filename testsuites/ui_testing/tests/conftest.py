"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for real-browser page object tests.

Key Features:
- Session-scoped browser (skipped when no Playwright browser is installed)
- Function-scoped isolated context serving an in-memory test site
- Page object fixtures
- Page state attached to Allure on failure

================================================================================
"""

from typing import Generator
from urllib.parse import urlparse

import pytest
from playwright.sync_api import BrowserContext, Page, Route

from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.page_base import BasePageObject
from testsuites.ui_testing.pages.login_page import LoginPage
from uiauto_tools.report_tools import attach_page_state


BASE_URL = "https://app.test"


LOGIN_HTML = """
<!DOCTYPE html>
<html>
<head><title>Login</title></head>
<body>
  <form id="login-form">
    <input id="username" name="username" />
    <input id="password" name="password" type="password" />
    <button type="submit">Log In</button>
  </form>
  <div class="error-message" style="display: none"></div>
  <script>
    document.querySelector('#login-form').addEventListener('submit', function (e) {
      e.preventDefault();
      var user = document.querySelector('#username').value;
      var pass = document.querySelector('#password').value;
      if (user === 'test_user' && pass === 'test_password') {
        window.location.href = '/dashboard';
      } else {
        var error = document.querySelector('.error-message');
        error.textContent = 'Invalid credentials';
        error.style.display = 'block';
      }
    });
  </script>
</body>
</html>
"""

DASHBOARD_HTML = """
<!DOCTYPE html>
<html>
<head><title>Dashboard</title></head>
<body><h1 id="welcome">Welcome back</h1></body>
</html>
"""

REPORT_HTML = """
<!DOCTYPE html>
<html>
<head><title>Report</title></head>
<body><h1>Quarterly report</h1></body>
</html>
"""

WIDGETS_HTML = """
<!DOCTYPE html>
<html>
<head><title>Widgets</title></head>
<body>
  <div id="delayed" style="display: none">Ready</div>
  <button id="alert-button" onclick="alert('Saved')">Save</button>
  <button id="delayed-alert-button" onclick="setTimeout(function () { alert('Saved later'); }, 100)">Save later</button>
  <button id="confirm-button" onclick="document.querySelector('#confirm-state').textContent = confirm('Delete?') ? 'confirmed' : 'cancelled'">Delete</button>
  <span id="confirm-state">none</span>
  <a id="open-report" href="#" onclick="window.open('/report'); return false;">Open report</a>
  <iframe id="editor-frame" srcdoc="<input id='inner' />"></iframe>

  <input id="key-input" />
  <span id="last-key"></span>

  <div id="card" draggable="true">Card 1</div>
  <div id="column">Done</div>
  <span id="drop-log">empty</span>
  <span id="drag-state">idle</span>

  <button id="hover-target">Menu</button>
  <span id="hover-state">none</span>
  <span id="click-state">none</span>

  <div style="height: 3000px"></div>
  <div id="footer">Footer</div>

  <script>
    setTimeout(function () {
      document.querySelector('#delayed').style.display = 'block';
    }, 300);

    document.addEventListener('keydown', function (e) {
      document.querySelector('#last-key').textContent = e.key;
    });

    var card = document.querySelector('#card');
    var column = document.querySelector('#column');
    card.addEventListener('dragstart', function (e) {
      e.dataTransfer.setData('text', 'card-1');
    });
    column.addEventListener('drop', function (e) {
      document.querySelector('#drop-log').textContent = 'dropped:' + e.dataTransfer.getData('text');
    });
    card.addEventListener('dragend', function () {
      document.querySelector('#drag-state').textContent = 'ended';
    });

    var hoverTarget = document.querySelector('#hover-target');
    hoverTarget.addEventListener('mouseover', function () {
      document.querySelector('#hover-state').textContent = 'hovered';
    });
    hoverTarget.addEventListener('click', function () {
      document.querySelector('#click-state').textContent = 'clicked';
    });
  </script>
</body>
</html>
"""

SITE = {
    "/login": LOGIN_HTML,
    "/dashboard": DASHBOARD_HTML,
    "/report": REPORT_HTML,
    "/widgets": WIDGETS_HTML,
}


def _serve_site(route: Route) -> None:
    body = SITE.get(urlparse(route.request.url).path)
    if body is None:
        route.fulfill(status=404, content_type="text/plain", body="not found")
    else:
        route.fulfill(status=200, content_type="text/html", body=body)


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def browser_manager() -> Generator[BrowserManager, None, None]:
    """
    Session-scoped browser manager fixture.

    Provides a single browser for all UI tests. UI tests are skipped when
    Playwright cannot launch a browser (e.g. `playwright install` not run).
    """
    manager = BrowserManager()
    try:
        manager.start()
    except Exception as e:
        pytest.skip(f"Playwright browser is not available: {e}")
    yield manager
    manager.close()


@pytest.fixture
def context(browser_manager: BrowserManager) -> Generator[BrowserContext, None, None]:
    """Isolated context serving the in-memory test site under BASE_URL."""
    context = browser_manager.new_context(viewport={"width": 1280, "height": 720})
    context.route(f"{BASE_URL}/**", _serve_site)
    yield context
    context.close()


@pytest.fixture
def page(context: BrowserContext) -> Page:
    return context.new_page()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def login_page(page: Page) -> LoginPage:
    return LoginPage(page, page_url=f"{BASE_URL}/login")


@pytest.fixture
def widgets_page(page: Page) -> BasePageObject:
    """Generic page object opened on the widgets page."""
    widgets = BasePageObject(page, page_url=f"{BASE_URL}/widgets")
    widgets.open_url(widgets.get_page_url())
    return widgets


@pytest.fixture
def test_data():
    return {
        "valid_user": {
            "username": "test_user",
            "password": "test_password",
        },
        "invalid_user": {
            "username": "invalid_user",
            "password": "wrong_password",
        },
    }


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Attach page state of every page object fixture when a UI test fails.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        for name, value in getattr(item, "funcargs", {}).items():
            if isinstance(value, BasePageObject):
                attach_page_state(value, name=name)
