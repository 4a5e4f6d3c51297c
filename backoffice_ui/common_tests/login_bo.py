"""Shared back office login step."""

from __future__ import annotations

from typing import Any

from playwright.sync_api import Page

from ..errors import UIError
from ..pages.dashboard import dashboard_page
from ..pages.login import login_page
from ..utils.config import UIConfig, get_config
from ..utils.test_context import add_context_item

BASE_CONTEXT = "loginBO"


def login_bo(scenario: Any, tab: Page, config: UIConfig | None = None) -> None:
    """Authenticate *tab* to the back office and land on the dashboard."""
    config = config or get_config()
    add_context_item(scenario, "testIdentifier", "loginBO", BASE_CONTEXT)

    login_page.go_to_login_page(tab, config.base_url)
    login_page.login(tab, config.login_email, config.login_password)

    page_title = dashboard_page.get_page_title(tab)
    if dashboard_page.page_title not in page_title:
        raise UIError(f"Expected to land on '{dashboard_page.page_title}', got '{page_title}'")


def logout_bo(scenario: Any, tab: Page) -> None:
    add_context_item(scenario, "testIdentifier", "logoutBO", BASE_CONTEXT)
    dashboard_page.click(tab, dashboard_page.user_profile_icon)
    dashboard_page.click_and_wait_for_navigation(tab, dashboard_page.header_logout_link)
    login_page.wait_for_visible_selector(tab, login_page.email_input)
