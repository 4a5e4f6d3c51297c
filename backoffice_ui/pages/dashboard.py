"""Dashboard page object."""

from __future__ import annotations

from playwright.sync_api import Page

from .bo_base_page import BOBasePage


class DashboardPage(BOBasePage):
    """Landing screen after login."""

    def __init__(self) -> None:
        super().__init__()

        self.page_title = "Dashboard"
        self.dashboard_container = "#dashboard"

    def is_loaded(self, tab: Page, timeout: float | None = None) -> bool:
        return self.element_visible(tab, self.dashboard_container, self._timeout(timeout))


dashboard_page = DashboardPage()
