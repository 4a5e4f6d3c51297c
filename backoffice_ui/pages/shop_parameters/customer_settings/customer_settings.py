"""Shop Parameters > Customer Settings page object."""

from __future__ import annotations

from playwright.sync_api import Page

from ...bo_base_page import BOBasePage


class CustomerSettingsPage(BOBasePage):
    def __init__(self) -> None:
        super().__init__()

        self.page_title = "Customers"
        self.successful_update_message = "Update successful"

        self.titles_nav_item_link = "#subtab-AdminGenders"

    def go_to_titles_page(self, tab: Page) -> None:
        self.click_and_wait_for_navigation(tab, self.titles_nav_item_link)


customer_settings_page = CustomerSettingsPage()
