"""Back office login page object."""

from __future__ import annotations

import logging

from playwright.sync_api import Page

from .base_page import BasePage

logger = logging.getLogger("backoffice-ui.pom.login")


class LoginPage(BasePage):
    """Page object for the back office authentication screen."""

    def __init__(self) -> None:
        super().__init__()

        self.page_title = "PrestaShop"
        self.login_error_text = "The employee does not exist, or the password provided is incorrect."

        self.email_input = "#email"
        self.password_input = "#passwd"
        self.submit_login_button = "#submit_login"
        self.alert_danger_div = "#error"
        self.alert_danger_text_block = f"{self.alert_danger_div} p"

    def go_to_login_page(self, tab: Page, base_url: str) -> None:
        self.go_to(tab, base_url)
        self.wait_for_visible_selector(tab, self.email_input)

    def login(self, tab: Page, email: str, password: str, wait_for_navigation: bool = True) -> None:
        """Fill both fields and submit."""
        logger.info("Logging in as %s", email)
        self.set_value(tab, self.email_input, email)
        self.set_value(tab, self.password_input, password)
        if wait_for_navigation:
            self.click_and_wait_for_navigation(tab, self.submit_login_button)
        else:
            self.click(tab, self.submit_login_button)

    def get_login_error(self, tab: Page) -> str:
        return self.get_text_content(tab, self.alert_danger_text_block)


login_page = LoginPage()
