"""Back office base page: global chrome, menu navigation and grid helpers."""

from __future__ import annotations

import logging
import re

from playwright.sync_api import Page

from .base_page import BasePage

logger = logging.getLogger("backoffice-ui.pom.bo")


def css_escape(identifier: str) -> str:
    """Escape characters that are not valid in a CSS class or id token."""
    return re.sub(r"([^\w-])", r"\\\1", identifier)


class BOBasePage(BasePage):
    """Selectors and actions available on every back office screen.

    Grid pages set the ``grid_*`` selectors in their constructor; the grid
    helpers below then work unchanged for legacy and Symfony listings.
    """

    def __init__(self) -> None:
        super().__init__()

        # Header
        self.page_title_header = "h1.title, .page-title"
        self.user_profile_icon = "#employee_infos, #header_employee_box"
        self.header_logout_link = "#header_logout"

        # Symfony debug toolbar
        self.sf_toolbar_main_content_div = "div[id*='sfToolbarMainContent']"
        self.sf_close_toolbar_link = "a[id*='sfToolbarHideButton']"

        # Side menu: dashboard
        self.dashboard_link = "#tab-AdminDashboard"

        # Side menu: orders
        self.orders_parent_link = "li#subtab-AdminParentOrders"
        self.orders_link = "#subtab-AdminOrders"
        self.invoices_link = "#subtab-AdminInvoices"
        self.credit_slips_link = "#subtab-AdminSlip"
        self.delivery_slips_link = "#subtab-AdminDeliverySlip"

        # Side menu: customers
        self.customers_parent_link = "li#subtab-AdminParentCustomer"
        self.customers_link = "#subtab-AdminCustomers"
        self.addresses_link = "#subtab-AdminAddresses"

        # Side menu: shop parameters
        self.shop_parameters_parent_link = "li#subtab-ShopParameters"
        self.shop_parameters_general_link = "#subtab-AdminParentPreferences"
        self.order_settings_link = "#subtab-AdminParentOrderPreferences"
        self.customer_settings_link = "#subtab-AdminParentCustomerPreferences"

        # Grid selectors, set by listing pages
        self.grid_panel = ""
        self.grid_header_title = ""
        self.grid_table = ""
        self.grid_filter_search_button = ""
        self.grid_filter_reset_button = ""

    # ------------------------------------------------------------------
    # Menu navigation
    # ------------------------------------------------------------------

    def go_to_sub_menu(self, tab: Page, parent_selector: str, link_selector: str) -> None:
        """Open a side menu entry: hover the parent, then follow the child link."""
        logger.info("Opening sub menu %s > %s", parent_selector, link_selector)
        parent = self.wait_for_visible_selector(tab, parent_selector)
        with self._driver_call(parent_selector, self._timeout(None)):
            parent.hover()
        if not self.element_visible(tab, link_selector, 1000):
            # Collapsed sidebar: the child only shows once the parent is clicked.
            self.click(tab, parent_selector)
        self.click_and_wait_for_navigation(tab, link_selector)
        # The sidebar may be collapsed, so only require the active marker in the DOM.
        self.wait_for_attached_selector(tab, f"{link_selector}.link-active")

    def go_to_dashboard_page(self, tab: Page) -> None:
        self.click_and_wait_for_navigation(tab, self.dashboard_link)

    def close_sf_toolbar(self, tab: Page) -> None:
        """Hide the Symfony debug toolbar when the shop runs in dev mode."""
        if self.element_visible(tab, self.sf_toolbar_main_content_div, 1000):
            self.click(tab, self.sf_close_toolbar_link)
            self.wait_for_hidden_selector(tab, self.sf_toolbar_main_content_div)
        else:
            logger.debug("No Symfony toolbar to close")

    # ------------------------------------------------------------------
    # Grid helpers
    # ------------------------------------------------------------------

    def grid_filter_column(self, column: str) -> str:
        """Filter input (or select) of *column* in the grid header."""
        return f"{self.grid_table} [name$='{column}']"

    def grid_table_row(self, row: int) -> str:
        return f"{self.grid_table} tbody tr:nth-child({row})"

    def grid_table_column(self, row: int, column: str) -> str:
        return f"{self.grid_table_row(row)} td.column-{css_escape(column)}"

    def reset_filter(self, tab: Page) -> None:
        """Click the grid reset button when filters are active."""
        if self.element_visible(tab, self.grid_filter_reset_button, 2000):
            self.click_and_wait_for_navigation(tab, self.grid_filter_reset_button)
        self.wait_for_visible_selector(tab, self.grid_filter_search_button)

    def get_number_of_element_in_grid(self, tab: Page) -> int:
        """Read the row count shown in the grid header, e.g. ``Titles 5``."""
        return self.get_number_from_text(tab, self.grid_header_title)

    def reset_and_get_number_of_lines(self, tab: Page) -> int:
        self.reset_filter(tab)
        return self.get_number_of_element_in_grid(tab)

    def filter_table(self, tab: Page, filter_type: str, column: str, value: str) -> None:
        """Filter the grid on *column* and submit.

        *filter_type* is ``"input"`` for text filters or ``"select"`` for
        drop-down filters.
        """
        selector = self.grid_filter_column(column)
        if filter_type == "input":
            self.set_value(tab, selector, value)
        elif filter_type == "select":
            self.select_by_visible_text(tab, selector, value)
        else:
            raise ValueError(f"Filter type '{filter_type}' is not supported")
        self.click_and_wait_for_navigation(tab, self.grid_filter_search_button)

    def get_text_column(self, tab: Page, row: int, column: str) -> str:
        return self.get_text_content(tab, self.grid_table_column(row, column))
