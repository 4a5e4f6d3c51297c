"""Orders listing page object."""

from __future__ import annotations

from playwright.sync_api import Page

from ..bo_base_page import BOBasePage


class OrdersPage(BOBasePage):
    """Symfony grid listing every order."""

    def __init__(self) -> None:
        super().__init__()

        self.page_title = "Orders"

        self.grid_panel = "#order_grid_panel"
        self.grid_header_title = f"{self.grid_panel} h3.card-header-title"
        self.grid_table = "#order_grid_table"
        self.grid_filter_search_button = f"{self.grid_table} .grid-search-button"
        self.grid_filter_reset_button = f"{self.grid_table} .grid-reset-button"

    def grid_filter_column(self, column: str) -> str:
        return f"{self.grid_table} #order_{column}"

    def view_row_link(self, row: int) -> str:
        return f"{self.grid_table_row(row)} a.grid-view-row-link"

    def filter_orders(self, tab: Page, filter_type: str, column: str, value: str) -> None:
        self.filter_table(tab, filter_type, column, value)

    def go_to_order(self, tab: Page, row: int) -> None:
        self.click_and_wait_for_navigation(tab, self.view_row_link(row))


orders_page = OrdersPage()
