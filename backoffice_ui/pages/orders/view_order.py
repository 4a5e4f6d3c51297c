"""View order page object: status actions, documents and alerts."""

from __future__ import annotations

import logging

from playwright.sync_api import Page

from ..base_page import collapse_whitespace
from ..bo_base_page import BOBasePage

logger = logging.getLogger("backoffice-ui.pom.orders")


class ViewOrderPage(BOBasePage):
    """Header actions of the view/edit order page."""

    def __init__(self) -> None:
        super().__init__()

        self.page_title = "Order"
        self.partial_refund_validation_message = "A partial refund was successfully created."
        self.successful_add_product_message = "The product was successfully added."
        self.successful_delete_product_message = "The product was successfully removed."
        self.error_minimum_quantity_message = 'Minimum quantity of "3" must be added'
        self.error_add_same_product = "This product is already in your order, please edit the quantity instead."
        self.no_available_documents_message = "There is no available document"
        self.update_successful_message = "Update successful"
        self.comment_successful_message = "Comment successfully added."
        self.validation_send_message = "The message was successfully sent to the customer."
        self.error_assign_same_status = "The order has already been assigned this status."
        self.discount_must_be_number_error_message = "Discount value must be a number."
        self.invalid_percent_value_error_message = "Percent value cannot exceed 100."
        self.percent_value_not_positive_error_message = "Percent value must be greater than 0."
        self.discount_cannot_exceed_total_error_message = (
            "Discount value cannot exceed the total price of this order."
        )

        self.alert_block = "div.alert[role='alert'] div.alert-text"

        # Order actions
        self.order_statuses_select = "#update_order_status_action_input"
        self.update_status_button = "#update_order_status_action_btn"
        self.view_invoice_button = "form.order-actions-invoice a[data-role='view-invoice']"
        self.view_delivery_slip_button = "form.order-actions-delivery a[data-role='view-delivery-slip']"
        self.partial_refund_button = "button.partial-refund-display"
        self.return_products_button = "#order-view-page button.return-product-display"

    def error_add_same_product_in_invoice(self, invoice: str) -> str:
        return f"This product is already in the invoice #{invoice}, please edit the quantity instead."

    # ------------------------------------------------------------------
    # Button states
    # ------------------------------------------------------------------

    def is_update_status_button_disabled(self, tab: Page) -> bool:
        return self.element_visible(tab, f"{self.update_status_button}[disabled]", 1000)

    def is_view_invoice_button_visible(self, tab: Page) -> bool:
        return self.element_visible(tab, self.view_invoice_button, 1000)

    def is_partial_refund_button_visible(self, tab: Page) -> bool:
        return self.element_visible(tab, self.partial_refund_button, 1000)

    def is_delivery_slip_button_visible(self, tab: Page) -> bool:
        return self.element_visible(tab, self.view_delivery_slip_button, 1000)

    def is_return_products_button_visible(self, tab: Page) -> bool:
        return self.element_visible(tab, self.return_products_button, 2000)

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def select_order_status(self, tab: Page, status: str) -> None:
        self.select_by_visible_text(tab, self.order_statuses_select, status)

    def get_order_status(self, tab: Page) -> str:
        return self.get_text_content(
            tab,
            f"{self.order_statuses_select} option[selected='selected']",
            wait_for_selector=False,
        )

    def modify_order_status(self, tab: Page, status: str) -> str:
        """Switch the order to *status* and return the status shown afterwards.

        When the order already has *status* nothing is submitted and the
        current status is returned as is.
        """
        actual_status = self.get_order_status(tab)
        if status == actual_status:
            logger.info("Order already in status '%s', nothing to update", status)
            return actual_status

        self.select_order_status(tab, status)
        self.click_and_wait_for_navigation(tab, self.update_status_button)
        return self.get_order_status(tab)

    def does_status_exist(self, tab: Page, status_name: str) -> bool:
        with self._driver_call(self.order_statuses_select, self._timeout(None)):
            options = tab.locator(f"{self.order_statuses_select} option").all_text_contents()
        return status_name in [collapse_whitespace(option) for option in options]

    # ------------------------------------------------------------------
    # Documents
    # ------------------------------------------------------------------

    def view_invoice(self, tab: Page) -> str:
        """Download the order invoice and return its path."""
        return self.click_and_wait_for_download(tab, self.view_invoice_button)

    def view_delivery_slip(self, tab: Page) -> str:
        return self.click_and_wait_for_download(tab, self.view_delivery_slip_button)

    def get_alert_text(self, tab: Page) -> str:
        return self.get_text_content(tab, self.alert_block)


view_order_page = ViewOrderPage()
