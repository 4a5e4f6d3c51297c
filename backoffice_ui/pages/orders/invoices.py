"""Orders > Invoices page object."""

from __future__ import annotations

import logging

from playwright.sync_api import Page

from ..bo_base_page import BOBasePage

logger = logging.getLogger("backoffice-ui.pom.invoices")


class InvoicesPage(BOBasePage):
    """Invoice generation by date or by order status, and invoice options.

    Success and failure of a generation are separate operations so the
    caller states which outcome it expects.
    """

    def __init__(self) -> None:
        super().__init__()

        self.page_title = "Invoices"
        self.error_message_when_generate_file_by_date = "No invoice has been found for this period."
        self.error_message_when_generate_file_by_status = "No invoice has been found for this status."
        self.error_message_when_not_select_status = "You must select at least one order status."
        self.successful_update_message = "Update successful"

        # By date
        self.generate_by_date_form = "form[name='generate_by_date']"
        self.date_from_input = "#generate_by_date_date_from"
        self.date_to_input = "#generate_by_date_date_to"
        self.generate_pdf_by_date_button = "#generate-invoices-by-date-submit-button"

        # By status
        self.generate_by_status_form = "form[name='generate_by_status']"
        self.generate_pdf_by_status_button = "#generate-invoices-by-status-submit-button"

        # Options
        self.invoice_options_form = "form[name='form']"
        self.invoice_prefix_input = "#form_invoice_prefix_1"
        self.save_invoice_options_button = "#save-invoices-options-button"

    def invoice_options_enable(self, enabled: bool) -> str:
        return f"#form_enable_invoices_{1 if enabled else 0}"

    def status_order_state_name(self, status: str) -> str:
        escaped = status.replace("\\", "\\\\").replace('"', '\\"')
        return f'span.status-name:text-is("{escaped}")'

    def status_order_state_label(self, status: str) -> str:
        # The label also holds a badge with the invoice count.
        return f"{self.generate_by_status_form} label:has({self.status_order_state_name(status)})"

    def status_order_state_checkbox(self, status: str) -> str:
        return f"{self.status_order_state_label(status)} input[type='checkbox']"

    # ------------------------------------------------------------------
    # Generate by date
    # ------------------------------------------------------------------

    def set_dates(self, tab: Page, date_from: str = "", date_to: str = "") -> None:
        if date_from:
            self.set_value(tab, self.date_from_input, date_from)
        if date_to:
            self.set_value(tab, self.date_to_input, date_to)

    def generate_pdf_by_date_and_download(self, tab: Page, date_from: str = "", date_to: str = "") -> str:
        self.set_dates(tab, date_from, date_to)
        return self.click_and_wait_for_download(tab, self.generate_pdf_by_date_button)

    def generate_pdf_by_date_and_fail(self, tab: Page, date_from: str = "", date_to: str = "") -> str:
        self.set_dates(tab, date_from, date_to)
        self.click_and_wait_for_navigation(tab, self.generate_pdf_by_date_button)
        return self.get_alert_danger_block_paragraph_content(tab)

    # ------------------------------------------------------------------
    # Generate by status
    # ------------------------------------------------------------------

    def choose_status(self, tab: Page, status: str) -> None:
        """Tick the checkbox of *status* in the generate-by-status form."""
        logger.info("Choosing order status '%s'", status)
        self.set_checkbox(tab, self.status_order_state_checkbox(status), True)

    def generate_pdf_by_status_and_download(self, tab: Page) -> str:
        return self.click_and_wait_for_download(tab, self.generate_pdf_by_status_button)

    def generate_pdf_by_status_and_fail(self, tab: Page) -> str:
        self.click_and_wait_for_navigation(tab, self.generate_pdf_by_status_button)
        return self.get_alert_danger_block_paragraph_content(tab)

    # ------------------------------------------------------------------
    # Invoice options
    # ------------------------------------------------------------------

    def enable_invoices(self, tab: Page, enabled: bool = True) -> None:
        self.set_checkbox(tab, self.invoice_options_enable(enabled), True)

    def set_invoice_prefix(self, tab: Page, prefix: str) -> None:
        self.set_value(tab, self.invoice_prefix_input, prefix)

    def save_invoice_options(self, tab: Page) -> str:
        self.click_and_wait_for_navigation(tab, self.save_invoice_options_button)
        return self.get_alert_success_block_paragraph_content(tab)


invoices_page = InvoicesPage()
