"""BO - Orders - Invoices : Generate PDF file by status."""

from __future__ import annotations

import pytest

from backoffice_ui.common_tests.login_bo import login_bo
from backoffice_ui.data.order_statuses import Statuses
from backoffice_ui.pages.dashboard import dashboard_page
from backoffice_ui.pages.orders.invoices import invoices_page
from backoffice_ui.pages.orders.orders_page import orders_page
from backoffice_ui.pages.orders.view_order import view_order_page
from backoffice_ui.utils.files import delete_file, does_file_exist
from backoffice_ui.utils.test_context import add_context_item

pytestmark = pytest.mark.e2e

BASE_CONTEXT = "functional_BO_orders_invoices_generateInvoiceByStatus"

ORDERS_TO_EDIT = [
    (1, Statuses.shipped.status),
    (2, Statuses.payment_accepted.status),
]


def test_login_bo(request, tab):
    login_bo(request, tab)


# Create 2 invoices by changing the order status


@pytest.mark.parametrize("index, order_row, status", [(i, *order) for i, order in enumerate(ORDERS_TO_EDIT, 1)])
def test_update_order_status(request, tab, index, order_row, status):
    add_context_item(request, "testIdentifier", f"goToOrdersPage{index}", BASE_CONTEXT)
    dashboard_page.go_to_sub_menu(tab, dashboard_page.orders_parent_link, dashboard_page.orders_link)
    orders_page.close_sf_toolbar(tab)
    assert orders_page.page_title in orders_page.get_page_title(tab)

    add_context_item(request, "testIdentifier", f"goToOrderPage{index}", BASE_CONTEXT)
    orders_page.go_to_order(tab, order_row)
    assert view_order_page.page_title in view_order_page.get_page_title(tab)

    add_context_item(request, "testIdentifier", f"updateOrderStatus{index}", BASE_CONTEXT)
    result = view_order_page.modify_order_status(tab, status)
    assert result == status


# Generate invoice by status


def test_go_to_invoices_page(request, tab):
    add_context_item(request, "testIdentifier", "goToInvoicesPage", BASE_CONTEXT)

    view_order_page.go_to_sub_menu(tab, view_order_page.orders_parent_link, view_order_page.invoices_link)

    assert invoices_page.page_title in invoices_page.get_page_title(tab)


def test_error_when_no_status_selected(request, tab):
    add_context_item(request, "testIdentifier", "checkNoSelectedStatusMessageError", BASE_CONTEXT)

    text_message = invoices_page.generate_pdf_by_status_and_fail(tab)

    assert text_message == invoices_page.error_message_when_not_select_status


def test_error_when_no_invoice_in_status(request, tab):
    add_context_item(request, "testIdentifier", "checkNoInvoiceMessageError", BASE_CONTEXT)

    invoices_page.choose_status(tab, Statuses.canceled.status)
    text_message = invoices_page.generate_pdf_by_status_and_fail(tab)

    assert text_message == invoices_page.error_message_when_generate_file_by_status


def test_generate_invoice_for_two_statuses(request, tab):
    add_context_item(request, "testIdentifier", "selectStatusesAndCheckInvoiceExistence", BASE_CONTEXT)

    invoices_page.choose_status(tab, Statuses.payment_accepted.status)
    invoices_page.choose_status(tab, Statuses.shipped.status)
    file_path = invoices_page.generate_pdf_by_status_and_download(tab)

    assert does_file_exist(file_path) is True
    delete_file(file_path)


def test_generate_invoice_for_one_status(request, tab):
    add_context_item(request, "testIdentifier", "selectOneStatusAndCheckInvoiceExistence", BASE_CONTEXT)

    invoices_page.reload_page(tab)
    invoices_page.choose_status(tab, Statuses.payment_accepted.status)
    file_path = invoices_page.generate_pdf_by_status_and_download(tab)

    assert does_file_exist(file_path) is True
    delete_file(file_path)
