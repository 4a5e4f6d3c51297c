"""Customer Settings > Titles listing page object."""

from __future__ import annotations

import logging

from playwright.sync_api import Page

from ...bo_base_page import BOBasePage

logger = logging.getLogger("backoffice-ui.pom.titles")

# Legacy list columns, by position in the table row.
TITLE_COLUMNS = {
    "id_gender": 2,
    "b!name": 3,
    "type": 4,
    "image": 5,
}


class TitlesPage(BOBasePage):
    """Legacy (AdminGenders) grid of customer titles."""

    def __init__(self) -> None:
        super().__init__()

        self.page_title = "Titles"
        self.successful_creation_message = "Successful creation"
        self.successful_update_message = "Successful update"
        self.successful_delete_message = "Successful deletion"

        # Legacy pages render a single alert block without a paragraph.
        self.alert_success_block_paragraph = "#content div.alert.alert-success"
        self.alert_danger_block_paragraph = "#content div.alert.alert-danger"

        self.add_new_title_link = "#page-header-desc-gender-new_gender"

        self.grid_panel = "#form-gender"
        self.grid_header_title = f"{self.grid_panel} .panel-heading .badge"
        self.grid_table = "#table-gender"
        self.grid_filter_search_button = "#submitFilterButtongender"
        self.grid_filter_reset_button = "button[name='submitResetgender']"

    def grid_filter_column(self, column: str) -> str:
        return f"{self.grid_table} [name='genderFilter_{column}']"

    def grid_table_column(self, row: int, column: str) -> str:
        position = TITLE_COLUMNS.get(column)
        if position is None:
            return super().grid_table_column(row, column)
        return f"{self.grid_table_row(row)} td:nth-child({position})"

    def edit_row_link(self, row: int) -> str:
        return f"{self.grid_table_row(row)} a.edit"

    def actions_dropdown_toggle(self, row: int) -> str:
        return f"{self.grid_table_row(row)} button.dropdown-toggle"

    def delete_row_link(self, row: int) -> str:
        return f"{self.grid_table_row(row)} a.delete"

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def go_to_add_new_title(self, tab: Page) -> None:
        self.click_and_wait_for_navigation(tab, self.add_new_title_link)

    def go_to_edit_title_page(self, tab: Page, row: int) -> None:
        self.click_and_wait_for_navigation(tab, self.edit_row_link(row))

    def filter_titles(self, tab: Page, filter_type: str, column: str, value: str) -> None:
        self.filter_table(tab, filter_type, column, value)

    def delete_title(self, tab: Page, row: int) -> str:
        """Delete the title on *row* and return the alert text."""
        logger.info("Deleting title on row %d", row)
        self.click(tab, self.actions_dropdown_toggle(row))
        self.wait_for_visible_selector(tab, self.delete_row_link(row))
        # Deletion is confirmed through a JavaScript confirm() dialog.
        self.dialog_listener(tab, accept=True)
        self.click_and_wait_for_navigation(tab, self.delete_row_link(row))
        return self.get_alert_success_block_paragraph_content(tab)


titles_page = TitlesPage()
