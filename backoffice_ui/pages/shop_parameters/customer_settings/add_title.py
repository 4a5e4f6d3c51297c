"""Add / edit title form page object."""

from __future__ import annotations

import logging

from playwright.sync_api import Page

from ....data.faker.title import TitleFaker
from ...bo_base_page import BOBasePage

logger = logging.getLogger("backoffice-ui.pom.titles")

# Language ids of the demo shop.
LANGUAGE_IDS = {"en": 1, "fr": 2}

GENDER_TYPES = {"Male": 0, "Female": 1, "Neutral": 2}


class AddTitlePage(BOBasePage):
    """Legacy form shared by title creation and edition."""

    def __init__(self) -> None:
        super().__init__()

        self.page_title_create = "Titles > Add new"
        self.page_title_edit = "Titles > Edit"

        # Saving redirects to the titles listing and its legacy alert block.
        self.alert_success_block_paragraph = "#content div.alert.alert-success"
        self.alert_danger_block_paragraph = "#content div.alert.alert-danger"

        self.title_form = "#gender_form"
        self.language_dropdown_button = f"{self.title_form} .translatable-field:visible button.dropdown-toggle"
        self.image_input = "#image"
        self.image_width_input = "#img_width"
        self.image_height_input = "#img_height"
        self.save_title_button = "#gender_form_submit_btn"

    def name_input(self, language_id: int) -> str:
        return f"#name_{language_id}"

    def language_link(self, language: str) -> str:
        return f"{self.title_form} .translatable-field:visible ul.dropdown-menu a:text-is(\"{language}\")"

    def gender_type_radio(self, gender: str) -> str:
        return f"#type_{GENDER_TYPES.get(gender, GENDER_TYPES['Neutral'])}"

    def change_language(self, tab: Page, language: str) -> None:
        if self.element_visible(tab, self.name_input(LANGUAGE_IDS[language]), 500):
            return
        self.click(tab, self.language_dropdown_button)
        self.click(tab, self.language_link(language))
        self.wait_for_visible_selector(tab, self.name_input(LANGUAGE_IDS[language]))

    def create_edit_title(self, tab: Page, title: TitleFaker) -> str:
        """Fill the form with *title*, save and return the alert text."""
        logger.info("Saving title '%s'", title.name)
        self.change_language(tab, "en")
        self.set_value(tab, self.name_input(LANGUAGE_IDS["en"]), title.name)
        if title.fr_name:
            self.change_language(tab, "fr")
            self.set_value(tab, self.name_input(LANGUAGE_IDS["fr"]), title.fr_name)
            self.change_language(tab, "en")

        self.set_checkbox(tab, self.gender_type_radio(title.gender), True)

        if title.image_name:
            self.upload_file(tab, self.image_input, title.image_name)
        self.set_value(tab, self.image_width_input, title.image_width)
        self.set_value(tab, self.image_height_input, title.image_height)

        self.click_and_wait_for_navigation(tab, self.save_title_button)
        return self.get_alert_success_block_paragraph_content(tab)


add_title_page = AddTitlePage()
