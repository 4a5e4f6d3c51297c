"""Base Page Object with deterministic, bounded waiting.

Implements the Page Object Model (POM) pattern for Playwright UI tests.
Page objects are stateless singletons: they hold selectors and expected
texts, and every operation receives the browser tab it should drive.  The
same instance can therefore serve several sessions.

Every primitive asserts its precondition (visible, hidden, attached) within
a bounded timeout before touching the DOM.  Playwright timeouts surface as
:class:`~backoffice_ui.errors.Timeout` subclasses, other driver failures as
:class:`~backoffice_ui.errors.DriverError`.
"""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from typing import Iterator

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..errors import DownloadMissing, DriverError, ElementNotVisible, OptionNotFound, Timeout
from ..utils.browser import download_dir_for_tab
from ..utils.browser import go_to as browser_go_to
from ..utils.config import get_config
from ..utils.files import unique_path

logger = logging.getLogger("backoffice-ui.pom")


def collapse_whitespace(text: str | None) -> str:
    """Trim *text* and collapse internal whitespace runs to single spaces."""
    return " ".join((text or "").split())


class BasePage:
    """DOM primitives shared by every page object."""

    def __init__(self) -> None:
        self.page_title = ""

        # Alert regions
        self.alert_success_block = "div.alert.alert-success:not([style*='display: none;'])"
        self.alert_success_block_paragraph = f"{self.alert_success_block} div.alert-text p"
        self.alert_danger_block = "div.alert.alert-danger:not([style*='display: none;'])"
        self.alert_danger_block_paragraph = f"{self.alert_danger_block} div.alert-text p"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _timeout(timeout: float | None) -> float:
        timeout = get_config().default_timeout_ms if timeout is None else timeout
        if timeout <= 0:
            # Playwright reads 0 as "wait forever".
            raise ValueError(f"Timeout must be a positive number of milliseconds, got {timeout!r}")
        return timeout

    @contextmanager
    def _driver_call(self, selector: str, timeout: float) -> Iterator[None]:
        """Translate Playwright failures raised inside the block."""
        try:
            yield
        except PlaywrightTimeoutError as exc:
            raise Timeout(
                f"Timed out after {timeout:g} ms on '{selector}'",
                selector=selector,
                timeout=timeout,
            ) from exc
        except PlaywrightError as exc:
            raise DriverError(f"Browser failure on '{selector}': {exc}") from exc

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def go_to(self, tab: Page, url: str) -> None:
        browser_go_to(tab, url)

    def get_page_title(self, tab: Page) -> str:
        return tab.title()

    def get_current_url(self, tab: Page) -> str:
        return tab.url

    def reload_page(self, tab: Page, timeout: float | None = None) -> None:
        """Reload the tab and wait until the network is idle."""
        timeout = self._timeout(timeout)
        with self._driver_call("<reload>", timeout):
            tab.reload(wait_until="networkidle", timeout=timeout)

    # ------------------------------------------------------------------
    # Waiting
    # ------------------------------------------------------------------

    def wait_for_visible_selector(
        self,
        tab: Page,
        selector: str,
        timeout: float | None = None,
    ) -> Locator:
        """Wait for the first element matching *selector* to be visible.

        Parameters
        ----------
        tab:
            Browser tab to query.
        selector:
            Playwright selector (CSS, text=, etc.).
        timeout:
            Milliseconds to wait; defaults to the configured timeout.

        Returns
        -------
        Locator
            Locator of the now visible element.

        Raises
        ------
        ElementNotVisible
            When the element is still not visible at the deadline.
        """
        timeout = self._timeout(timeout)
        locator = tab.locator(selector).first
        try:
            locator.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError as exc:
            raise ElementNotVisible(selector, timeout) from exc
        except PlaywrightError as exc:
            raise DriverError(f"Browser failure on '{selector}': {exc}") from exc
        return locator

    def wait_for_hidden_selector(
        self,
        tab: Page,
        selector: str,
        timeout: float | None = None,
    ) -> None:
        """Wait for *selector* to be hidden or detached."""
        timeout = self._timeout(timeout)
        try:
            tab.locator(selector).first.wait_for(state="hidden", timeout=timeout)
        except PlaywrightTimeoutError as exc:
            raise ElementNotVisible(selector, timeout, state="hidden") from exc
        except PlaywrightError as exc:
            raise DriverError(f"Browser failure on '{selector}': {exc}") from exc

    def wait_for_attached_selector(
        self,
        tab: Page,
        selector: str,
        timeout: float | None = None,
    ) -> Locator:
        timeout = self._timeout(timeout)
        locator = tab.locator(selector).first
        try:
            locator.wait_for(state="attached", timeout=timeout)
        except PlaywrightTimeoutError as exc:
            raise ElementNotVisible(selector, timeout, state="attached") from exc
        except PlaywrightError as exc:
            raise DriverError(f"Browser failure on '{selector}': {exc}") from exc
        return locator

    def element_visible(self, tab: Page, selector: str, timeout: float = 10) -> bool:
        """Return whether *selector* becomes visible within *timeout* ms.

        Only the timeout maps to ``False``; a closed or crashed browser still
        raises :class:`~backoffice_ui.errors.DriverError`.
        """
        try:
            self.wait_for_visible_selector(tab, selector, timeout)
        except ElementNotVisible:
            return False
        return True

    def element_not_visible(self, tab: Page, selector: str, timeout: float = 10) -> bool:
        try:
            self.wait_for_hidden_selector(tab, selector, timeout)
        except ElementNotVisible:
            return False
        return True

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def click(self, tab: Page, selector: str, timeout: float | None = None) -> None:
        """Scroll *selector* into view, wait for it to be visible and click it."""
        timeout = self._timeout(timeout)
        locator = tab.locator(selector).first
        try:
            locator.scroll_into_view_if_needed(timeout=timeout)
        except PlaywrightTimeoutError as exc:
            raise ElementNotVisible(selector, timeout) from exc
        except PlaywrightError as exc:
            raise DriverError(f"Browser failure on '{selector}': {exc}") from exc
        self.wait_for_visible_selector(tab, selector, timeout)
        with self._driver_call(selector, timeout):
            locator.click(timeout=timeout)

    def click_and_wait_for_navigation(
        self,
        tab: Page,
        selector: str,
        wait_until: str = "load",
        timeout: float | None = None,
    ) -> None:
        """Click *selector* and wait for the next top-frame navigation."""
        timeout = self._timeout(timeout)
        locator = self.wait_for_visible_selector(tab, selector, timeout)
        with self._driver_call(selector, timeout):
            with tab.expect_navigation(wait_until=wait_until, timeout=timeout):
                locator.click(timeout=timeout)
        logger.debug("Navigated to %s after clicking '%s'", tab.url, selector)

    def click_and_wait_for_download(
        self,
        tab: Page,
        selector: str,
        timeout: float | None = None,
    ) -> str:
        """Click *selector* and save the download it triggers.

        The download listener is armed before the click.  The file is saved
        into the tab's session download directory and its absolute path is
        returned once fully written.  A file name already taken in that
        directory gets a numeric suffix.
        """
        timeout = self._timeout(timeout)
        locator = self.wait_for_visible_selector(tab, selector, timeout)
        try:
            with tab.expect_download(timeout=timeout) as download_info:
                locator.click(timeout=timeout)
        except PlaywrightTimeoutError as exc:
            raise DownloadMissing(
                selector, f"no download event within {timeout:g} ms", timeout=timeout
            ) from exc
        except PlaywrightError as exc:
            raise DriverError(f"Browser failure on '{selector}': {exc}") from exc

        download = download_info.value
        failure = download.failure()
        if failure:
            raise DownloadMissing(selector, failure, timeout=timeout)

        target = unique_path(download_dir_for_tab(tab), download.suggested_filename)
        with self._driver_call(selector, timeout):
            download.save_as(target)

        path = str(target.resolve())
        logger.info("Downloaded '%s' to %s", download.suggested_filename, path)
        return path

    def set_value(
        self,
        tab: Page,
        selector: str,
        value: str | int | float,
        timeout: float | None = None,
    ) -> None:
        """Clear the field, type *value* and fire ``input`` and ``change``."""
        timeout = self._timeout(timeout)
        locator = self.wait_for_visible_selector(tab, selector, timeout)
        with self._driver_call(selector, timeout):
            locator.fill("", timeout=timeout)
            locator.fill(str(value), timeout=timeout)
            locator.dispatch_event("change")

    def select_by_visible_text(
        self,
        tab: Page,
        selector: str,
        label: str,
        timeout: float | None = None,
    ) -> None:
        """Select the option of *selector* whose visible label is *label*."""
        timeout = self._timeout(timeout)
        locator = self.wait_for_visible_selector(tab, selector, timeout)
        with self._driver_call(selector, timeout):
            options = [collapse_whitespace(text) for text in locator.locator("option").all_text_contents()]
        if label not in options:
            raise OptionNotFound(selector, label, options)
        with self._driver_call(selector, timeout):
            locator.select_option(label=label, timeout=timeout)

    def set_checkbox(
        self,
        tab: Page,
        selector: str,
        checked: bool = True,
        timeout: float | None = None,
    ) -> None:
        timeout = self._timeout(timeout)
        locator = self.wait_for_attached_selector(tab, selector, timeout)
        with self._driver_call(selector, timeout):
            locator.set_checked(checked, force=True, timeout=timeout)

    def upload_file(
        self,
        tab: Page,
        selector: str,
        file_path: str,
        timeout: float | None = None,
    ) -> None:
        """Attach *file_path* to a (possibly hidden) file input."""
        timeout = self._timeout(timeout)
        locator = self.wait_for_attached_selector(tab, selector, timeout)
        with self._driver_call(selector, timeout):
            locator.set_input_files(file_path, timeout=timeout)

    def dialog_listener(self, tab: Page, accept: bool = True) -> None:
        """Answer the next JavaScript dialog opened on *tab*.

        Must be called before the action that opens the dialog.
        """

        def _handle(dialog) -> None:
            logger.debug("Dialog '%s' %s", dialog.message, "accepted" if accept else "dismissed")
            if accept:
                dialog.accept()
            else:
                dialog.dismiss()

        tab.once("dialog", _handle)

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def get_text_content(
        self,
        tab: Page,
        selector: str,
        wait_for_selector: bool = True,
        timeout: float | None = None,
    ) -> str:
        """Return the trimmed, whitespace-collapsed ``textContent`` of *selector*."""
        timeout = self._timeout(timeout)
        if wait_for_selector:
            locator = self.wait_for_visible_selector(tab, selector, timeout)
        else:
            locator = tab.locator(selector).first
        with self._driver_call(selector, timeout):
            text = locator.text_content(timeout=timeout)
        return collapse_whitespace(text)

    def get_number_from_text(self, tab: Page, selector: str, timeout: float | None = None) -> int:
        """Return the integer formed by the digits in *selector*'s text."""
        text = self.get_text_content(tab, selector, timeout=timeout)
        digits = re.sub(r"\D", "", text)
        if not digits:
            raise ValueError(f"No number in text '{text}' of '{selector}'")
        return int(digits)

    def get_alert_success_block_paragraph_content(self, tab: Page, timeout: float | None = None) -> str:
        """Wait for the success alert region and return its text."""
        return self.get_text_content(tab, self.alert_success_block_paragraph, timeout=timeout)

    def get_alert_danger_block_paragraph_content(self, tab: Page, timeout: float | None = None) -> str:
        """Wait for the danger alert region and return its text."""
        return self.get_text_content(tab, self.alert_danger_block_paragraph, timeout=timeout)
