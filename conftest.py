"""Root conftest: shared fixtures available to all test layers."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from backoffice_ui.utils.config import UIConfig, get_config

CONFIG_ENV_VARS = (
    "BO_BASE_URL",
    "DEFAULT_TIMEOUT_MS",
    "DOWNLOAD_DIR",
    "VIEWPORT_WIDTH",
    "VIEWPORT_HEIGHT",
    "LOCALE",
    "HEADLESS",
    "BO_LOGIN_EMAIL",
    "BO_LOGIN_PASSWORD",
)


@pytest.fixture()
def tab() -> MagicMock:
    """A mocked Playwright ``Page`` whose locators all resolve immediately."""
    page = MagicMock(name="tab")
    page.url = "http://localhost/admin-dev/index.php"
    return page


@pytest.fixture()
def locator(tab: MagicMock) -> MagicMock:
    """The locator every selector of the mocked ``tab`` resolves to."""
    return tab.locator.return_value.first


@pytest.fixture()
def ui_config(tmp_path: Path) -> UIConfig:
    """Configuration with a private download directory and short timeout."""
    return UIConfig(
        base_url="http://shop.test/admin-dev/",
        default_timeout_ms=2_000,
        download_dir=tmp_path / "downloads",
    )


@pytest.fixture()
def clean_env():
    """Clear configuration env vars and the cached config for isolation."""
    with patch.dict(os.environ, {name: "" for name in CONFIG_ENV_VARS}, clear=False):
        get_config.cache_clear()
        yield
    get_config.cache_clear()


@pytest.fixture()
def locator_map(tab: MagicMock):
    """Give every selector its own mocked locator.

    Returns a function ``(missing=()) -> dict`` that installs the factory;
    selectors listed in *missing* never become visible.  The returned dict
    maps selector to the ``Locator`` mock handed out for it.
    """
    from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

    def install(missing=()) -> dict[str, MagicMock]:
        created: dict[str, MagicMock] = {}

        def factory(selector: str) -> MagicMock:
            if selector not in created:
                loc = MagicMock(name=selector)
                if selector in missing:
                    loc.first.wait_for.side_effect = PlaywrightTimeoutError(f"{selector} not visible")
                    loc.first.scroll_into_view_if_needed.side_effect = PlaywrightTimeoutError(
                        f"{selector} not attached"
                    )
                created[selector] = loc
            return created[selector]

        tab.locator.side_effect = factory
        return created

    return install
