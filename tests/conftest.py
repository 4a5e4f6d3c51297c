"""Test-layer conftest: marker registration and the shared browser."""

from __future__ import annotations

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from backoffice_ui.utils.config import get_config


def pytest_configure(config):
    """Register custom markers so --strict-markers does not complain."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no browser)")
    config.addinivalue_line("markers", "browser: Primitives against local markup (needs Chromium, no back office)")
    config.addinivalue_line("markers", "e2e: End-to-end Playwright scenarios against a live back office")
    config.addinivalue_line("markers", "slow: Slow-running tests")


@pytest.fixture(scope="session")
def browser():
    """Launch Chromium once per run; skip dependent tests when it is not installed."""
    with sync_playwright() as p:
        try:
            browser = p.chromium.launch(headless=get_config().headless)
        except PlaywrightError as exc:
            pytest.skip(f"Chromium cannot be launched: {exc}")
        yield browser
        browser.close()
