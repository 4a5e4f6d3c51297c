"""Pytest configuration for back office E2E scenarios with Playwright.

Scenarios run only when ``BO_BASE_URL`` points at a live back office.
Each scenario module owns one browser session; its tests are the ordered
steps of that scenario.
"""

from __future__ import annotations

import os

import pytest

from backoffice_ui.utils.browser import close_session, create_session, new_tab
from backoffice_ui.utils.config import get_config
from backoffice_ui.utils.logging_utils import configure_json_logging


def pytest_collection_modifyitems(config, items):
    """Skip e2e scenarios when no back office is configured."""
    if os.environ.get("BO_BASE_URL", "").strip():
        return
    skip_e2e = pytest.mark.skip(reason="BO_BASE_URL is not set; no back office to drive")
    for item in items:
        if item.get_closest_marker("e2e"):
            item.add_marker(skip_e2e)


@pytest.fixture(scope="session")
def bo_config():
    return get_config()


@pytest.fixture(scope="session", autouse=True)
def json_logging():
    configure_json_logging(os.environ.get("LOG_LEVEL", "INFO"))


@pytest.fixture(scope="module")
def bo_session(browser, bo_config):
    """One isolated browser session per scenario module."""
    session = create_session(browser, bo_config)
    yield session
    close_session(session)


@pytest.fixture(scope="module")
def tab(bo_session):
    return new_tab(bo_session)


@pytest.fixture(scope="module")
def state() -> dict:
    """Values carried from one step of a scenario to the next."""
    return {}
