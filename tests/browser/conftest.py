"""Fixtures for primitives driven in a real Chromium against static markup.

Pages are loaded with ``tab.set_content``; no back office is needed.
"""

from __future__ import annotations

import pytest

from backoffice_ui.utils.browser import close_session, create_session, new_tab


@pytest.fixture()
def session(browser, ui_config):
    session = create_session(browser, ui_config)
    yield session
    close_session(session)


@pytest.fixture()
def tab(session):
    return new_tab(session)
