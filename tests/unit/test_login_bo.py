"""Unit tests for the shared back office login step."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from backoffice_ui.common_tests.login_bo import login_bo, logout_bo
from backoffice_ui.errors import UIError
from backoffice_ui.pages.login import login_page


@pytest.mark.unit
class TestLoginBO:
    def test_logs_in_and_records_step(self, tab, locator_map, ui_config):
        locators = locator_map()
        tab.title.return_value = "Dashboard • PrestaShop"
        scenario = SimpleNamespace(node=SimpleNamespace(user_properties=[]))

        login_bo(scenario, tab, ui_config)

        tab.goto.assert_called_once_with(ui_config.base_url, wait_until="load")
        assert locators[login_page.email_input].first.fill.call_args_list[-1].args[0] == ui_config.login_email
        assert scenario.node.user_properties == [("loginBO.testIdentifier", "loginBO")]

    def test_fails_when_dashboard_is_not_reached(self, tab, locator_map, ui_config):
        locator_map()
        tab.title.return_value = "PrestaShop - Login"

        with pytest.raises(UIError, match="Dashboard"):
            login_bo(None, tab, ui_config)

    def test_logout(self, tab, locator_map):
        locators = locator_map()

        logout_bo(None, tab)

        locators["#header_logout"].first.click.assert_called_once()
        locators[login_page.email_input].first.wait_for.assert_called_once()
