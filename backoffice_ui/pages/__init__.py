"""Page Object Model classes for the back office."""

from .base_page import BasePage
from .bo_base_page import BOBasePage
from .dashboard import DashboardPage, dashboard_page
from .login import LoginPage, login_page

__all__ = ["BasePage", "BOBasePage", "DashboardPage", "LoginPage", "dashboard_page", "login_page"]
