"""Page objects for the Applitools demo app."""

from .dashboard_page import DashboardPage
from .login_page import LoginPage

__all__ = [
    "DashboardPage",
    "LoginPage",
]
