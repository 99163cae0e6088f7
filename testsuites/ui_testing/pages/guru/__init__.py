"""Page objects for the Guru99 demo site."""

from .drag_drop_page import DragDropPage
from .login_page import LoginPage
from .tooltips_page import ToolTipsPage

__all__ = [
    "DragDropPage",
    "LoginPage",
    "ToolTipsPage",
]
