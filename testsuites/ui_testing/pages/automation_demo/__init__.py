"""Page objects for demo.automationtesting.in."""

from .alert_page import AlertPage
from .date_picker_page import DatePickerPage

__all__ = [
    "AlertPage",
    "DatePickerPage",
]
