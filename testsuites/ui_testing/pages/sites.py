"""
Fixed URLs of the demo sites covered by the page objects.
"""

from pathlib import Path

GURU99_BASE_URL = "https://demo.guru99.com"
GURU99_TOOLTIPS_URL = f"{GURU99_BASE_URL}/test/tooltip.html"
GURU99_DRAG_DROP_URL = f"{GURU99_BASE_URL}/test/drag_drop.html"

AUTOMATION_DEMO_BASE_URL = "https://demo.automationtesting.in"
AUTOMATION_DEMO_ALERTS_URL = f"{AUTOMATION_DEMO_BASE_URL}/Alerts.html"
AUTOMATION_DEMO_DATE_PICKER_URL = f"{AUTOMATION_DEMO_BASE_URL}/Datepicker.html"
AUTOMATION_DEMO_WINDOWS_URL = f"{AUTOMATION_DEMO_BASE_URL}/Windows.html"
AUTOMATION_DEMO_UPLOAD_URL = f"{AUTOMATION_DEMO_BASE_URL}/FileUpload.html"
AUTOMATION_DEMO_DOWNLOAD_URL = f"{AUTOMATION_DEMO_BASE_URL}/FileDownload.html"

# Upload fixture shipped with the suite
SAMPLE_FILE_PATH = Path(__file__).resolve().parent.parent / "data" / "sample.jpg"
