"""
Test suites package.

Keeps `testsuites` importable so the UI framework and page objects can be
used from:
  - the pytest suites under testsuites/unit and testsuites/ui_testing/tests
  - programmatic runners (e.g., `run_tests.py`)
  - IDE navigation
"""
