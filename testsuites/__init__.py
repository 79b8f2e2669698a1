"""
Test suites package.

This repository keeps `testsuites` importable to support:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)

Unit suites run against a fake script executor; UI suites drive a real
browser through Playwright.
"""
