"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers and tags tests by the directory they live in.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for release"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "unit: Tests that run against a fake script executor"
    )
    config.addinivalue_line(
        "markers", "ui: Tests that drive a real browser"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "traversal: Selector traversal operations"
    )
    config.addinivalue_line(
        "markers", "mutation: DOM mutating operations"
    )


def pytest_collection_modifyitems(config, items):
    """
    Modify collected test items.

    Tests under unit/ get the 'unit' marker, tests under ui_testing/ get 'ui'.
    """
    for item in items:
        path = str(item.fspath)
        if "unit" in path.split("testsuites")[-1]:
            item.add_marker(pytest.mark.unit)

        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "jQuery Tools - Selector Automation",
        "=" * 60,
        "",
    ]
