"""
Repository-level pytest configuration.

Why this exists:
  - Expose the repository root to tests
  - Keep local runs predictable (config/local.yaml overlay when present)

Browser and jQuery settings are read from config/config.yaml and may be
overridden with BROWSER__* / JQUERY__* environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _local_env_defaults() -> Generator[None, None, None]:
    """
    Set environment defaults if not already provided by the user/CI.
    """
    defaults = {
        "ENVIRONMENT": "local",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
