"""Pytest configuration and fixtures for Chrono tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so chrono can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from chrono.config import configure, reset_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _pinned_settings():
    """Run every test with the US locale and UTC, whatever the host says."""
    configure(locale="us", timezone="UTC")
    yield
    reset_settings()
