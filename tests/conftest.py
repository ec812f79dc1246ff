"""Pytest configuration and fixtures for Globaltime tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so globaltime can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from globaltime.config import reset_config  # noqa: E402

# 2025-04-18T00:00:00Z, a Friday
FRIDAY_MS = 1_744_934_400_000


@pytest.fixture(autouse=True)
def host_utc(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pin the host timezone to UTC for every test."""
    monkeypatch.setenv("TZ", "UTC")


@pytest.fixture(autouse=True)
def clean_config():
    """Restore the default format configuration after each test."""
    yield
    reset_config()


@pytest.fixture
def friday_ms() -> int:
    return FRIDAY_MS
