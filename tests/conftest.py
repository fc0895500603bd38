"""Shared fixtures for jobhunter tests."""

from datetime import datetime, timezone

import pytest

from jobhunter.config import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    """Run every test against default settings, ignoring any local .env."""
    for name in ("SALARY_ORDER", "DEFAULT_CURRENCY", "MONEY_STRIP_THOUSANDS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def now():
    """Pinned anchor time for relative date parsing."""
    return datetime(2024, 6, 10, 15, 30, tzinfo=timezone.utc)
