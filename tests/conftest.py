"""Shared fixtures."""

import pytest

from balance_formatter.config import load_settings

SETTINGS_ENV = (
    "BALANCE_MAX_DECIMALS",
    "BALANCE_SUBSCRIPT_THRESHOLD",
    "BALANCE_SIGNIFICANT_DIGITS",
    "BALANCE_OUTPUT",
    "CACHE_TTL_SECONDS",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from the host environment and the settings cache."""
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()
