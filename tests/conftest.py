"""Shared test fixtures."""

import os

import pytest

from unique_properties.settings import get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from UNIQUE_PROPERTIES_* variables and cached settings."""
    for key in list(os.environ):
        if key.startswith("UNIQUE_PROPERTIES_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
