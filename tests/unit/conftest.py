"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest

from feature_maybe.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate every test from ambient ``FEATURE_MAYBE_*`` variables."""
    monkeypatch.delenv("FEATURE_MAYBE_LOG_LOOKUPS", raising=False)
    monkeypatch.delenv("FEATURE_MAYBE_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
