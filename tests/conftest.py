"""Shared test fixtures."""

from __future__ import annotations

import pytest
import structlog

from selectorkit.config.settings import get_settings


@pytest.fixture(autouse=True)
def _reset_state():
    """Clear cached settings and structlog configuration around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
