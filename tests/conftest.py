"""Shared test fixtures."""

import pytest
import structlog

from castle_builder.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings_and_logging():
    """Drop cached settings and logging config between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
