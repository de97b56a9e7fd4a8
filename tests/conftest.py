"""Root conftest — shared test configuration."""

import os

import pytest

from envgate.config import get_settings

# Tests must never inherit the escape hatch from the developer's shell
os.environ.pop("SKIP_ENV_VALIDATION", None)
os.environ.pop("ENV_EXPOSURE_PREFIX", None)


@pytest.fixture(autouse=True)
def _fresh_settings():
    """get_settings() is lru_cached — reset around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
