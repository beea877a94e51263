"""
Pytest configuration and shared fixtures for MissMatch tests.
"""
import pytest

from missmatch.constants import ENV_CACHE, ENV_DEBUG, ENV_FORMAT
from missmatch.patterns import get_default_cache


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Every test starts from default configuration and an empty cache."""
    for name in (ENV_CACHE, ENV_DEBUG, ENV_FORMAT):
        monkeypatch.delenv(name, raising=False)
    get_default_cache().clear()
    yield
    get_default_cache().clear()
