"""Property test fixtures.

Hypothesis runs many examples per test function, so the per-test
environment fixture is replaced by a module-scoped one here.
"""

import os

import pytest

from missmatch.constants import ENV_CACHE, ENV_DEBUG, ENV_FORMAT
from missmatch.patterns import get_default_cache


@pytest.fixture(autouse=True, scope="module")
def clean_environment():
    saved = {name: os.environ.pop(name) for name in (ENV_CACHE, ENV_DEBUG, ENV_FORMAT) if name in os.environ}
    get_default_cache().clear()
    yield
    get_default_cache().clear()
    os.environ.update(saved)
