import pytest

from flexacc.settings import get_settings


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Ensure settings read from the environment do not leak between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
