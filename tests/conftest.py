"""
Shared pytest fixtures for all tests.
"""

import pytest

from request_logger.config import get_settings

# Import fixtures
pytest_plugins = ["tests.fixtures.requests", "tests.fixtures.app"]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate tests from color and logger environment variables."""
    for name in (
        "FORCE_COLOR",
        "NO_COLOR",
        "REQUEST_LOGGER_LOG_IP",
        "REQUEST_LOGGER_WRITER",
        "REQUEST_LOGGER_COLORS",
        "REQUEST_LOGGER_MAX_BODY_BYTES",
        "REQUEST_LOGGER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
