"""Shared fixtures: quiet generator logs and fresh settings per test."""

import logging
import pytest

from shrinkgen.config import reset_settings
from shrinkgen.logging import LOG_LEVEL_ENV


@pytest.fixture(autouse=True)
def quiet_generator_logs(monkeypatch):
    """Keep shrinkgen loggers at WARNING; exhausted filters log errors on purpose."""
    monkeypatch.setenv(LOG_LEVEL_ENV, "WARNING")
    logging.getLogger().setLevel(logging.WARNING)
    logging.getLogger("shrinkgen.arbitrary.definition").setLevel(logging.CRITICAL)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read SHRINKGEN_* settings for every test."""
    reset_settings()
    yield
    reset_settings()
