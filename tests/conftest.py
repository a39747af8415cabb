"""Shared fixtures for the prettylog test suite."""

import pytest

from prettylog.logger import LoggerManager


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Tests start without color or level overrides and with no cached loggers."""
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("PRETTYLOG_LEVEL", raising=False)
    LoggerManager.reset()
    yield
    LoggerManager.reset()
