"""Pytest configuration and shared fixtures for resultkit tests."""

from __future__ import annotations

import pytest

from resultkit import _config
from resultkit._logging import clear_log_hooks


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from resultkit import Ok

    return Ok(42)


@pytest.fixture
def sample_error():
    """Sample Error value for testing."""
    from resultkit import Error

    return Error(ValueError('test error'))


@pytest.fixture(autouse=True)
def reset_config(monkeypatch: pytest.MonkeyPatch):
    """Restore default configuration and drop log hooks around each test."""
    monkeypatch.delenv('RESULTKIT_LOG_LEVEL', raising=False)
    monkeypatch.delenv('RESULTKIT_TRACE_FAULTS', raising=False)
    monkeypatch.setattr(_config, '_config', _config.ResultConfig())
    clear_log_hooks()
    yield
    clear_log_hooks()
