"""Shared fixtures for the job filter tests."""

import logging

import pytest

from oqa_jobfilter.logging.context import clear_log_context

ENV_VARS = ("LOG_LEVEL", "LOG_FORMAT", "ENVIRONMENT")


@pytest.fixture(autouse=True)
def clean_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove logging-related environment variables."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo configure_logging() side effects on the root logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
