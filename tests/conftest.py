"""Pytest configuration and fixtures."""

import logging
from unittest.mock import Mock

import pytest

from affirm.config import get_settings
from affirm.filesystem import LocalFileSystem
from affirm.info import AssertionInfo
from affirm.reporter import FailureReporter, Failures


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up affirm loggers after each test to prevent name collisions."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("affirm")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Every test starts from default settings."""
    monkeypatch.delenv("AFFIRM_CONFIG", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def info():
    return AssertionInfo(description="some info")


@pytest.fixture
def failures():
    """Real reporting sink wrapped in a spy so tests can verify its calls."""
    return Mock(wraps=Failures())


@pytest.fixture
def reporter(failures):
    return FailureReporter(failures)


class UnreadableFileSystem(LocalFileSystem):
    def is_readable(self, path):
        return False


class BrokenStreamFileSystem(LocalFileSystem):
    def __init__(self, error: OSError):
        self.error = error

    def open_binary(self, path):
        raise self.error


@pytest.fixture
def unreadable_fs():
    return UnreadableFileSystem()


@pytest.fixture
def broken_stream_fs():
    def _make(error: OSError):
        return BrokenStreamFileSystem(error)

    return _make
