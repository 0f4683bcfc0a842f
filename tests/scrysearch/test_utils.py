"""Tests for logger setup."""

import logging

import pytest

from scrysearch import constants
from scrysearch.utils import init_logger


@pytest.fixture
def access_logger(tmp_path, monkeypatch):
    monkeypatch.setattr(constants, "LOG_PATH", tmp_path / "logs")
    logger = logging.getLogger("aiohttp.access")
    level = logger.level
    yield logger
    logger.setLevel(level)


def test_access_log_quiet_by_default(access_logger, monkeypatch):
    monkeypatch.delenv("SCRYSEARCH_DEBUG", raising=False)
    init_logger()

    assert access_logger.level == logging.WARNING
    assert not access_logger.isEnabledFor(logging.INFO)


@pytest.mark.parametrize("flag", ["true", "1", "TRUE"])
def test_access_log_enabled_when_debugging(access_logger, monkeypatch, flag):
    monkeypatch.setenv("SCRYSEARCH_DEBUG", flag)
    init_logger()

    assert access_logger.level == logging.DEBUG
