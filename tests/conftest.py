"""Test configuration and shared fixtures."""

import pytest
from loguru import logger

from destructure import logging_utils


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    """Keep ambient env vars and .env files out of compiled defaults."""
    for name in ("DESTRUCTURE_SEQUENCE_STRATEGY", "DESTRUCTURE_REWRITE_MAX_PASSES", "DESTRUCTURE_LOG_FILTER"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _quiet_package_logs():
    """Undo configure_logging() calls made by a test."""
    yield
    logger.disable("destructure")
    logging_utils._CONFIGURED_PROFILE = None
