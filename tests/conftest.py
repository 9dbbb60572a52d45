"""Shared fixtures for timephrase tests."""

from __future__ import annotations

import logging

import pytest

from timephrase.config import reset_settings
from timephrase.locales import get_registry
from timephrase.log import ROOT_LOGGER


@pytest.fixture(autouse=True)
def isolate_state(monkeypatch):
    """Reset settings, locale registry and logging between tests."""
    for name in ("TIMEPHRASE_LOCALE", "TIMEPHRASE_LOG_LEVEL", "TIMEPHRASE_LOG_FORMAT", "TIMEPHRASE_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    get_registry().reset()

    yield

    reset_settings()
    get_registry().reset()
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
