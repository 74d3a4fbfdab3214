# -*- coding: utf-8 -*-
"""Location: ./tests/conftest.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti
"""

# Standard
import logging

# Third-Party
import pytest

# First-Party
from transmute.classify.classifier import Classifier
from transmute.config import get_settings, Settings
from transmute.services.conversion_service import ConversionService


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Clear cached settings and TRANSMUTE_* variables around every test."""
    for name in ("TRANSMUTE_LOG_LEVEL", "TRANSMUTE_DEFAULT_HASH", "TRANSMUTE_CONVERT_TARGETS", "TRANSMUTE_JSON_INDENT", "TRANSMUTE_LOG_TO_FILE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach handlers added to the transmute logger by a test."""
    root = logging.getLogger("transmute")
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    root.propagate = True


@pytest.fixture
def test_settings():
    """Settings with defaults, isolated from any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def classifier():
    """A default classifier."""
    return Classifier()


@pytest.fixture
def service():
    """A conversion service with a default classifier."""
    return ConversionService()
