"""Typed smoke tests for the settings loader.

These tests verify three guarantees:
1) Importing the module-level `settings` yields a `Settings` instance.
2) Environment variables override defaults after clearing the loader cache.
3) `get_logger()` respects the configured LOG_LEVEL when constructing loggers.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from fallible.core.settings import (
    Settings,
    get_logger,
    load_settings,
    settings,
)


def test_settings_instance_type() -> None:
    """`settings` should be an instance of the typed `Settings` model."""
    assert isinstance(settings, Settings)


def test_env_overrides_with_cache_clear(monkeypatch: Any) -> None:
    """Changing env vars should take effect after `load_settings.cache_clear()`."""
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    load_settings.cache_clear()
    s = load_settings()

    assert s.log_level == "DEBUG"
    assert s.log_level_numeric() == logging.DEBUG


def test_get_logger_respects_level(monkeypatch: Any) -> None:
    """`get_logger()` should apply the numeric level derived from `LOG_LEVEL`.

    A unique logger name avoids side effects between tests.
    """
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    load_settings.cache_clear()

    logger = get_logger("fallible.tests.settings")

    assert logger.level == logging.ERROR
    assert logger.propagate is False
    # Sanity: the handler exists and uses our simple formatter.
    assert logger.handlers, "Expected at least one StreamHandler to be attached."


def test_load_settings_leaves_environment_untouched(monkeypatch: Any) -> None:
    """Loading settings reads the environment without writing defaults back."""
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    before = dict(os.environ)

    load_settings.cache_clear()
    s = load_settings()

    assert s.log_level == "INFO"
    assert dict(os.environ) == before
