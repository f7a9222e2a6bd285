"""Shared fixtures for the fallible test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from fallible.core.settings import load_settings


@pytest.fixture(autouse=True)  # type: ignore[misc]
def _fresh_settings() -> Iterator[None]:
    """Drop cached settings after each test so env tweaks do not leak."""
    yield
    load_settings.cache_clear()
