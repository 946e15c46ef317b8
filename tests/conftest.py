"""Shared fixtures."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from wrist_weather.config import get_settings

# Wednesday, 2:30 PM
FIXED_NOW = datetime(2026, 2, 4, 14, 30, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of the tests."""
    for var in (
        "WRIST_WEATHER_MEASUREMENT_SYSTEM",
        "WRIST_WEATHER_HOUR_LABEL_FORMAT",
        "WRIST_WEATHER_DAY_LABEL_FORMAT",
        "WRIST_WEATHER_NOW_LABEL",
        "WRIST_WEATHER_DEBUG",
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
