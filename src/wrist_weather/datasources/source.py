"""The read-only data source the watch face renders from."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Protocol

from wrist_weather.datasources.sample.provider import SampleProvider
from wrist_weather.schemas import MeasurementSystem

if TYPE_CHECKING:
    from wrist_weather.schemas import WeatherReading

logger = logging.getLogger(__name__)


class WeatherProvider(Protocol):
    """Where readings come from. Results must be in chronological order."""

    def current(self, measurement_system: MeasurementSystem, now: datetime) -> WeatherReading: ...

    def hourly(
        self, measurement_system: MeasurementSystem, now: datetime
    ) -> list[WeatherReading]: ...

    def daily(
        self, measurement_system: MeasurementSystem, now: datetime
    ) -> list[WeatherReading]: ...


class WeatherDataSource:
    """
    Current, hourly and daily readings for one session.

    Built once with a fixed measurement system and never updated; a refresh
    means building a new source.

    Args:
        measurement_system: Units every reading is displayed in. Strings such
            as ``"metric"`` or ``"us"`` are accepted.
        now: Base time for future intervals (default: local time now).
        provider: Reading supplier (default: ``SampleProvider``).
    """

    def __init__(
        self,
        measurement_system: MeasurementSystem | str,
        *,
        now: datetime | None = None,
        provider: WeatherProvider | None = None,
    ) -> None:
        self._measurement_system = MeasurementSystem.parse(measurement_system)
        self._created_at = now if now is not None else datetime.now().astimezone()
        provider = provider if provider is not None else SampleProvider()

        system, created = self._measurement_system, self._created_at
        self._current = provider.current(system, created)
        self._short_term = tuple(provider.hourly(system, created))
        self._long_term = tuple(provider.daily(system, created))

        logger.debug(
            "Built %s weather source at %s: %d hourly, %d daily readings",
            system.value,
            created.isoformat(),
            len(self._short_term),
            len(self._long_term),
        )

    @property
    def measurement_system(self) -> MeasurementSystem:
        return self._measurement_system

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def current_weather(self) -> WeatherReading:
        return self._current

    @property
    def short_term_weather(self) -> tuple[WeatherReading, ...]:
        """Hourly readings, earliest first."""
        return self._short_term

    @property
    def long_term_weather(self) -> tuple[WeatherReading, ...]:
        """Daily readings, earliest first."""
        return self._long_term

    def __repr__(self) -> str:
        return (
            f"WeatherDataSource({self._measurement_system.value!r}, "
            f"now={self._created_at.isoformat()!r})"
        )
