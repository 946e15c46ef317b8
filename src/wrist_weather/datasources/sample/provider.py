"""Turn the sample tables into readings."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from wrist_weather.datasources.sample.data import (
    SAMPLE_CURRENT,
    SAMPLE_DAILY,
    SAMPLE_HOURLY,
    SampleRow,
)
from wrist_weather.schemas import (
    Day,
    Hour,
    Instant,
    MeasurementSystem,
    WeatherInterval,
    WeatherReading,
)


def _reading(
    row: SampleRow, measurement_system: MeasurementSystem, interval: WeatherInterval
) -> WeatherReading:
    return WeatherReading(
        measurement_system=measurement_system,
        interval=interval,
        temperature_c=row.temperature,
        feel_temperature_c=row.feel_temperature,
        high_temperature_c=row.high_temperature,
        low_temperature_c=row.low_temperature,
        wind_speed_kmh=row.wind_speed,
        wind_direction=row.wind_direction,
        condition=row.condition,
    )


def add_days(moment: datetime, days: int) -> datetime:
    """
    Add calendar days, keeping the wall-clock time across DST changes.

    A fixed offset captured from the host zone (``datetime.now().astimezone()``)
    is re-resolved in the host zone; other timezones do wall-clock arithmetic
    themselves.
    """
    wall = moment.replace(tzinfo=None) + timedelta(days=days)
    host_offset = isinstance(moment.tzinfo, timezone) and (
        moment.utcoffset() == moment.astimezone().utcoffset()
    )
    if host_offset:
        return wall.astimezone()
    return wall.replace(tzinfo=moment.tzinfo)


class SampleProvider:
    """
    Serve fixed sample readings.

    Only the timestamps depend on ``now``: hourly readings sit at
    ``now + 1h`` onwards and daily readings on the
    following calendar days at the same wall-clock time.
    """

    def __init__(
        self,
        current: SampleRow = SAMPLE_CURRENT,
        hourly: tuple[SampleRow, ...] = SAMPLE_HOURLY,
        daily: tuple[SampleRow, ...] = SAMPLE_DAILY,
    ) -> None:
        self._current = current
        self._hourly = hourly
        self._daily = daily

    def current(self, measurement_system: MeasurementSystem, now: datetime) -> WeatherReading:
        return _reading(self._current, measurement_system, Instant())

    def hourly(self, measurement_system: MeasurementSystem, now: datetime) -> list[WeatherReading]:
        return [
            _reading(row, measurement_system, Hour(time=now + timedelta(hours=offset)))
            for offset, row in enumerate(self._hourly, start=1)
        ]

    def daily(self, measurement_system: MeasurementSystem, now: datetime) -> list[WeatherReading]:
        return [
            _reading(row, measurement_system, Day(date=add_days(now, offset)))
            for offset, row in enumerate(self._daily, start=1)
        ]
